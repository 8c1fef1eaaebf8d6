# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

__all__ = (
    "Collection",
    "UnaryFunction",
    "UnaryPredicate",
    "BinaryFunction",
)

UnaryFunction = Callable[[Any], Any]
"""Callback for `cmap` and `cmapx`."""

UnaryPredicate = Callable[[Any], bool]
"""Callback for `cfilter`."""

BinaryFunction = Callable[[Any, Any], Any]
"""Callback for `creduce` and `creduce_first`: (accumulator, element)."""


class Collection(ABC):
    """Base for generic containers with indexed access to each element.

    `item` returns the element at `index`. Indices outside
    ``[0, length())`` are a contract violation and must raise.

    `set_item` replaces the element at `index` with `value` and returns
    the element previously stored there.

    `length` returns the number of elements.

    `append` adds `item` to the end and returns a collection holding all
    prior elements followed by `item`. Whether that is the receiver or a
    new object is up to the implementation, so callers must always keep
    the returned reference and treat the pre-call one as stale.

    `empty` returns a new, empty collection of the same kind that shares
    nothing with the receiver. Non-destructive combinators build their
    results from it.
    """

    @abstractmethod
    def item(self, index: int, /) -> Any:
        pass

    @abstractmethod
    def set_item(self, index: int, value: Any, /) -> Any:
        pass

    @abstractmethod
    def length(self) -> int:
        pass

    @abstractmethod
    def append(self, item: Any, /) -> Collection:
        pass

    @abstractmethod
    def empty(self) -> Collection:
        pass


# File: lionfold/protocols/_concepts.py
