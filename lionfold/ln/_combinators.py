# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Map, filter and fold over any `Collection`.

Every combinator reads the collection's length exactly once and then
walks the indices in order through `item`. What happens if the
collection is mutated during the walk is undefined. Exceptions raised by
callbacks or by out-of-range access propagate unchanged.
"""

from __future__ import annotations

import logging
from typing import Any

from lionfold.config import settings
from lionfold.protocols._concepts import (
    BinaryFunction,
    UnaryFunction,
    UnaryPredicate,
)
from lionfold.protocols.contracts import CollectionProto

__all__ = (
    "cmap",
    "cmapx",
    "creduce",
    "creduce_first",
    "cfilter",
)

logger = logging.getLogger(__name__)


def _trace(name: str, c: CollectionProto, length: int) -> None:
    if settings.TRACE_COMBINATORS:
        logger.debug(
            "%s over %s (length=%d)", name, type(c).__name__, length
        )


def cmap(c: CollectionProto, f: UnaryFunction, /) -> CollectionProto:
    """Applies `f` to each element and collects the results.

    The results go into a new collection obtained from ``c.empty()``;
    `c` itself is left unchanged.

    Args:
        c: The source collection.
        f: Called once per element, left to right.

    Returns:
        A collection of the same kind as `c` holding ``f(c.item(i))``
        for every index ``i``.
    """
    length = c.length()
    _trace("cmap", c, length)

    results = c.empty()
    for index in range(length):
        results = results.append(f(c.item(index)))
    return results


def cmapx(c: CollectionProto, f: UnaryFunction, /) -> CollectionProto:
    """Like `cmap`, but replaces each element of `c` in place and returns `c`."""
    length = c.length()
    _trace("cmapx", c, length)

    for index in range(length):
        c.set_item(index, f(c.item(index)))
    return c


def creduce(c: CollectionProto, f: BinaryFunction, initial: Any, /) -> Any:
    """Left fold of `f` over `c`, starting from `initial`.

    `f` receives the accumulator first and the current element second.
    An empty collection returns `initial` unchanged.
    """
    length = c.length()
    _trace("creduce", c, length)

    result = initial
    for index in range(length):
        result = f(result, c.item(index))
    return result


def creduce_first(c: CollectionProto, f: BinaryFunction, /) -> Any:
    """Like `creduce`, but seeded with the first element of `c`.

    There is no identity value to fall back on, so an empty collection
    fails with the collection's out-of-range error (`ItemNotFoundError`
    for `Vector`).
    """
    length = c.length()
    _trace("creduce_first", c, length)

    result = c.item(0)
    for index in range(1, length):
        result = f(result, c.item(index))
    return result


def cfilter(c: CollectionProto, p: UnaryPredicate, /) -> CollectionProto:
    """Returns a new collection with the elements of `c` for which `p` is true.

    Relative order is kept and `c` is left unchanged.
    """
    length = c.length()
    _trace("cfilter", c, length)

    results = c.empty()
    for index in range(length):
        item = c.item(index)
        if p(item):
            results = results.append(item)
    return results
