# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Runtime-checkable protocols for structural collection interfaces.

Protocols define structural contracts (duck typing) with isinstance() support.
A container does not need to subclass `Collection` to be used with the
combinators; having the five methods is enough.
"""

from __future__ import annotations

from typing import Any, Literal, Protocol, runtime_checkable

__all__ = (
    "CollectionProto",
    "Serializable",
)


@runtime_checkable
class CollectionProto(Protocol):
    """Structural Collection protocol.

    Mirrors the abstract methods of `Collection`. Note that isinstance()
    only checks the methods exist, not their signatures.
    """

    def item(self, index: int, /) -> Any: ...

    def set_item(self, index: int, value: Any, /) -> Any: ...

    def length(self) -> int: ...

    def append(self, item: Any, /) -> CollectionProto: ...

    def empty(self) -> CollectionProto: ...


@runtime_checkable
class Serializable(Protocol):
    """Can serialize to dict. Implement to_dict(**kwargs) -> dict."""

    def to_dict(
        self, mode: Literal["json", "python"] = "python", **kwargs: Any
    ) -> dict[str, Any]: ...
