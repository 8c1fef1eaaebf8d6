# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator
from typing_extensions import Self

from lionfold._errors import ItemNotFoundError, ValidationError

from .._concepts import Collection

__all__ = ("Vector",)


class Vector(BaseModel, Collection):
    """A collection backed by a contiguous Python list.

    `Vector` is the reference implementation of `Collection`. Elements
    are opaque values; nothing about their type is checked. `append`
    mutates the receiver and returns it, so the returned reference and
    the receiver are the same object.

    Attributes:
        items (list[Any]):
            The elements, addressable by indices ``[0, length())``.
    """

    items: list[Any] = Field(
        default_factory=list,
        title="Items",
        description="The ordered elements of the vector.",
    )

    @field_validator("items", mode="before")
    def _validate_items(cls, value: Any) -> Any:
        """Treats `None` as empty and copies the seed sequence.

        Args:
            value (Any): The seed sequence, or None.

        Returns:
            Any: A new list when `value` is a list or tuple, otherwise
                `value` unchanged for pydantic to validate.
        """
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return list(value)
        return value

    @classmethod
    def from_items(cls, items: Iterable[Any] | None = None, /) -> Self:
        """Creates a vector initially containing `items`.

        `items` may be None, in which case the vector starts empty. The
        elements are copied; later changes to `items` do not reach the
        vector.

        Raises:
            ValidationError: If `items` is a string, bytes, a mapping, or
                not iterable at all.
        """
        if items is None:
            return cls()
        if isinstance(items, (str, bytes, bytearray, Mapping)):
            raise ValidationError.from_value(
                items,
                expected="iterable of items",
                message="items must be a sequence, not a string or mapping",
            )
        try:
            values = list(items)
        except TypeError as e:
            raise ValidationError.from_value(
                items,
                expected="iterable of items",
                message="items must be iterable",
                cause=e,
            )
        return cls(items=values)

    @classmethod
    def from_ints(cls, ints: Iterable[int] | None = None, /) -> Self:
        """Creates a vector from a sequence of integers.

        Args:
            ints (Iterable[int] | None): The integers, or None for an
                empty vector.

        Returns:
            Self: A vector whose elements are the given integers.

        Raises:
            ValidationError: If any element is not an `int`. `bool` is
                rejected even though it subclasses `int`.
        """
        if ints is None:
            return cls()
        values = list(ints)
        for index, value in enumerate(values):
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValidationError.from_value(
                    value,
                    expected="int",
                    message=f"element {index} is not an integer",
                    index=index,
                )
        return cls(items=values)

    def _check_index(self, index: Any) -> None:
        if not isinstance(index, int) or isinstance(index, bool):
            key_cls = index.__class__.__name__
            raise TypeError(f"indices must be integers, not {key_cls}")
        if not 0 <= index < len(self.items):
            raise ItemNotFoundError.out_of_range(index, len(self.items))

    def item(self, index: int, /) -> Any:
        """Returns the element at `index`.

        Raises:
            ItemNotFoundError: If `index` is outside ``[0, length())``.
                Negative indices do not wrap around.
            TypeError: If `index` is not an integer.
        """
        self._check_index(index)
        return self.items[index]

    def set_item(self, index: int, value: Any, /) -> Any:
        """Sets the element at `index` to `value`.

        Returns:
            Any: The element previously stored at `index`.

        Raises:
            ItemNotFoundError: If `index` is outside ``[0, length())``.
            TypeError: If `index` is not an integer.
        """
        old = self.item(index)
        self.items[index] = value
        return old

    def length(self) -> int:
        return len(self.items)

    def append(self, item: Any, /) -> Self:
        """Appends `item` in place and returns the receiver."""
        self.items.append(item)
        return self

    def empty(self) -> Self:
        """Returns a new, empty vector of the receiver's class."""
        return self.__class__()

    def to_list(self) -> list[Any]:
        """Returns a shallow copy of the elements."""
        return list(self.items)

    def to_dict(
        self, mode: Literal["json", "python"] = "python", **kwargs: Any
    ) -> dict[str, Any]:
        return self.model_dump(mode=mode, **kwargs)

    def __str__(self) -> str:
        """Renders the vector as ``[e0 e1 e2]``."""
        return "[" + " ".join(str(i) for i in self.items) + "]"

    def __len__(self) -> int:
        return self.length()

    def __bool__(self) -> bool:
        return bool(self.items)

    def __getitem__(self, index: int) -> Any:
        return self.item(index)

    def __setitem__(self, index: int, value: Any) -> None:
        self.set_item(index, value)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)


# File: lionfold/protocols/generic/vector.py
