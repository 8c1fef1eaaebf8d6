# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar

__all__ = (
    "LionFoldError",
    "ValidationError",
    "ItemNotFoundError",
)


class LionFoldError(Exception):
    default_message: ClassVar[str] = "lionfold error"

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message or self.default_message)
        if cause:
            self.__cause__ = cause  # preserves traceback
        self.message = message or self.default_message
        self.details = details or {}

    def to_dict(self, *, include_cause: bool = False) -> dict[str, Any]:
        data = {
            "error": self.__class__.__name__,
            "message": self.message,
            **({"details": self.details} if self.details else {}),
        }
        if include_cause and (cause := self.get_cause()):
            data["cause"] = repr(cause)
        return data

    def get_cause(self) -> Exception | None:
        """Get the cause of this error, if any."""
        return self.__cause__


class ValidationError(LionFoldError):
    """Exception raised when constructor input fails validation."""

    default_message = "Validation failed"

    @classmethod
    def from_value(
        cls,
        value: Any,
        *,
        expected: str | None = None,
        message: str | None = None,
        cause: Exception | None = None,
        **extra: Any,
    ):
        """Create a ValidationError from a value with optional expected type and message."""
        details = {
            "value": value,
            "type": type(value).__name__,
            **({"expected": expected} if expected else {}),
            **extra,
        }
        return cls(message=message, details=details, cause=cause)


class ItemNotFoundError(LionFoldError, IndexError):
    """Raised on item access outside ``[0, length())``.

    Also an ``IndexError`` so plain ``except IndexError`` handlers keep working.
    """

    default_message = "Item not found"

    @classmethod
    def out_of_range(
        cls,
        index: int,
        length: int,
        *,
        cause: Exception | None = None,
    ):
        return cls(
            message=f"index {index} out of range for length {length}",
            details={"index": index, "length": length},
            cause=cause,
        )
