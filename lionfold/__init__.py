# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import logging

from . import _types as types
from . import ln as ln
from ._errors import ItemNotFoundError, LionFoldError, ValidationError
from ._types import (
    BinaryFunction,
    Collection,
    CollectionProto,
    UnaryFunction,
    UnaryPredicate,
)
from .config import settings
from .ln import cfilter, cmap, cmapx, creduce, creduce_first
from .protocols.generic.vector import Vector
from .version import __version__

logger = logging.getLogger(__name__)
logger.setLevel(settings.LOG_LEVEL)


__all__ = (
    "__version__",
    "BinaryFunction",
    "Collection",
    "CollectionProto",
    "ItemNotFoundError",
    "LionFoldError",
    "UnaryFunction",
    "UnaryPredicate",
    "ValidationError",
    "Vector",
    "cfilter",
    "cmap",
    "cmapx",
    "creduce",
    "creduce_first",
    "ln",
    "logger",
    "settings",
    "types",
)
