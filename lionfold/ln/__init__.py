from ._combinators import cfilter, cmap, cmapx, creduce, creduce_first

__all__ = (
    "cfilter",
    "cmap",
    "cmapx",
    "creduce",
    "creduce_first",
)
