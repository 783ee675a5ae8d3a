"""Mock portfolio datasets."""

from .generator import build_portfolio, get_portfolio

__all__ = [
    "build_portfolio",
    "get_portfolio",
]
