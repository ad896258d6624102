"""Utility modules for Screenwrite."""

from screenwrite.utils.screenplay import ScreenplayUtils

__all__ = ["ScreenplayUtils"]
