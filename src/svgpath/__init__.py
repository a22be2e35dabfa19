"""svgpath – fluent builder for SVG path data."""

from __future__ import annotations

from ._format import format_flag, format_number
from .path import Path

__all__ = ["Path", "format_number", "format_flag", "__version__"]

__version__ = "0.1.0"
