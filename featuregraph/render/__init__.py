"""Render helpers for analysis reports."""

from .svg import SvgRenderer

__all__ = ["SvgRenderer"]
