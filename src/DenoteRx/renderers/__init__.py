"""Renderers turning pattern fragments into concrete pattern strings."""

from __future__ import annotations

from DenoteRx.renderers.regex import RegexRenderer, render_regexp

__all__ = ["RegexRenderer", "render_regexp"]
