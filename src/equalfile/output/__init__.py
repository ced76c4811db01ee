"""Public API for equalfile.output."""

from __future__ import annotations

from equalfile.output.base import Renderer
from equalfile.output.json_output import JsonRenderer
from equalfile.output.rich_output import RichRenderer

__all__ = [
    "JsonRenderer",
    "Renderer",
    "RichRenderer",
]
