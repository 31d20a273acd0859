"""Category discovery, include resolution, tree building and rendering."""

from .builder import TraversalState, TreeBuilder, build_forest
from .registry import category_name, scan
from .renderer import TreeRenderer, render_ascii, render_json, to_structured_document
from .resolver import INCLUDE_MARKER, parse_includes

__all__ = [
    "INCLUDE_MARKER",
    "TraversalState",
    "TreeBuilder",
    "TreeRenderer",
    "build_forest",
    "category_name",
    "parse_includes",
    "render_ascii",
    "render_json",
    "scan",
    "to_structured_document",
]
