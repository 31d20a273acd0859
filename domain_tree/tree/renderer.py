"""ASCII, JSON and HTML rendering for category forests."""

from __future__ import annotations

import html
import json
from datetime import datetime, timedelta, timezone
from typing import Iterable

from ..errors import SerializationError
from ..models import CategoryNode, Forest
from .templates import COMPANY_KEYWORDS, COUNTRY_CODES, DEFAULT_TITLE, HTML_TEMPLATE

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marks the end of a node's children block on the HTML render stack.
_CLOSE_CHILDREN = object()


def to_structured_document(forest: Forest) -> dict:
    """Convert the forest into nested ``{name, children}`` mappings.

    ``children`` is omitted for leaves; keys are inserted in sorted order.
    """
    document: dict = {"name": forest.name}
    if forest.roots:
        document["children"] = {
            node.name: _node_to_dict(node) for node in forest.sorted_roots()
        }
    return document


def _node_to_dict(node: CategoryNode) -> dict:
    """Convert a CategoryNode to a JSON-serializable dictionary."""
    result: dict = {"name": node.name}
    stack = [(node, result)]
    while stack:
        current, target = stack.pop()
        if not current.children:
            continue
        children: dict = {}
        target["children"] = children
        for child in current.sorted_children():
            child_dict: dict = {"name": child.name}
            children[child.name] = child_dict
            stack.append((child, child_dict))
    return result


def render_json(forest: Forest, indent: int = 2) -> str:
    """Render the forest as a JSON string."""
    try:
        return json.dumps(to_structured_document(forest), indent=indent, ensure_ascii=False)
    except (TypeError, ValueError, RecursionError) as e:
        raise SerializationError(f"Could not encode category tree: {e}") from e


def render_ascii(forest: Forest) -> str:
    """Render the full forest as an ASCII string."""
    lines = [forest.name]
    roots = forest.sorted_roots()
    stack = [(root, "", i == len(roots) - 1) for i, root in enumerate(roots)]
    stack.reverse()
    while stack:
        node, prefix, is_last = stack.pop()
        lines.append(prefix + ("└── " if is_last else "├── ") + node.name)
        child_prefix = prefix + ("    " if is_last else "│   ")
        children = node.sorted_children()
        for i in reversed(range(len(children))):
            stack.append((children[i], child_prefix, i == len(children) - 1))

    lines.append("")
    lines.append(
        f"{forest.total_categories} categories | {len(forest.roots)} roots | max depth {forest.max_depth()}"
    )
    return "\n".join(lines)


class TreeRenderer:
    """Renders a forest as an interactive HTML page.

    The template and the keyword lists used for node classification are
    injectable so callers (and tests) can substitute their own.
    """

    def __init__(
        self,
        template: str = HTML_TEMPLATE,
        companies: Iterable[str] = COMPANY_KEYWORDS,
        country_codes: Iterable[str] = COUNTRY_CODES,
        source_url: str | None = None,
        display_offset: timedelta = timedelta(hours=8),
        title: str = DEFAULT_TITLE,
    ):
        self.template = template
        self.companies = tuple(companies)
        self.country_codes = frozenset(country_codes)
        self.source_url = source_url
        self.display_timezone = timezone(display_offset)
        self.title = title

    def classify(self, name: str) -> str:
        """Pick the presentation class for a category name."""
        if name.startswith("category-"):
            return "category"
        if any(company in name for company in self.companies):
            return "company"
        if name.startswith("geo") or name in self.country_codes:
            return "geo"
        return "service"

    def format_timestamp(self, generated_at: datetime) -> str:
        # Naive timestamps are taken as UTC.
        if generated_at.tzinfo is None:
            generated_at = generated_at.replace(tzinfo=timezone.utc)
        return generated_at.astimezone(self.display_timezone).strftime(TIMESTAMP_FORMAT)

    def render_tree_html(self, forest: Forest) -> str:
        """Render only the nested node blocks, without the page around them."""
        parts: list[str] = []
        stack: list = list(reversed(forest.sorted_roots()))
        while stack:
            item = stack.pop()
            if item is _CLOSE_CHILDREN:
                parts.append("</div>")
                continue
            parts.append(self._node_block(item))
            if item.children:
                parts.append('<div class="children hidden">')
                stack.append(_CLOSE_CHILDREN)
                stack.extend(reversed(item.sorted_children()))
        return "".join(parts)

    def to_annotated_markup(self, forest: Forest, generated_at: datetime) -> str:
        """Render the complete HTML page for ``forest``."""
        return self.template.format(
            title=html.escape(self.title),
            generated_at=html.escape(self.format_timestamp(generated_at)),
            total_categories=forest.total_categories,
            tree_html=self.render_tree_html(forest),
        )

    def _node_block(self, node: CategoryNode) -> str:
        classes = ["node"]
        if node.children:
            classes.append("collapsible")
        classes.append(self.classify(node.name))

        label = f'<span class="node-content">{html.escape(node.name)}</span>'
        return f'<div class="{" ".join(classes)}">{label}{self._source_link(node.name)}</div>'

    def _source_link(self, name: str) -> str:
        if not self.source_url:
            return ""
        href = html.escape(self.source_url.format(name=name))
        return (
            f'<a href="{href}" target="_blank" class="view-source-btn" '
            f'onclick="event.stopPropagation()">Source</a>'
        )
