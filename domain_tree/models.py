#!/usr/bin/env python3
"""
Data models for category tree building.

Contains the node/forest structures handed from the builder to the renderer,
and the diagnostics collected while a build runs.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Iterator, List, Optional


FOREST_ROOT_NAME = "domain-list-community"


class VisitState(Enum):
    """Traversal state of a category during a build."""
    UNVISITED = "unvisited"
    VISITING = "visiting"
    VISITED = "visited"


class ConflictPolicy(Enum):
    """How to treat a category included by more than one parent."""
    LAST_WRITER_WINS = "last-writer-wins"
    REJECT = "reject"


class IssueType(Enum):
    """Types of non-fatal build issues."""
    DANGLING_INCLUDE = "dangling_include"
    UNREADABLE_FILE = "unreadable_file"
    INCLUDE_CONFLICT = "include_conflict"
    INCLUDE_CYCLE = "include_cycle"
    SELF_INCLUDE = "self_include"


class Severity(Enum):
    """Issue severity levels."""
    ERROR = "error"
    WARNING = "warning"


@dataclass(eq=False)
class CategoryNode:
    """One rule file in the dataset.

    ``parent`` is a back-reference only: it is never serialized and never
    followed when walking the tree, which always goes through ``children``.
    """
    name: str
    path: Optional[Path] = None
    children: Dict[str, "CategoryNode"] = field(default_factory=dict, repr=False)
    parent: Optional["CategoryNode"] = field(default=None, repr=False)

    def sorted_children(self) -> List["CategoryNode"]:
        """Children ordered by name."""
        return [self.children[name] for name in sorted(self.children)]

    def attach(self, child: "CategoryNode") -> Optional["CategoryNode"]:
        """Make ``child`` a child of this node and point its parent here.

        A previous parent keeps ``child`` in its own ``children``; only the
        back-reference moves. Returns the previous parent when it was a
        different node.
        """
        previous = child.parent
        child.parent = self
        self.children[child.name] = child
        return previous if previous is not self else None


@dataclass
class Forest:
    """Synthetic root plus the root-level categories of one build."""
    name: str = FOREST_ROOT_NAME
    roots: Dict[str, CategoryNode] = field(default_factory=dict)
    categories: Dict[str, CategoryNode] = field(default_factory=dict, repr=False)

    @property
    def total_categories(self) -> int:
        return len(self.categories)

    def sorted_roots(self) -> List[CategoryNode]:
        return [self.roots[name] for name in sorted(self.roots)]

    def iter_nodes(self) -> Iterator[CategoryNode]:
        """Yield every node reachable from the roots, depth-first in name order.

        A category included by several parents is yielded once under each.
        """
        stack = list(reversed(self.sorted_roots()))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.sorted_children()))

    def max_depth(self) -> int:
        """Length of the longest include chain (roots are depth 1)."""
        deepest = 0
        stack = [(node, 1) for node in self.roots.values()]
        while stack:
            node, depth = stack.pop()
            deepest = max(deepest, depth)
            stack.extend((child, depth + 1) for child in node.children.values())
        return deepest


@dataclass
class BuildIssue:
    """A non-fatal problem found while building the tree."""
    message: str
    issue_type: IssueType
    category: str
    severity: Severity = Severity.WARNING
    target: Optional[str] = None

    def to_dict(self) -> Dict:
        """Convert issue to dictionary for JSON serialization."""
        return {
            "type": self.issue_type.value,
            "severity": self.severity.value,
            "category": self.category,
            "target": self.target,
            "message": self.message,
        }


@dataclass
class BuildResults:
    """Results of one tree build."""
    forest: Forest
    issues: List[BuildIssue] = field(default_factory=list)
    execution_time: float = 0.0
    data_dir: str = "data"

    @property
    def errors(self) -> List[BuildIssue]:
        return [issue for issue in self.issues if issue.severity == Severity.ERROR]

    @property
    def warnings(self) -> List[BuildIssue]:
        return [issue for issue in self.issues if issue.severity == Severity.WARNING]

    def get_summary_by_type(self) -> Dict[str, int]:
        """Get count of issues by issue type."""
        summary = {}
        for issue in self.issues:
            issue_type = issue.issue_type.value
            summary[issue_type] = summary.get(issue_type, 0) + 1
        return summary

    def has_errors(self) -> bool:
        """Check if there are any errors (not warnings)."""
        return len(self.errors) > 0

    def to_dict(self) -> Dict:
        """Convert results to dictionary for JSON serialization."""
        return {
            "data_dir": self.data_dir,
            "execution_time": self.execution_time,
            "summary": {
                "total_categories": self.forest.total_categories,
                "total_roots": len(self.forest.roots),
                "max_depth": self.forest.max_depth(),
                "total_errors": len(self.errors),
                "total_warnings": len(self.warnings),
                "by_type": self.get_summary_by_type(),
            },
            "issues": [issue.to_dict() for issue in self.issues],
        }


@dataclass
class ExportOutcome:
    """Result of persisting one rendered artifact."""
    artifact: str
    destination: str
    bytes_written: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
