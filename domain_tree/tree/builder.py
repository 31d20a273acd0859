"""Include-graph resolution and forest construction."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from ..errors import FileReadError, IncludeConflictError
from ..models import (
    FOREST_ROOT_NAME,
    BuildIssue,
    CategoryNode,
    ConflictPolicy,
    Forest,
    IssueType,
    VisitState,
)
from .resolver import parse_includes

Resolver = Callable[[Path], list[str]]


class TraversalState:
    """Per-build visit bookkeeping, keyed by category name."""

    def __init__(self, names):
        self._states: dict[str, VisitState] = {name: VisitState.UNVISITED for name in names}

    def get(self, name: str) -> VisitState:
        return self._states.get(name, VisitState.UNVISITED)

    def mark(self, name: str, state: VisitState) -> None:
        self._states[name] = state

    def is_visited(self, name: str) -> bool:
        return self.get(name) is VisitState.VISITED

    def is_visiting(self, name: str) -> bool:
        return self.get(name) is VisitState.VISITING


class TreeBuilder:
    """Wires categories under the categories that include them.

    Categories are processed in name order. A category included by several
    parents is a child of each of them, while its ``parent`` back-reference
    points at the one processed last; ``ConflictPolicy.REJECT`` raises
    instead. Includes that would close a cycle are dropped.
    """

    def __init__(
        self,
        categories: dict[str, CategoryNode],
        policy: ConflictPolicy = ConflictPolicy.LAST_WRITER_WINS,
        resolver: Resolver = parse_includes,
    ):
        self.categories = categories
        self.policy = policy
        self.resolver = resolver
        self.issues: list[BuildIssue] = []

    def build(self, root_name: str = FOREST_ROOT_NAME) -> Forest:
        """Process every category and collect the parentless ones as roots."""
        self.issues = []
        state = TraversalState(self.categories)
        for name in sorted(self.categories):
            self._process(name, state)

        forest = Forest(name=root_name, categories=self.categories)
        for name in sorted(self.categories):
            node = self.categories[name]
            if node.parent is None:
                forest.roots[name] = node
        return forest

    def _process(self, name: str, state: TraversalState) -> None:
        """Depth-first walk from ``name`` using an explicit stack of include iterators."""
        if state.get(name) is not VisitState.UNVISITED:
            return
        state.mark(name, VisitState.VISITING)
        node = self.categories[name]
        stack = [(node, iter(self._includes_of(node)))]

        while stack:
            node, targets = stack[-1]
            target = next(targets, None)
            if target is None:
                state.mark(node.name, VisitState.VISITED)
                stack.pop()
                continue
            if self._wire(node, target, state) and not state.is_visited(target):
                state.mark(target, VisitState.VISITING)
                child = self.categories[target]
                stack.append((child, iter(self._includes_of(child))))

    def _includes_of(self, node: CategoryNode) -> list[str]:
        if node.path is None:
            return []
        try:
            return self.resolver(node.path)
        except FileReadError as e:
            self._record(
                IssueType.UNREADABLE_FILE, node.name,
                f"Treating '{node.name}' as having no includes: {e.reason}",
            )
            return []

    def _wire(self, node: CategoryNode, target: str, state: TraversalState) -> bool:
        """Attach ``target`` under ``node``. Returns False when no edge was made."""
        child = self.categories.get(target)
        if child is None:
            self._record(
                IssueType.DANGLING_INCLUDE, node.name,
                f"'{node.name}' includes unknown category '{target}'", target,
            )
            return False
        if child is node:
            self._record(
                IssueType.SELF_INCLUDE, node.name,
                f"'{node.name}' includes itself", target,
            )
            return False
        if state.is_visiting(target):
            self._record(
                IssueType.INCLUDE_CYCLE, node.name,
                f"Include of '{target}' from '{node.name}' closes a cycle; edge dropped",
                target,
            )
            return False

        previous = child.parent
        if previous is not None and previous is not node:
            if self.policy is ConflictPolicy.REJECT:
                raise IncludeConflictError(target, previous.name, node.name)
            self._record(
                IssueType.INCLUDE_CONFLICT, node.name,
                f"'{target}' is included by both '{previous.name}' and '{node.name}'; "
                f"parent set to '{node.name}'", target,
            )

        node.attach(child)
        return True

    def _record(self, issue_type: IssueType, category: str, message: str, target: str | None = None) -> None:
        self.issues.append(
            BuildIssue(message=message, issue_type=issue_type, category=category, target=target)
        )


def build_forest(
    categories: dict[str, CategoryNode],
    policy: ConflictPolicy = ConflictPolicy.LAST_WRITER_WINS,
    resolver: Resolver = parse_includes,
    root_name: str = FOREST_ROOT_NAME,
) -> tuple[Forest, list[BuildIssue]]:
    """Build the forest for a registry; returns the forest and the issues found."""
    builder = TreeBuilder(categories, policy=policy, resolver=resolver)
    forest = builder.build(root_name)
    return forest, builder.issues
