"""Category include-tree builder for domain classification lists."""

from .analyzer import CategoryAnalyzer
from .errors import (
    DatasetFetchError,
    DirectoryNotFound,
    DomainTreeError,
    FileReadError,
    IncludeConflictError,
    SerializationError,
    SinkWriteError,
)
from .models import (
    BuildIssue,
    BuildResults,
    CategoryNode,
    ConflictPolicy,
    ExportOutcome,
    Forest,
    IssueType,
    Severity,
    VisitState,
)

__all__ = [
    "CategoryAnalyzer",
    "BuildIssue",
    "BuildResults",
    "CategoryNode",
    "ConflictPolicy",
    "ExportOutcome",
    "Forest",
    "IssueType",
    "Severity",
    "VisitState",
    "DomainTreeError",
    "DirectoryNotFound",
    "FileReadError",
    "SerializationError",
    "SinkWriteError",
    "IncludeConflictError",
    "DatasetFetchError",
]
