"""Category discovery: one empty node per rule file."""

from __future__ import annotations

import os
from pathlib import Path

from ..errors import DirectoryNotFound
from ..models import CategoryNode


def category_name(relative_path: Path) -> str:
    """Normalize a dataset-relative file path into a category name.

    Separators become ``/`` and the last extension is dropped, so
    ``geo/cn.dat`` becomes ``geo/cn``.
    """
    return relative_path.with_suffix("").as_posix()


def scan(root_directory: Path | str) -> dict[str, CategoryNode]:
    """Walk every file under ``root_directory`` and create a node per category.

    File contents are not read. The returned mapping is ordered by name.
    """
    root = Path(root_directory)
    if not root.is_dir():
        raise DirectoryNotFound(root)

    def _abort(error: OSError) -> None:
        raise DirectoryNotFound(root, str(error)) from error

    categories: dict[str, CategoryNode] = {}
    for dirpath, dirnames, filenames in os.walk(root, onerror=_abort):
        dirnames.sort()
        for filename in sorted(filenames):
            file_path = Path(dirpath) / filename
            name = category_name(file_path.relative_to(root))
            categories[name] = CategoryNode(name=name, path=file_path)

    return {name: categories[name] for name in sorted(categories)}
