"""Shared fixtures for building throwaway datasets."""

from contextlib import contextmanager
from pathlib import Path
import tempfile
from typing import Dict, Iterator, List


@contextmanager
def create_dataset(files: Dict[str, str]) -> Iterator[Path]:
    """Create a temporary data directory holding ``files`` (relative path -> content)."""
    with tempfile.TemporaryDirectory() as tmp:
        data_dir = Path(tmp) / "data"
        data_dir.mkdir()
        for relative_path, content in files.items():
            file_path = data_dir / relative_path
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(content, encoding="utf-8")
        yield data_dir


def includes(*targets: str) -> str:
    """Category file body made of include directives."""
    return "\n".join(f"include:{target}" for target in targets) + "\n"


def names(nodes) -> List[str]:
    return [node.name for node in nodes]
