#!/usr/bin/env python3
"""
Dataset providers.

A provider hands the analyzer a directory whose files are the category
rule files. The git provider shallow-clones the upstream list and copies
its data directory into place.
"""

import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Union

from ..errors import DatasetFetchError, DirectoryNotFound

DEFAULT_REPO_URL = "https://github.com/v2ray/domain-list-community.git"


class DirectoryDataset:
    """A dataset that already exists on disk."""

    def __init__(self, data_dir: Union[str, Path] = "data"):
        self.data_dir = Path(data_dir)

    def exists(self) -> bool:
        return self.data_dir.is_dir()

    def prepare(self) -> Path:
        """Return the dataset root, failing if it is missing."""
        if not self.exists():
            raise DirectoryNotFound(self.data_dir)
        return self.data_dir


class GitDataset(DirectoryDataset):
    """A dataset fetched from a git repository's ``data/`` directory."""

    def __init__(
        self,
        data_dir: Union[str, Path] = "data",
        repo_url: str = DEFAULT_REPO_URL,
        subdirectory: str = "data",
    ):
        super().__init__(data_dir)
        self.repo_url = repo_url
        self.subdirectory = subdirectory

    def prepare(self) -> Path:
        """Clone the repository and replace ``data_dir`` with its data directory."""
        with tempfile.TemporaryDirectory(prefix="domain-tree-") as tmp:
            clone_dir = Path(tmp) / "repo"
            print(f"📥 Cloning {self.repo_url}...")
            try:
                subprocess.run(
                    ["git", "clone", "--depth=1", self.repo_url, str(clone_dir)],
                    check=True,
                    capture_output=True,
                    text=True,
                )
            except FileNotFoundError as e:
                raise DatasetFetchError("git executable not found") from e
            except subprocess.CalledProcessError as e:
                detail = (e.stderr or "").strip() or f"exit code {e.returncode}"
                raise DatasetFetchError(f"git clone failed: {detail}") from e

            source = clone_dir / self.subdirectory
            if not source.is_dir():
                raise DatasetFetchError(f"{self.subdirectory}/ not found in {self.repo_url}")

            if self.data_dir.exists():
                shutil.rmtree(self.data_dir)
            copy_dir(source, self.data_dir)

        return self.data_dir


def copy_dir(source: Path, destination: Path) -> None:
    """Recursively copy ``source`` into ``destination``."""
    destination.mkdir(parents=True, exist_ok=True)
    for entry in source.iterdir():
        target = destination / entry.name
        if entry.is_dir():
            copy_dir(entry, target)
        else:
            shutil.copyfile(entry, target)
