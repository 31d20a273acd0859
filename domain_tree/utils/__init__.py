"""Dataset and output collaborators for the tree builder."""

from .dataset import DirectoryDataset, GitDataset, copy_dir
from .sink import FileSink

__all__ = [
    "DirectoryDataset",
    "GitDataset",
    "copy_dir",
    "FileSink",
]
