#!/usr/bin/env python3
"""
Output sink for rendered artifacts.

Writes each artifact as bytes into an output directory.
"""

from pathlib import Path
from typing import Union

from ..errors import SinkWriteError


class FileSink:
    """Persists rendered artifacts under a directory."""

    def __init__(self, output_dir: Union[str, Path] = "."):
        self.output_dir = Path(output_dir)

    def destination(self, name: str) -> Path:
        return self.output_dir / name

    def write(self, name: str, payload: bytes) -> Path:
        """Write ``payload`` to ``name`` and return the path written."""
        target = self.destination(name)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with open(target, 'wb') as f:
                f.write(payload)
        except OSError as e:
            raise SinkWriteError(str(target), str(e)) from e
        return target
