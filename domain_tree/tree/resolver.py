"""Include directive extraction from category files."""

from __future__ import annotations

from pathlib import Path

from ..errors import FileReadError

INCLUDE_MARKER = "include:"


def parse_include_line(line: str) -> str | None:
    """Return the include target on ``line``, or None when it is not a directive."""
    stripped = line.strip()
    if not stripped.startswith(INCLUDE_MARKER):
        return None
    return stripped[len(INCLUDE_MARKER):].strip()


def parse_includes(file_path: Path | str) -> list[str]:
    """Read a category file and return its include targets in file order.

    Duplicates are kept. Raises FileReadError when the file cannot be
    opened or is not valid UTF-8.
    """
    includes: list[str] = []
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            for line in f:
                target = parse_include_line(line)
                if target is not None:
                    includes.append(target)
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(Path(file_path), str(e)) from e
    return includes
