"""Counts the files that make up a stencil."""

import fnmatch
import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, Sequence

logger = logging.getLogger(__name__)


def _is_hidden(relative: Path) -> bool:
    return any(part.startswith(".") for part in relative.parts)


def matches_ignore(relative_path: str, patterns: Sequence[str]) -> bool:
    """Check a POSIX-style relative path against glob *patterns*.

    ``*`` also matches across directories. A leading ``**/`` is optional, so
    ``**/*.log`` matches ``app.log`` at the root as well.
    """
    for pattern in patterns:
        candidates = [pattern]
        if pattern.startswith("**/"):
            candidates.append(pattern[3:])
        for candidate in candidates:
            if fnmatch.fnmatchcase(relative_path, candidate):
                return True
            # Directory patterns such as "build" or "build/" exclude their contents
            prefix = candidate.rstrip("/")
            if prefix and relative_path.startswith(prefix + "/") and not any(c in prefix for c in "*?["):
                return True
    return False


def iter_stencil_files(root: Path, ignore: Iterable[str] = ()) -> Iterator[Path]:
    """Yield regular files under *root*, relative to it, in sorted order.

    Hidden files and directories are skipped.
    """
    patterns = list(ignore)
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if not d.startswith("."))
        base = Path(dirpath).relative_to(root)
        for name in sorted(filenames):
            relative = base / name
            if _is_hidden(relative):
                continue
            if patterns and matches_ignore(relative.as_posix(), patterns):
                continue
            yield relative


def count_files(root: Path, ignore: Iterable[str] = ()) -> int:
    """Count files under *root* that are not hidden or ignored."""
    total = sum(1 for _ in iter_stencil_files(root, ignore))
    logger.debug(f"Counted {total} file(s) under {root}")
    return total
