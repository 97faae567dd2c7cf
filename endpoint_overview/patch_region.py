"""Replace the generated region of a source file."""

import logging
from pathlib import Path

from endpoint_overview.errors import MarkerNotFound

logger = logging.getLogger(__name__)


def has_markers(path: Path, begin: str, end: str) -> bool:
    """Check if `path` exists and carries both markers in order."""
    if not path.is_file():
        return False
    text = path.read_text(encoding="utf-8")
    start = text.find(begin)
    return start >= 0 and text.find(end, start) >= 0


def replace_region(text: str, begin: str, end: str, content: str, path: Path) -> str:
    """Return `text` with everything between the marker lines replaced."""
    start = text.find(begin)
    if start < 0:
        raise MarkerNotFound(path, begin)
    stop = text.find(end, start)
    if stop < 0:
        raise MarkerNotFound(path, end)
    return text[: start + len(begin)] + "\n" + content + text[stop:]


def require_markers(path: Path, begin: str, end: str) -> None:
    """Raise MarkerNotFound unless `path` exists and carries both markers."""
    if not path.is_file():
        raise MarkerNotFound(path, begin)
    replace_region(path.read_text(encoding="utf-8"), begin, end, "", path)


def patch_region(path: Path, begin: str, end: str, content: str) -> None:
    """Rewrite the region of `path` between `begin` and `end` with `content`.

    The marker lines and everything outside them are kept. Not safe against
    concurrent writers.
    """
    text = path.read_text(encoding="utf-8")
    patched = replace_region(text, begin, end, content, path)
    if patched == text:
        logger.info("%s is up to date", path)
        return
    path.write_text(patched, encoding="utf-8")
    logger.info("Patched %s", path)
