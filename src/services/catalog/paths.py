"""
Catalog path normalization.

A catalog path is a slash-delimited list of non-empty segments whose first
segment (the top-level category) is upper-cased. Two rows refer to the same
node exactly when their normalized paths are equal.
"""

from typing import Iterator, List, Optional

from constants.catalog_fields import THUMBS_PREFIX


def normalize_path(raw: Optional[str]) -> str:
    """Canonicalize a raw path; returns "" when no segment survives."""
    if not raw:
        return ""
    parts = [s.strip() for s in raw.replace("\\", "/").split("/")]
    parts = [s for s in parts if s]
    if not parts:
        return ""
    parts[0] = parts[0].upper()
    return "/".join(parts)


def path_segments(path: str) -> List[str]:
    return [s for s in path.split("/") if s]


def ancestor_paths(path: str) -> Iterator[str]:
    """Yield every proper prefix of a normalized path, shortest first."""
    segs = path_segments(path)
    for i in range(1, len(segs)):
        yield "/".join(segs[:i])


def to_thumb_site_path(raw: Optional[str]) -> str:
    """Rewrite a thumbnail reference to an absolute path under /thumbs/."""
    if not raw:
        return ""
    p = raw.replace("\\", "/").lstrip("/")
    if not p:
        return ""
    if not p.startswith(THUMBS_PREFIX):
        p = THUMBS_PREFIX + p
    return "/" + p
