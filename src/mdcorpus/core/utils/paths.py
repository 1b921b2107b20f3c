"""Logical document paths derived from corpus file locations"""

import re
from pathlib import PurePath
from typing import Optional


POST_NAME_RE = re.compile(r'^(\d{4}-\d{2}-\d{2})-(.+)$')


def _directory(name: str) -> str:
    """Strip the single leading underscore generator-special directories carry (_posts, _drafts)."""
    return name[1:] if name.startswith('_') and len(name) > 1 else name


def logical_path(relative: PurePath) -> tuple[str, Optional[str]]:
    """Return (logical_path, filename_date) for a file path relative to the corpus root.

    _posts/2014-08-26-slick-tx.md -> ('/posts/slick-tx', '2014-08-26')
    _drafts/oauth2.html           -> ('/drafts/oauth2', None)
    """
    stem = relative.stem
    file_date = None
    m = POST_NAME_RE.match(stem)
    if m:
        file_date, stem = m.group(1), m.group(2)
    parts = [_directory(p) for p in relative.parent.parts]
    return '/' + '/'.join([*parts, stem]), file_date
