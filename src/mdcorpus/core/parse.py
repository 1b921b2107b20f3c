"""Corpus file discovery and YAML front matter extraction"""

import logging
import re
from pathlib import Path
from typing import Any

import yaml

from mdcorpus.core.models import Record
from mdcorpus.core.utils.paths import logical_path
from mdcorpus.errors import ValidationError


logger = logging.getLogger(__name__)

FRONTMATTER_RE = re.compile(r'\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)', re.DOTALL | re.MULTILINE)
CONTENT_EXTENSIONS = {'.md', '.markdown', '.html'}
COLLECTION_DIRS = {'_posts', '_drafts'}
EXCLUDED_DIRS = {'_site', '_layouts', '_includes', '_sass', '_data'}


def split_front_matter(text: str, source: str = '<string>') -> tuple[dict[str, Any], str]:
    """Return (front_matter, body) with the YAML header removed."""
    text = text.lstrip('\ufeff')
    m = FRONTMATTER_RE.match(text)
    if not m:
        return {}, text
    try:
        fm = yaml.safe_load(m.group(1)) or {}
    except yaml.YAMLError as e:
        raise ValidationError(source, f"invalid YAML front matter: {e}") from e
    if not isinstance(fm, dict):
        raise ValidationError(source, f"front matter must be a mapping, got {type(fm).__name__}")
    return fm, text[m.end():]


def _excluded(path: Path, root: Path) -> bool:
    """Dot paths, and generator support or output directories, hold no documents."""
    parts = path.relative_to(root).parts
    return any(p.startswith('.') for p in parts) or any(p in EXCLUDED_DIRS for p in parts[:-1])


def discover_files(path: Path) -> list[Path]:
    """Return sorted content files under path, or [path] for a single content file."""
    if path.is_file():
        return [path] if path.suffix in CONTENT_EXTENSIONS else []
    files = sorted(
        p for p in path.rglob('*')
        if p.is_file() and p.suffix in CONTENT_EXTENSIONS and not _excluded(p, path)
    )
    logger.debug("Discovered %d content file(s) under %s", len(files), path)
    return files


def content_root(path: Path) -> Path:
    """Directory logical paths are computed against.

    Inside _posts or _drafts this is the site root above it, so a draft keeps its
    /drafts prefix however deep the target is.
    """
    base = path if path.is_dir() else path.parent
    for directory in (base, *base.parents):
        if directory.name in COLLECTION_DIRS:
            return directory.parent
    return base


def read_record(path: Path, root: Path = None) -> Record:
    """Read one corpus file into a Record keyed by its logical path."""
    root = root or content_root(path)
    try:
        raw = path.read_text(encoding='utf-8')
    except UnicodeDecodeError as e:
        raise ValidationError(str(path), f"not valid UTF-8: {e}") from e
    front_matter, body = split_front_matter(raw, str(path))
    logical, file_date = logical_path(path.relative_to(root))
    if file_date and not front_matter.get('date'):
        front_matter['date'] = file_date
    return Record(path=logical, metadata=front_matter, body=body)


def read_dir(path: Path) -> list[Record]:
    """Read every content file under path (file or directory) in discovery order."""
    root = content_root(path)
    return [read_record(p, root) for p in discover_files(path)]
