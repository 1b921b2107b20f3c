"""Front matter normalization: raw record metadata to Document fields"""

import datetime as dt
import re
from typing import Any, Optional

from pydantic import ValidationError as SchemaError

from mdcorpus.core.models import Document, Record, Status
from mdcorpus.errors import ValidationError


DATE_RE = re.compile(r'^(\d{4}-\d{2}-\d{2})(?:[T ].*)?$')
DRAFT_DIRS = {'drafts', '_drafts'}
RESERVED_KEYS = {
    'layout', 'title', 'date', 'categories', 'category',
    'tags', 'tag', 'author', 'published', 'status',
}


def parse_date(value: Any, path: str) -> Optional[dt.date]:
    """Coerce a YAML date, datetime, or ISO-8601 string into a date; None when absent."""
    if value is None:
        return None
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        m = DATE_RE.match(text)
        if m:
            try:
                return dt.date.fromisoformat(m.group(1))
            except ValueError:
                pass
        raise ValidationError(path, f"invalid date {value!r}, expected YYYY-MM-DD")
    raise ValidationError(path, f"invalid date of type {type(value).__name__}")


def _terms(value: Any, key: str, path: str) -> set[str]:
    """Jekyll-style term list: a YAML list, or a whitespace-separated string."""
    if value is None:
        return set()
    if isinstance(value, str):
        return set(value.split())
    if isinstance(value, (list, tuple, set)):
        terms = set()
        for item in value:
            if isinstance(item, (list, dict)):
                raise ValidationError(path, f"{key} entries must be strings, got {type(item).__name__}")
            if item is not None:
                terms.add(str(item))
        return terms
    if isinstance(value, (int, float)):
        return {str(value)}
    raise ValidationError(path, f"{key} must be a list or a string, got {type(value).__name__}")


def _merged_terms(metadata: dict[str, Any], plural: str, singular: str, path: str) -> frozenset[str]:
    return frozenset(_terms(metadata.get(plural), plural, path) | _terms(metadata.get(singular), singular, path))


def _string(value: Any, key: str, path: str) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    raise ValidationError(path, f"{key} must be a string, got {type(value).__name__}")


def derive_status(record: Record) -> Status:
    """Explicit status key, then `published: false`, then a drafts directory; else published."""
    explicit = record.metadata.get('status')
    if explicit is not None:
        try:
            return Status(str(explicit).strip().lower())
        except ValueError:
            raise ValidationError(record.path, f"unknown status {explicit!r}") from None
    if record.metadata.get('published') is False:
        return Status.draft
    directories = [s for s in record.path.split('/') if s][:-1]
    if any(s in DRAFT_DIRS for s in directories):
        return Status.draft
    return Status.published


def title_from_slug(slug: str) -> str:
    """'slick-tx' -> 'Slick Tx'"""
    return ' '.join(w.capitalize() for w in re.split(r'[-_\s]+', slug) if w)


def _describe(error: SchemaError) -> str:
    return '; '.join(e['msg'].removeprefix('Value error, ') for e in error.errors())


def to_document(record: Record, default_layout: str = 'post') -> Document:
    """Build a Document from a record, raising ValidationError on bad or missing metadata."""
    meta = record.metadata
    path = record.path
    slug = path.rstrip('/').rsplit('/', 1)[-1]
    try:
        return Document(
            path=path,
            status=derive_status(record),
            layout=_string(meta.get('layout'), 'layout', path) or default_layout,
            title=_string(meta.get('title'), 'title', path) or title_from_slug(slug),
            date=parse_date(meta.get('date'), path),
            categories=_merged_terms(meta, 'categories', 'category', path),
            tags=_merged_terms(meta, 'tags', 'tag', path),
            author=_string(meta.get('author'), 'author', path),
            body=record.body,
            extra={k: v for k, v in meta.items() if k not in RESERVED_KEYS},
        )
    except SchemaError as e:
        raise ValidationError(path, _describe(e)) from e
