"""Read-only document collection: batch loading and metadata queries

A collection is built once by `load` and never mutated afterwards. Loading more
records into an existing collection returns a new collection and leaves the
original untouched, so readers can query concurrently without coordination.

Error policy: a strict load (the default) aborts the whole batch on the first
offending record. A non-strict load skips offending records, logs a warning per
record, and reports them on `DocumentCollection.rejected`.
"""

import logging
from collections import Counter
from pathlib import Path
from typing import Any, Iterable, Iterator, Mapping, Optional, Union

from pydantic import ValidationError as SchemaError

from mdcorpus.core.metadata import to_document
from mdcorpus.core.models import Document, Record, Status
from mdcorpus.core.parse import content_root, discover_files, read_record
from mdcorpus.errors import ContentError, DuplicatePathError, ValidationError


logger = logging.getLogger(__name__)

DEFAULT_LAYOUT = 'post'

RawRecord = Union[Record, Mapping[str, Any]]
Rejection = tuple[str, ContentError]


class DocumentCollection:
    """Immutable, load-ordered documents keyed by unique logical path."""

    def __init__(self, documents: Iterable[Document] = (), rejected: Iterable[Rejection] = ()):
        self._documents: tuple[Document, ...] = tuple(documents)
        self._by_path: dict[str, Document] = {}
        for doc in self._documents:
            if doc.path in self._by_path:
                raise DuplicatePathError(doc.path)
            self._by_path[doc.path] = doc
        self._rejected: tuple[Rejection, ...] = tuple(rejected)

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents)

    def __contains__(self, path: object) -> bool:
        return path in self._by_path

    def __repr__(self) -> str:
        return f"DocumentCollection({len(self)} documents, {len(self._rejected)} rejected)"

    @property
    def rejected(self) -> tuple[Rejection, ...]:
        """(path, error) pairs for records skipped by non-strict loads."""
        return self._rejected

    @property
    def paths(self) -> list[str]:
        return [d.path for d in self._documents]

    def load(self, records: Iterable[RawRecord], strict: bool = True,
             default_layout: str = DEFAULT_LAYOUT) -> "DocumentCollection":
        """Return a new collection holding these documents plus the given records."""
        return load(records, base=self, strict=strict, default_layout=default_layout)

    # --- queries ---

    def get(self, path: str) -> Optional[Document]:
        return self._by_path.get(path)

    def by_status(self, status: Union[Status, str]) -> Iterator[Document]:
        """Documents with the given status, lazily, in load order."""
        status = Status(status)
        return (d for d in self._documents if d.status is status)

    def by_tag(self, tag: str) -> Iterator[Document]:
        """Documents tagged with tag (exact, case-sensitive), lazily, in load order."""
        return (d for d in self._documents if tag in d.tags)

    def by_category(self, category: str) -> Iterator[Document]:
        """Documents in category (exact, case-sensitive), lazily, in load order."""
        return (d for d in self._documents if category in d.categories)

    def by_author(self, author: str) -> Iterator[Document]:
        return (d for d in self._documents if d.author == author)

    def sorted_by_date(self, descending: bool = True) -> list[Document]:
        """Dated documents ordered by date; equal dates keep load order. Undated ones are excluded."""
        dated = (d for d in self._documents if d.date is not None)
        return sorted(dated, key=lambda d: d.date, reverse=descending)

    def tags(self) -> Counter:
        """Document count per tag."""
        return Counter(t for d in self._documents for t in d.tags)

    def categories(self) -> Counter:
        """Document count per category."""
        return Counter(c for d in self._documents for c in d.categories)


def _as_record(raw: RawRecord) -> Record:
    if isinstance(raw, Record):
        return raw
    try:
        return Record.model_validate(raw)
    except SchemaError as e:
        path = raw.get('path') if isinstance(raw, Mapping) else None
        raise ValidationError(str(path or '<unknown>'), f"malformed record: {e.error_count()} error(s)") from e


def load(
    records: Iterable[RawRecord],
    base: DocumentCollection = None,
    strict: bool = True,
    default_layout: str = DEFAULT_LAYOUT,
    ) -> DocumentCollection:
    """Validate records into Documents and return them, after base's, as a new collection.

    Raises DuplicatePathError when a path is already loaded (in base or earlier in the
    batch) and ValidationError for bad metadata, such as a published record without a
    date. Strict loads abort the batch on the first error; non-strict loads skip it.
    """
    base = base if base is not None else DocumentCollection()
    seen = set(base.paths)
    accepted: list[Document] = []
    rejected: list[Rejection] = []

    for raw in records:
        try:
            record = _as_record(raw)
            if record.path in seen:
                raise DuplicatePathError(record.path)
            doc = to_document(record, default_layout)
        except ContentError as e:
            if strict:
                raise
            logger.warning("Skipping %s: %s", e.path, e.message)
            rejected.append((e.path, e))
            continue
        seen.add(doc.path)
        accepted.append(doc)

    logger.debug("Loaded %d document(s), rejected %d", len(accepted), len(rejected))
    return DocumentCollection([*base, *accepted], rejected=[*base.rejected, *rejected])


def load_dir(path: Path, strict: bool = True, default_layout: str = DEFAULT_LAYOUT) -> DocumentCollection:
    """Discover, read and load every content file under path."""
    root = content_root(path)
    records: list[Record] = []
    unreadable: list[Rejection] = []
    for file in discover_files(path):
        try:
            records.append(read_record(file, root))
        except ValidationError as e:
            if strict:
                raise
            logger.warning("Skipping %s: %s", e.path, e.message)
            unreadable.append((e.path, e))
    collection = load(records, strict=strict, default_layout=default_layout)
    return DocumentCollection(collection, rejected=[*unreadable, *collection.rejected])
