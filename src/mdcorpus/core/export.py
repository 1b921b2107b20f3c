"""Index export: JSON metadata summary of a loaded collection"""

import json
from pathlib import Path

from mdcorpus.core.models import Document
from mdcorpus.core.repository import DocumentCollection


def build_entry(doc: Document) -> dict:
    """Metadata for one document; the body is represented only by its hash and code languages."""
    return {
        "path": doc.path,
        "slug": doc.slug,
        "status": doc.status.value,
        "layout": doc.layout,
        "title": doc.title,
        "date": doc.date.isoformat() if doc.date else None,
        "categories": sorted(doc.categories),
        "tags": sorted(doc.tags),
        "author": doc.author,
        "hash": doc.hash,
        "code_languages": sorted({b.language for b in doc.code_blocks if b.language}),
    }


def build_index(collection: DocumentCollection) -> dict:
    """Build the index dict: newest dated documents first, then undated ones in load order."""
    dated = collection.sorted_by_date(descending=True)
    undated = [d for d in collection if d.date is None]
    return {
        "documents": [build_entry(d) for d in [*dated, *undated]],
        "tags": dict(sorted(collection.tags().items())),
        "categories": dict(sorted(collection.categories().items())),
    }


def write_index(collection: DocumentCollection, path: Path) -> Path:
    """Write the collection index as indented JSON to path. Returns path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(build_index(collection), indent=2, ensure_ascii=False),
        encoding='utf-8',
    )
    return path
