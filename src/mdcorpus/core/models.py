"""Content models: raw records in, immutable documents out"""

import datetime as dt
import hashlib
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from mdcorpus.core.blocks import CodeBlock, code_blocks


DEFAULT_EXCERPT_SEPARATOR = "\n\n"


class Status(str, Enum):
    """Publication state of a document"""
    draft = "draft"
    published = "published"


class Record(BaseModel):
    """A raw corpus entry: logical path, front matter mapping, and body text."""
    path:     str = Field(..., min_length=1)
    metadata: dict[str, Any] = {}
    body:     str = ""


class Document(BaseModel):
    """A post or draft with normalized front matter and its raw body.

    Documents are frozen and hashable; a changed file produces a new Document on
    the next load.
    """
    model_config = ConfigDict(frozen=True)

    path:       str
    status:     Status
    layout:     str
    title:      str
    date:       Optional[dt.date] = None
    categories: frozenset[str] = frozenset()
    tags:       frozenset[str] = frozenset()
    author:     Optional[str] = None
    body:       str = ""
    extra:      Mapping[str, Any] = Field(default={}, validate_default=True)   # front matter keys with no dedicated field

    @field_validator("extra", mode="after")
    @classmethod
    def _read_only_extra(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    def __hash__(self) -> int:
        return hash((self.path, self.status, self.date, self.hash))

    @model_validator(mode="after")
    def _published_requires_date(self) -> "Document":
        if self.status is Status.published and self.date is None:
            raise ValueError("published document requires a date")
        return self

    @property
    def slug(self) -> str:
        """Last segment of the logical path."""
        return self.path.rstrip('/').rsplit('/', 1)[-1]

    @property
    def hash(self) -> str:
        """Hex SHA-256 of the body, for change detection between loads."""
        return hashlib.sha256(self.body.encode("utf-8")).hexdigest()

    @property
    def code_blocks(self) -> list[CodeBlock]:
        return code_blocks(self.body)

    @property
    def excerpt(self) -> str:
        """Body text before the excerpt separator (front matter may override it)."""
        separator = self.extra.get("excerpt_separator") or DEFAULT_EXCERPT_SEPARATOR
        return self.body.lstrip().split(separator, 1)[0].strip()
