"""Exceptions raised while loading a content corpus"""


class ContentError(Exception):
    """Base error for mdcorpus."""

    def __init__(self, path: str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


class ValidationError(ContentError):
    """A record's metadata is missing a required field or cannot be parsed."""


class DuplicatePathError(ContentError):
    """A record's path collides with a document that is already loaded."""

    def __init__(self, path: str):
        super().__init__(path, "duplicate document path")
