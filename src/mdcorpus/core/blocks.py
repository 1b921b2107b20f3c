"""Fenced code sample detection with markdown-it"""

from typing import NamedTuple, Optional

from markdown_it import MarkdownIt


CODE_TOKEN_TYPES = {'fence', 'code_block'}


class CodeBlock(NamedTuple):
    """A code sample embedded in a document body. Never executed."""
    language: Optional[str]     # first word of the fence info string; None when untagged
    code:     str


def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


_PARSER = _make_parser('commonmark')


def _language(info: str) -> Optional[str]:
    words = info.split()
    return words[0] if words else None


def code_blocks(body: str) -> list[CodeBlock]:
    """Return fenced and indented code samples in body, in source order."""
    return [
        CodeBlock(language=_language(tok.info), code=tok.content)
        for tok in _PARSER.parse(body)
        if tok.type in CODE_TOKEN_TYPES
    ]
