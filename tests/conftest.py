"""Root test configuration: an on-disk blog corpus in the posts/drafts layout"""

from pathlib import Path

import pytest


OAUTH2_DRAFT = """\
---
layout: page
title: OAuth2 flows explained
categories: [security]
tags: [oauth2]
---
<p>The authorization code grant exchanges a short-lived code for a token.</p>
"""

SLICK_POST = """\
---
layout: post
title: Transaction abstraction with Slick
categories: [development]
tags: [scala, transactions]
author: jdoe
---
Wrapping database actions in a transaction type keeps services storage-agnostic.

```scala
def run[A](tx: Tx[A]): Future[A]
```
"""

HELLO_POST = """\
---
title: Hello
date: 2013-05-01
categories: development
---
First post.
"""


def write_corpus(root: Path) -> Path:
    """Write a small corpus under root and return root."""
    (root / "_drafts").mkdir(parents=True)
    (root / "_posts").mkdir()
    (root / "_drafts" / "oauth2.html").write_text(OAUTH2_DRAFT, encoding="utf-8")
    (root / "_posts" / "2014-08-26-slick-tx.md").write_text(SLICK_POST, encoding="utf-8")
    (root / "_posts" / "hello.md").write_text(HELLO_POST, encoding="utf-8")
    (root / "assets").mkdir()
    (root / "assets" / "style.css").write_text("body {}", encoding="utf-8")
    (root / ".cache").mkdir()
    (root / ".cache" / "stale.md").write_text("---\ntitle: stale\n---\n", encoding="utf-8")
    for support, name in SUPPORT_FILES:
        (root / support).mkdir()
        (root / support / name).write_text("---\nlayout: none\n---\n{{ content }}\n", encoding="utf-8")
    return root


SUPPORT_FILES = [
    ("_layouts", "default.html"),
    ("_includes", "head.html"),
    ("_sass", "main.md"),
    ("_data", "nav.md"),
    ("_site", "index.html"),
]


@pytest.fixture(name="corpus")
def corpus_fixture(tmp_path):
    """A corpus with one draft, two posts, and support files discovery must skip."""
    return write_corpus(tmp_path / "site")
