"""Shared fixtures for core unit tests"""

import pytest

from mdcorpus.core.models import Record


@pytest.fixture(name="draft_record")
def draft_record_fixture():
    return Record(
        path="/drafts/oauth2",
        metadata={"layout": "page", "categories": ["security"]},
        body="<p>OAuth2</p>",
    )


@pytest.fixture(name="post_record")
def post_record_fixture():
    return Record(
        path="/posts/slick-tx",
        metadata={"date": "2014-08-26", "categories": ["development"], "tags": ["scala", "transactions"]},
        body="Slick transactions.",
    )


@pytest.fixture(name="dated_records")
def dated_records_fixture():
    """Posts out of date order, with two sharing a date."""
    return [
        {"path": "/posts/b", "metadata": {"date": "2014-08-26"}},
        {"path": "/posts/a", "metadata": {"date": "2013-01-01"}},
        {"path": "/drafts/x", "metadata": {}},
        {"path": "/posts/c", "metadata": {"date": "2015-03-10"}},
        {"path": "/posts/d", "metadata": {"date": "2014-08-26"}},
    ]
