"""Tests for the action dispatcher."""

import pytest

from opensrfiview.logic.action_dispatcher import ActionDispatcher
from opensrfiview.logic.list_view import ListView, NoRecordAtCursor


@pytest.fixture
def dispatcher(sample_records, opener):
    view = ListView(sample_records)
    view.show()
    return ActionDispatcher(view, opener)


def test_browse_document(dispatcher, opener):
    url = dispatcher.browse_document(2)
    assert url == "https://srfi.schemers.org/srfi-0/srfi-0.html"
    assert opener.urls == [url]


def test_each_action_opens_its_url(dispatcher, opener):
    dispatcher.browse_discussion(1)
    dispatcher.browse_repository(1)
    dispatcher.browse_landing_page(1)
    assert opener.urls == [
        "https://srfi-email.schemers.org/srfi-1/",
        "https://github.com/scheme-requests-for-implementation/srfi-1",
        "https://srfi.schemers.org/srfi-1/",
    ]


def test_no_record_does_not_open_anything(dispatcher, opener):
    with pytest.raises(NoRecordAtCursor):
        dispatcher.browse_document(None)
    assert opener.urls == []
