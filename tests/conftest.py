"""Shared fixtures for the hydrator test suite."""

from collections import Counter
from unittest.mock import patch

import pytest

from hydrator.diagnostics import Diagnostics
from hydrator.errors import FragmentNotFound


class FakeSource:
    """In-memory content source that counts fetches per fragment.

    Fragments in ``bodies`` are served; fragments in ``errors`` raise the
    given exception class; anything else is not found.
    """

    def __init__(self, bodies=None, errors=None):
        self.bodies = dict(bodies or {})
        self.errors = dict(errors or {})
        self.calls = Counter()

    async def fetch(self, fragment_id):
        self.calls[fragment_id] += 1
        if fragment_id in self.errors:
            raise self.errors[fragment_id](fragment_id, "connection refused")
        if fragment_id in self.bodies:
            return self.bodies[fragment_id]
        raise FragmentNotFound(fragment_id)

    async def aclose(self):
        return None


def build_page(target_ids):
    """Page with one placeholder container per target id."""
    sections = "".join(
        f'<div class="content-file-preview" onclick="editContent()" style="cursor: pointer">'
        f'<div id="{target_id}"><p>Placeholder</p></div>'
        f'<span class="edit-notice">Click to edit</span>'
        f"</div>"
        for target_id in target_ids
    )
    return f"<html><body>{sections}</body></html>"


@pytest.fixture
def small_targets():
    """Three fragments mapped to three page elements."""
    return {
        "a.txt": "a-content",
        "b.txt": "b-content",
        "c.txt": "c-content",
    }


@pytest.fixture
def small_page(small_targets):
    return build_page(small_targets.values())


@pytest.fixture
def make_source():
    return FakeSource


@pytest.fixture
def quiet_diagnostics():
    return Diagnostics(quiet=True)


@pytest.fixture
def mock_config(tmp_path):
    """Patch the config singleton with test-friendly values."""
    test_config = {
        "poll_interval_ms": 0,
        "content_source": str(tmp_path / "content"),
        "page_path": str(tmp_path / "index.html"),
        "output_path": str(tmp_path / "output" / "index.html"),
        "container_class": "content-file-preview",
        "notice_class": "edit-notice",
        "fetch_timeout_s": None,
    }
    with patch("hydrator.config._config", test_config):
        yield test_config


@pytest.fixture
def make_page():
    return build_page
