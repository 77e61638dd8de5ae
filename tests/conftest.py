"""Test fixtures for gh-repo-review.

Provides factories for GitHub repository payloads in the shape the fetch
stage hands over (REST repository fields plus an optional files map).
"""

from collections.abc import Callable
from typing import Any

import pytest

README_CONTENT = "# Title\n\nLine one.\nLine two.\nLine three.\nLine four."


@pytest.fixture
def make_repo() -> Callable[..., dict[str, Any]]:
    """Return a factory for repository payloads.

    Keyword arguments override the defaults; pass ``None`` to drop a field.
    """

    def _make(**overrides: Any) -> dict[str, Any]:
        repo: dict[str, Any] = {
            "name": "sample-repo",
            "description": "A sample repository",
            "language": "Python",
            "updated_at": "2025-11-01T12:00:00Z",
            "html_url": "https://github.com/octocat/sample-repo",
            "topics": ["cli", "tools"],
            "owner": {"login": "octocat"},
            "files": {"README.md": {"content": README_CONTENT}},
        }
        for key, value in overrides.items():
            if value is None:
                repo.pop(key, None)
            else:
                repo[key] = value
        return repo

    return _make
