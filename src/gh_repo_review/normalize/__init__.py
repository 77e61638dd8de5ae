"""Normalizers that turn raw repository payloads into review summaries.

- readme: README detection and main-idea extraction
- analyzer: per-repository review records and aggregate statistics
- common: timestamp parsing and owner lookup
"""

from gh_repo_review.normalize.analyzer import analyze
from gh_repo_review.normalize.readme import extract_readme_main_idea

__all__ = [
    "analyze",
    "extract_readme_main_idea",
]
