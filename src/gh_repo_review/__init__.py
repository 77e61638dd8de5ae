"""gh-repo-review: deterministic GitHub repository review normalizer."""

from gh_repo_review.models import AggregateSummary, RawRepository, ReviewRecord
from gh_repo_review.normalize import analyze, extract_readme_main_idea

__version__ = "0.1.0"

__all__ = [
    "AggregateSummary",
    "RawRepository",
    "ReviewRecord",
    "__version__",
    "analyze",
    "extract_readme_main_idea",
]
