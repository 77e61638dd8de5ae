"""Deterministic repository review normalizer.

Turns the repositories fetched for one account into a structured summary
before any AI model sees them:
- Language histogram and recent-activity count
- README detection and main-idea extraction per repository
- Rule-based strengths and weaknesses per repository
- Profile strength classification
- Flattened text of repository details for retrieval-style prompts

The whole operation is a pure function of its input. Missing fields and
unparsable timestamps degrade to sentinel values instead of raising.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from gh_repo_review.models import (
    NO_DESCRIPTION,
    NO_MAIN_IDEA,
    NO_README,
    UNKNOWN_LANGUAGE,
    AggregateSummary,
    RawRepository,
    ReadmeExtraction,
    RepoDetail,
    ReviewRecord,
)
from gh_repo_review.normalize.common import derive_username, is_recent
from gh_repo_review.normalize.readme import extract_readme_main_idea

logger = logging.getLogger(__name__)

# Profile strength thresholds
GOOD_MIN_REPOS = 10
GOOD_MIN_RECENT = 3
STRONG_MIN_REPOS = 20
STRONG_MIN_LANGUAGES = 3

DETAIL_TEMPLATE = """
Repo Name: {name}
Description: {description}
Language: {language}
URL: {html_url}
Updated At: {updated_at}
Topics: {topics}
README Main Idea: {main_idea}
"""


def analyze(
    repositories: Sequence[RawRepository | Mapping[str, Any]],
    owner_login: str | None = None,
) -> AggregateSummary:
    """Normalize repositories into an aggregate review summary.

    Args:
        repositories: Repository payloads in the order they were fetched.
            Plain mappings are validated into RawRepository first.
        owner_login: Account login. Derived from the first repository's
            ``owner.login`` when not given.

    Returns:
        AggregateSummary with one review record per repository, in input order.

    Raises:
        pydantic.ValidationError: If a mapping has a field of the wrong type
            (e.g. a non-string topic). Missing and null fields never raise.
    """
    repos = [_coerce(repo) for repo in repositories]
    username = owner_login or derive_username(repos)

    languages: dict[str, int] = {}
    recent_repos = 0
    review: list[ReviewRecord] = []
    details: list[RepoDetail] = []

    for repo in repos:
        if repo.language:
            languages[repo.language] = languages.get(repo.language, 0) + 1

        if is_recent(repo.updated_at):
            recent_repos += 1

        extraction = extract_readme_main_idea(repo)
        strengths, weaknesses = assess_repository(repo, extraction)

        review.append(
            ReviewRecord(
                name=repo.name,
                description=repo.description_or_default,
                language=repo.language_or_default,
                main_idea=extraction.main_idea,
                strengths=strengths,
                weaknesses=weaknesses,
                html_url=repo.html_url_or_default,
                updated_at=repo.updated_at_or_default,
                topics=repo.topics_or_default,
            )
        )
        details.append(
            RepoDetail(
                name=repo.name,
                description=repo.description_or_default,
                language=repo.language_or_default,
                html_url=repo.html_url_or_default,
                updated_at=repo.updated_at_or_default,
                topics=repo.topics_or_default,
                readme=extraction.readme,
                main_idea=extraction.main_idea,
            )
        )

    profile_strength = classify_profile(len(repos), recent_repos, len(languages))

    logger.info(
        "Analyzed %d repositories for %s: %d recent, %d languages, profile %s",
        len(repos),
        username,
        recent_repos,
        len(languages),
        profile_strength,
    )

    return AggregateSummary(
        github_username=username,
        total_repos=len(repos),
        recent_repos=recent_repos,
        languages=languages,
        profile_strength=profile_strength,
        deterministic_review=review,
        repo_details_text=render_details_text(details),
    )


def assess_repository(
    repo: RawRepository, extraction: ReadmeExtraction
) -> tuple[list[str], list[str]]:
    """Derive strengths and weaknesses for a single repository.

    Each rule adds at most one entry. The description rules compare the
    defaulted value, so a description literally equal to the placeholder
    counts as missing.

    Returns:
        Tuple of (strengths, weaknesses).
    """
    strengths: list[str] = []
    weaknesses: list[str] = []

    language = repo.language_or_default
    description = repo.description_or_default
    has_readme = bool(extraction.readme) and extraction.readme != NO_README

    if language != UNKNOWN_LANGUAGE:
        strengths.append(f"Uses {language}")
    if description != NO_DESCRIPTION:
        strengths.append(f'Has description: "{description}"')
    if has_readme:
        strengths.append("Has README")
    if extraction.main_idea and extraction.main_idea != NO_MAIN_IDEA:
        strengths.append(f"Main idea: {extraction.main_idea}")

    if description == NO_DESCRIPTION:
        weaknesses.append("Missing description")
    if not has_readme:
        weaknesses.append("Missing README")

    return strengths, weaknesses


def classify_profile(total_repos: int, recent_repos: int, language_count: int) -> str:
    """Classify profile strength as Weak, Good or Strong.

    The Strong rule is checked last and does not require the Good rule to hold.
    """
    strength = "Weak"
    if total_repos >= GOOD_MIN_REPOS and recent_repos >= GOOD_MIN_RECENT:
        strength = "Good"
    if total_repos >= STRONG_MIN_REPOS and language_count >= STRONG_MIN_LANGUAGES:
        strength = "Strong"
    return strength


def render_detail_block(detail: RepoDetail) -> str:
    """Render one repository as a text block with leading and trailing newline."""
    return DETAIL_TEMPLATE.format(
        name=detail.name if detail.name is not None else "",
        description=detail.description,
        language=detail.language,
        html_url=detail.html_url,
        updated_at=detail.updated_at,
        topics=", ".join(detail.topics) if detail.topics else "None",
        main_idea=detail.main_idea,
    )


def render_details_text(details: Sequence[RepoDetail]) -> str:
    """Join rendered repository blocks with a blank line between them."""
    return "\n\n".join(render_detail_block(detail) for detail in details)


def _coerce(repo: RawRepository | Mapping[str, Any]) -> RawRepository:
    if isinstance(repo, RawRepository):
        return repo
    return RawRepository.model_validate(repo)
