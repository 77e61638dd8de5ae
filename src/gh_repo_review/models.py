"""Data models for repository review normalization.

Input models mirror the GitHub REST repository payload (plus the optional
``files`` map added by the file-fetch step). Output models serialize with the
exact key names downstream prompt templates expect.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

NO_DESCRIPTION = "No description provided"
UNKNOWN_LANGUAGE = "Unknown"
NO_URL = "No URL"
UNKNOWN_UPDATED_AT = "Unknown"
UNKNOWN_USERNAME = "Unknown"

NO_README = "No README content"
NO_MAIN_IDEA = "No main idea available"
README_WITHOUT_MAIN_IDEA = "README exists but no main idea detected"


class RepoOwner(BaseModel):
    """Owner object nested in a repository payload."""

    model_config = ConfigDict(extra="ignore")

    login: str | None = None


class RepoFile(BaseModel):
    """A fetched file attached to a repository payload."""

    model_config = ConfigDict(extra="ignore")

    content: str | None = None


class RawRepository(BaseModel):
    """Repository payload as handed over by the fetch stage.

    Every field is optional; unknown API fields are ignored. Defaults are
    applied by the ``*_or_default`` properties, which is the only place the
    sentinel strings are substituted.
    """

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    description: str | None = None
    language: str | None = None
    updated_at: str | None = None
    html_url: str | None = None
    topics: list[str] | None = None
    files: dict[str, RepoFile] | None = None
    owner: RepoOwner | None = None

    @property
    def description_or_default(self) -> str:
        return self.description or NO_DESCRIPTION

    @property
    def language_or_default(self) -> str:
        return self.language or UNKNOWN_LANGUAGE

    @property
    def html_url_or_default(self) -> str:
        return self.html_url or NO_URL

    @property
    def updated_at_or_default(self) -> str:
        return self.updated_at or UNKNOWN_UPDATED_AT

    @property
    def topics_or_default(self) -> list[str]:
        return list(self.topics) if self.topics else []


class ReadmeExtraction(BaseModel):
    """README text and the extractive main idea derived from it."""

    readme: str
    main_idea: str


class ReviewRecord(BaseModel):
    """Per-repository review entry."""

    model_config = ConfigDict(populate_by_name=True)

    name: str | None
    description: str
    language: str
    main_idea: str = Field(serialization_alias="mainIdea")
    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)
    html_url: str
    updated_at: str
    topics: list[str] = Field(default_factory=list)


class RepoDetail(BaseModel):
    """Per-repository fields rendered into the flattened retrieval text."""

    name: str | None
    description: str
    language: str
    html_url: str
    updated_at: str
    topics: list[str] = Field(default_factory=list)
    readme: str
    main_idea: str


class AggregateSummary(BaseModel):
    """Result of a single ``analyze`` call."""

    model_config = ConfigDict(populate_by_name=True)

    github_username: str = UNKNOWN_USERNAME
    total_repos: int = Field(default=0, serialization_alias="totalRepos")
    recent_repos: int = Field(default=0, serialization_alias="recentRepos")
    languages: dict[str, int] = Field(default_factory=dict)
    profile_strength: str = Field(default="Weak", serialization_alias="profileStrength")
    deterministic_review: list[ReviewRecord] = Field(
        default_factory=list, serialization_alias="deterministicReview"
    )
    repo_details_text: str = Field(default="", serialization_alias="repoDetailsText")

    def to_output(self) -> dict[str, Any]:
        """Return the plain dict handed to the AI/formatting stage."""
        return self.model_dump(by_alias=True)

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize to JSON with output key names."""
        return self.model_dump_json(by_alias=True, indent=indent)
