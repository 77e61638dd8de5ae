"""Common utilities shared by the review normalizers."""

import logging
from collections.abc import Sequence
from datetime import UTC, datetime

from gh_repo_review.models import UNKNOWN_USERNAME, RawRepository

logger = logging.getLogger(__name__)

# Repositories updated strictly after this instant count as recent.
RECENT_CUTOFF = datetime(2025, 10, 1, tzinfo=UTC)


def normalize_timestamp(ts: str | None) -> datetime | None:
    """Normalize GitHub API timestamp to UTC datetime.

    Handles GitHub's ISO 8601 timestamps (e.g., "2025-01-15T10:30:00Z") as
    well as date-only values ("2025-11-01"), which resolve to UTC midnight.

    Args:
        ts: ISO 8601 timestamp string or None.

    Returns:
        UTC datetime object or None if input is None or invalid. Offset
        timestamps that cannot be represented in UTC (year 1 or 9999 edges)
        keep their original offset and still compare correctly.
    """
    if ts is None:
        return None

    try:
        dt = datetime.fromisoformat(ts.strip().replace("Z", "+00:00"))
    except ValueError as e:
        logger.debug("Failed to parse timestamp '%s': %s", ts, e)
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)

    try:
        return dt.astimezone(UTC)
    except OverflowError:
        return dt


def is_recent(updated_at: str | None, cutoff: datetime = RECENT_CUTOFF) -> bool:
    """Return True if ``updated_at`` is strictly later than ``cutoff``.

    Missing or unparsable timestamps are never recent.
    """
    dt = normalize_timestamp(updated_at)
    return dt is not None and dt > cutoff


def derive_username(repositories: Sequence[RawRepository]) -> str:
    """Read the owner login from the first repository, if any."""
    if not repositories:
        return UNKNOWN_USERNAME
    owner = repositories[0].owner
    if owner is None or not owner.login:
        return UNKNOWN_USERNAME
    return owner.login
