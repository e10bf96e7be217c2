"""
Project projector.

Turns the outcome of a repository fetch into the load state rendered by the
projects section. Forks are dropped, the remaining records keep their source
order, and any fetch failure degrades to an empty list.
"""

import re
from collections.abc import Callable, Sequence
from datetime import datetime, timezone, tzinfo

from repofolio.exceptions import FetchError, MalformedResponseError
from repofolio.logging import log_discarded_failure
from repofolio.types.repos import NO_DESCRIPTION, Project, RawRepository
from repofolio.types.state import Loaded

INVALID_DATE = "Invalid Date"

DateFormatter = Callable[[str], str]

_FRACTION = re.compile(r"\.(\d+)")


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 timestamp; naive values are taken as UTC."""
    # fromisoformat before 3.11 only takes 3 or 6 fractional digits
    normalized = _FRACTION.sub(
        lambda m: "." + m.group(1)[:6].ljust(6, "0"), value.replace("Z", "+00:00"), count=1
    )
    moment = datetime.fromisoformat(normalized)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


def make_date_formatter(
    tz: tzinfo = timezone.utc,
    date_format: str | None = None,
) -> DateFormatter:
    """
    Build a formatter for ``updated_at`` values.

    Args:
        tz: Viewer time zone the timestamp is converted to before dropping the time
        date_format: strftime pattern; None gives the short ``M/D/YYYY`` form

    Returns:
        Callable mapping an ISO 8601 string to a date string
    """

    def format_date(value: str) -> str:
        try:
            day = parse_timestamp(value).astimezone(tz).date()
        except (TypeError, ValueError, AttributeError):
            return INVALID_DATE

        if date_format is not None:
            return day.strftime(date_format)
        return f"{day.month}/{day.day}/{day.year}"

    return format_date


format_date = make_date_formatter()


def to_project(
    repo: RawRepository,
    date_formatter: DateFormatter | None = None,
) -> Project:
    """Map one non-fork repository to its display form."""
    formatter = date_formatter or format_date
    return Project(
        id=repo.id,
        title=repo.name,
        description=repo.description or NO_DESCRIPTION,
        github_url=repo.html_url,
        language=repo.language or None,
        stars=repo.stargazers_count,
        forks=repo.forks_count,
        updated_at=formatter(repo.updated_at),
    )


def project(
    result: Sequence[RawRepository] | FetchError,
    *,
    date_formatter: DateFormatter | None = None,
) -> Loaded:
    """
    Project a fetch outcome into a load state.

    Args:
        result: Repositories returned by the fetcher, or the error it raised
        date_formatter: Formatter for update dates (default: UTC, ``M/D/YYYY``)

    Returns:
        Loaded state; empty when every record is a fork or the fetch failed
    """
    if isinstance(result, FetchError):
        log_discarded_failure(result)
        return Loaded((), failure=result)

    if isinstance(result, (str, bytes)) or not isinstance(result, Sequence):
        failure = MalformedResponseError(
            f"Expected a sequence of repositories, got {type(result).__name__}"
        )
        log_discarded_failure(failure)
        return Loaded((), failure=failure)

    projects = tuple(
        to_project(repo, date_formatter) for repo in result if not repo.fork
    )
    return Loaded(projects)
