"""Repository and project data models."""

from dataclasses import dataclass
from typing import Any

NO_DESCRIPTION = "No description available"


@dataclass
class RawRepository:
    """A repository record as listed by the GitHub API."""

    id: int | str
    name: str
    description: str | None
    html_url: str
    language: str | None
    stargazers_count: int
    forks_count: int
    updated_at: str  # ISO 8601
    fork: bool

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RawRepository":
        """
        Decode one API record.

        Raises:
            KeyError: If a required field is missing
        """
        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description"),
            html_url=data["html_url"],
            language=data.get("language"),
            stargazers_count=data.get("stargazers_count") or 0,
            forks_count=data.get("forks_count") or 0,
            updated_at=data["updated_at"],
            fork=bool(data.get("fork", False)),
        )


@dataclass(frozen=True)
class Project:
    """A non-fork repository prepared for display."""

    id: int | str
    title: str
    description: str
    github_url: str
    language: str | None  # None hides the language badge
    stars: int
    forks: int
    updated_at: str  # date only, already formatted for the viewer

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the project to the shape consumed by page templates.

        Returns:
            Dictionary with camelCase keys; ``language`` is omitted when absent
        """
        data: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "githubUrl": self.github_url,
            "stars": self.stars,
            "forks": self.forks,
            "updatedAt": self.updated_at,
        }
        if self.language is not None:
            data["language"] = self.language
        return data
