"""Domain models for release-note generation.

Commits and tags are read-only snapshots of the local repository; users and
merge requests model only the subset of the GitLab payload that release notes
need.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Commit:
    """A commit as seen by the release-note pipeline."""

    sha: str
    author_name: str
    author_email: str
    message: str


@dataclass(frozen=True, slots=True)
class Tag:
    """A release tag whose name is ``<prefix><number>``."""

    name: str
    number: int


@dataclass(frozen=True, slots=True)
class User:
    """Represents a GitLab user as embedded in merge request payloads."""

    id: int
    name: str
    username: str


@dataclass(frozen=True, slots=True)
class MergeRequest:
    """Represents the merge request fields shown in release notes."""

    iid: int
    title: str
    description: str
    author: User

    def __str__(self) -> str:
        return f"{self.title} by {self.author.name}"
