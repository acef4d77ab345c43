"""Read-only query facade over a local git repository.

The rest of shippy talks to git only through ``GitRepository`` and receives
plain ``Commit`` models, never GitPython objects.
"""

from __future__ import annotations

import fnmatch
import logging
from pathlib import Path
from typing import List, Union

import git

from .errors import HistoryError, RefNotFoundError
from .models import Commit

logger = logging.getLogger(__name__)

_LOOKUP_ERRORS = (ValueError, TypeError, git.BadName, git.BadObject)


class GitRepository:
    """Small adapter exposing the repository queries release notes need."""

    def __init__(self, repo: git.Repo) -> None:
        self._repo = repo

    @classmethod
    def open(cls, path: Union[str, Path]) -> "GitRepository":
        """Open the git repository at ``path``.

        Raises:
            HistoryError: If ``path`` is not a readable git repository.
        """
        try:
            repo = git.Repo(str(path))
        except (git.InvalidGitRepositoryError, git.NoSuchPathError) as exc:
            raise HistoryError(f"Could not open git repository at '{path}'") from exc
        return cls(repo)

    def find_reference(self, name: str) -> str:
        """Resolve a full reference name such as ``HEAD`` or ``refs/heads/main``.

        Symbolic references and annotated tags are peeled down to the commit.

        Raises:
            RefNotFoundError: If the reference does not exist or does not point
                at a commit.
        """
        try:
            commit = git.SymbolicReference(self._repo, name).commit
        except _LOOKUP_ERRORS as exc:
            raise RefNotFoundError(f"Could not find reference '{name}'") from exc
        return commit.hexsha

    def find_tag_ref(self, tag_name: str) -> str:
        """Resolve a tag name below ``refs/tags``."""
        return self.find_reference(f"refs/tags/{tag_name}")

    def find_branch(self, name: str) -> str:
        """Resolve a local branch name.

        Raises:
            RefNotFoundError: If no local branch with that name exists.
        """
        try:
            head = self._repo.heads[name]
            commit = head.commit
        except (IndexError,) + _LOOKUP_ERRORS as exc:
            raise RefNotFoundError(f"Could not find branch '{name}'") from exc
        return commit.hexsha

    def list_tag_names(self, pattern: str) -> List[str]:
        """List tag names matching a shell-style glob, in repository order."""
        try:
            names = [tag.name for tag in self._repo.tags]
        except (git.GitCommandError, OSError) as exc:
            raise HistoryError("Could not read tags from repository") from exc
        return [name for name in names if fnmatch.fnmatchcase(name, pattern)]

    def walk(self, start: str, hide: str) -> List[Commit]:
        """Return commits reachable from ``start`` but not from ``hide``.

        Commits are in topological order, newest first. ``hide`` itself and all
        of its ancestors are excluded.

        Raises:
            HistoryError: If the history cannot be traversed.
        """
        revision = f"{hide}..{start}"
        try:
            commits = [
                Commit(
                    sha=commit.hexsha,
                    author_name=commit.author.name or "",
                    author_email=commit.author.email or "",
                    message=_as_text(commit.message),
                )
                for commit in self._repo.iter_commits(revision, topo_order=True)
            ]
        except (git.GitCommandError, ValueError) as exc:
            raise HistoryError(f"Error during history walk of '{revision}'") from exc

        logger.debug("Walked history", extra={"revision": revision, "count": len(commits)})
        return commits


def _as_text(message: Union[str, bytes]) -> str:
    if isinstance(message, bytes):
        return message.decode("utf-8", errors="replace")
    return message
