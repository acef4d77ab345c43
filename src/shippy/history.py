"""Commit range traversal between two refs."""

from __future__ import annotations

import logging
from typing import Callable, List, Tuple

from .errors import RefNotFoundError
from .models import Commit
from .repository import GitRepository

logger = logging.getLogger(__name__)

_Strategy = Tuple[str, Callable[[GitRepository, str], str]]

# Tried in order; the first strategy that resolves the name wins.
_REF_STRATEGIES: Tuple[_Strategy, ...] = (
    ("direct-reference", lambda repository, name: repository.find_reference(name)),
    ("tag", lambda repository, name: repository.find_tag_ref(name)),
    ("local-branch", lambda repository, name: repository.find_branch(name)),
)


def resolve_ref(repository: GitRepository, name: str) -> str:
    """Resolve a ref, tag or branch name to a commit sha.

    Raises:
        RefNotFoundError: If ``name`` resolves through none of the strategies.
    """
    attempted: List[str] = []
    for strategy, lookup in _REF_STRATEGIES:
        attempted.append(strategy)
        try:
            return lookup(repository, name)
        except RefNotFoundError:
            continue

    raise RefNotFoundError(
        f"Could not resolve '{name}' to a commit (tried: {', '.join(attempted)})"
    )


def commits_between_ids(repository: GitRepository, upper: str, lower: str) -> List[Commit]:
    """List commits reachable from ``upper`` and not from ``lower``, newest first.

    ``lower`` is exclusive, ``upper`` inclusive.
    """
    if upper == lower:
        return []
    return repository.walk(upper, hide=lower)


def commits_between(repository: GitRepository, upper_ref: str, lower_ref: str) -> List[Commit]:
    """List the commits in ``upper_ref`` that are not in ``lower_ref``.

    Raises:
        RefNotFoundError: If either ref cannot be resolved.
        HistoryError: If the history walk fails.
    """
    upper = resolve_ref(repository, upper_ref)
    lower = resolve_ref(repository, lower_ref)
    commits = commits_between_ids(repository, upper, lower)

    logger.debug(
        "Collected commit range",
        extra={"upper": upper_ref, "lower": lower_ref, "count": len(commits)},
    )
    return commits
