"""Release note generation pipeline.

Composes tag resolution, history traversal, merge request extraction and the
GitLab lookup. Each stage raises on failure; nothing is caught here.
"""

from __future__ import annotations

import logging
from typing import List

from .gitlab_client import FetchStrategy, GitLabClient
from .history import commits_between
from .models import MergeRequest
from .references import extract_ids_ordered
from .repository import GitRepository
from .tags import resolve_latest

logger = logging.getLogger(__name__)


def generate(
    repository: GitRepository,
    client: GitLabClient,
    prefix: str,
    upper_ref: str = "HEAD",
    strategy: FetchStrategy = FetchStrategy.PAGINATED,
) -> List[MergeRequest]:
    """Return the merge requests merged since the latest ``prefix`` tag."""
    latest_tag = resolve_latest(repository, prefix)
    logger.info("Searching between %s and %s", latest_tag.name, upper_ref)

    commits = commits_between(repository, upper_ref, latest_tag.name)
    merge_request_ids = extract_ids_ordered(commits)
    logger.info(
        "Found %d commits, pointing to %d merge requests",
        len(commits),
        len(merge_request_ids),
    )

    return client.fetch_by_ids(merge_request_ids, strategy=strategy)
