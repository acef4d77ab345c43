"""Extraction of merge request references from commit messages.

GitLab appends a trailer to every merge commit it creates::

    Merge branch 'feature' into 'main'

    See merge request group/project!42

The number after ``!`` is the merge request iid. Commits without such a
trailer (direct pushes, fast-forward merges) reference no merge request.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Set

from .models import Commit

MERGE_REQUEST_PATTERN = re.compile(r"See merge request [\w.\-/]*!(\d+)")


def associated_merge_request(commit: Commit) -> Optional[int]:
    """Return the merge request iid referenced by ``commit``, if any."""
    match = MERGE_REQUEST_PATTERN.search(commit.message)
    if match is None:
        return None
    return int(match.group(1))


def extract_ids_ordered(commits: Iterable[Commit]) -> List[int]:
    """Return unique merge request iids in order of first occurrence."""
    ids: List[int] = []
    seen: Set[int] = set()
    for commit in commits:
        iid = associated_merge_request(commit)
        if iid is None or iid in seen:
            continue
        seen.add(iid)
        ids.append(iid)
    return ids


def extract_ids(commits: Iterable[Commit]) -> Set[int]:
    return set(extract_ids_ordered(commits))
