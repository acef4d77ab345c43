"""Tests for merge request extraction from commit messages."""

from shippy.models import Commit
from shippy.references import associated_merge_request, extract_ids, extract_ids_ordered


def _commit(message: str, sha: str = "abc") -> Commit:
    return Commit(sha=sha, author_name="Author", author_email="a@example.com", message=message)


def test_associated_merge_request_reads_gitlab_trailer():
    """Verify the iid is read from the trailer GitLab appends to merge commits."""
    commit = _commit(
        "Merge branch 'fix-login' into 'main'\n\n"
        "Fix login redirect\n\n"
        "See merge request group/sub-group/project!42"
    )

    assert associated_merge_request(commit) == 42


def test_associated_merge_request_without_project_path():
    assert associated_merge_request(_commit("See merge request !7")) == 7


def test_associated_merge_request_no_match_returns_none():
    """Verify plain commits and issue references do not count."""
    assert associated_merge_request(_commit("Fix typo in README")) is None
    assert associated_merge_request(_commit("Closes #12 and mentions !13")) is None


def test_extract_ids_without_references_is_empty():
    commits = [_commit("Initial Commit"), _commit("An empty commit")]

    assert extract_ids(commits) == set()


def test_extract_ids_deduplicates_in_first_occurrence_order():
    """Verify an iid seen in several commits is reported once."""
    commits = [
        _commit("See merge request g/p!3", sha="c4"),
        _commit("Direct push", sha="c3"),
        _commit("See merge request g/p!1", sha="c2"),
        _commit("Revert\n\nSee merge request g/p!3", sha="c1"),
    ]

    assert extract_ids_ordered(commits) == [3, 1]
    assert extract_ids(commits) == {1, 3}
