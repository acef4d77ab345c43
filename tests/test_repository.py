"""Tests for the read-only git repository facade."""

import pytest

from _git_helpers import commit
from shippy.errors import HistoryError, RefNotFoundError
from shippy.repository import GitRepository


def test_find_reference_resolves_head(git_repo, repository):
    """Verify HEAD is resolved through its symbolic branch reference."""
    head = commit(git_repo, "Initial Commit")

    assert repository.find_reference("HEAD") == head


def test_find_reference_unborn_head_raises(repository):
    """Verify a repository without commits has no resolvable HEAD."""
    with pytest.raises(RefNotFoundError):
        repository.find_reference("HEAD")


def test_find_tag_ref_peels_annotated_tag(git_repo, repository):
    """Verify annotated tags resolve to the tagged commit, not the tag object."""
    tagged = commit(git_repo, "Initial Commit")
    git_repo.create_tag("release-1", ref=tagged, message="Release 1")

    assert repository.find_tag_ref("release-1") == tagged


def test_find_branch_missing_raises(git_repo, repository):
    """Verify looking up an unknown branch raises RefNotFoundError."""
    commit(git_repo)

    with pytest.raises(RefNotFoundError, match="no-such-branch"):
        repository.find_branch("no-such-branch")


def test_list_tag_names_filters_by_glob(git_repo, repository):
    """Verify only tags matching the glob are listed."""
    sha = commit(git_repo)
    for name in ("tag-1", "tag-2", "other-3"):
        git_repo.create_tag(name, ref=sha)

    assert sorted(repository.list_tag_names("tag-*")) == ["tag-1", "tag-2"]


def test_walk_returns_commit_models(git_repo, repository):
    """Verify walked commits carry message and author metadata."""
    first = commit(git_repo, "Initial Commit")
    second = commit(git_repo, "Second commit")

    commits = repository.walk(second, hide=first)

    assert len(commits) == 1
    assert commits[0].sha == second
    assert commits[0].message == "Second commit"
    assert commits[0].author_name == "Test Author"
    assert commits[0].author_email == "author@example.com"


def test_walk_unknown_commit_raises_history_error(git_repo, repository):
    """Verify a walk seeded at a missing object surfaces as HistoryError."""
    head = commit(git_repo)

    with pytest.raises(HistoryError):
        repository.walk("0" * 40, hide=head)


def test_open_non_repository_raises_history_error(tmp_path):
    """Verify opening a plain directory fails with HistoryError."""
    with pytest.raises(HistoryError):
        GitRepository.open(tmp_path / "missing")
