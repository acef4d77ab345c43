"""Shared fixtures building throwaway git repositories."""

import sys
from pathlib import Path

import git
import pytest

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from shippy.repository import GitRepository


@pytest.fixture
def git_repo(tmp_path, monkeypatch):
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test Author")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "author@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test Author")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "author@example.com")
    return git.Repo.init(tmp_path)


@pytest.fixture
def repository(git_repo):
    return GitRepository(git_repo)
