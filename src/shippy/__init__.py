"""shippy: release notes from git tags and GitLab merge requests."""

__version__ = "0.1.0"
