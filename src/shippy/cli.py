"""Command-line argument parsing for shippy."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .config import DEFAULT_CONFIG_FILE
from .gitlab_client import FetchStrategy


def _tag_prefix(value: str) -> str:
    """Reject an empty tag prefix before any repository access.

    Raises:
        argparse.ArgumentTypeError: If value is empty.
    """
    if not value:
        raise argparse.ArgumentTypeError("must not be empty")
    return value


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments for release note generation.

    Returns:
        Parsed CLI arguments containing the tag prefix, the upper ref, the
        config and repository paths, the fetch strategy and verbosity.
    """
    parser = argparse.ArgumentParser(
        prog="shippy",
        description=(
            "List the GitLab merge requests merged since the latest release tag "
            "with the given prefix."
        ),
    )

    parser.add_argument(
        "tag_prefix",
        type=_tag_prefix,
        help="Prefix of release tags, e.g. 'release-' for tags like 'release-42'.",
    )
    parser.add_argument(
        "up_to",
        nargs="?",
        default="HEAD",
        help="Ref, tag or branch to collect merge requests up to (default: HEAD).",
    )
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG_FILE,
        help=f"Path to the YAML config file (default: {DEFAULT_CONFIG_FILE}).",
    )
    parser.add_argument(
        "--repo",
        default=".",
        help="Path to the git repository (default: current directory).",
    )
    parser.add_argument(
        "--strategy",
        choices=[strategy.value for strategy in FetchStrategy],
        default=FetchStrategy.PAGINATED.value,
        help="How merge requests are fetched from GitLab (default: paginated).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    return parser.parse_args(argv)
