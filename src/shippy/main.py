"""Entry point for the shippy release note generator."""

from __future__ import annotations

import logging
import sys
from typing import List, Optional, Sequence

from .cli import parse_args
from .config import load_config
from .errors import (
    AuthenticationError,
    ConfigurationError,
    DecodeError,
    HistoryError,
    NotFoundError,
    ParseError,
    TransportError,
)
from .gitlab_client import FetchStrategy, GitLabClient
from .models import MergeRequest
from .release_notes import generate
from .repository import GitRepository

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_UNEXPECTED = 1
EXIT_CONFIGURATION = 2
EXIT_AUTHENTICATION = 3
EXIT_API = 4
EXIT_NOT_FOUND = 5


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def format_release_notes(up_to: str, merge_requests: List[MergeRequest]) -> str:
    """Render merge requests as a plain-text list, ordered by iid."""
    lines = [f"Release notes for {up_to}:"]
    if not merge_requests:
        lines.append("  (no merge requests)")
    for merge_request in sorted(merge_requests, key=lambda mr: mr.iid):
        lines.append(f"- {merge_request}")
    return "\n".join(lines)


def orchestrate_release_notes(argv: Optional[Sequence[str]] = None) -> int:
    """Run release note generation and map failures to exit codes.

    Returns:
        ``0`` on success, otherwise a non-zero exit code identifying the
        failure category.
    """
    try:
        args = parse_args(argv)
        _configure_logging(args.verbose)

        config = load_config(args.config)
        client = GitLabClient(config=config, api_token=config.api_token.resolve())
        repository = GitRepository.open(args.repo)

        merge_requests = generate(
            repository=repository,
            client=client,
            prefix=args.tag_prefix,
            upper_ref=args.up_to,
            strategy=FetchStrategy(args.strategy),
        )
        print(format_release_notes(args.up_to, merge_requests))
        return EXIT_OK
    except AuthenticationError as exc:
        logger.error("%s", exc)
        return EXIT_AUTHENTICATION
    except (ConfigurationError, ParseError) as exc:
        logger.error("%s", exc)
        return EXIT_CONFIGURATION
    except (TransportError, DecodeError) as exc:
        logger.error("%s", exc)
        return EXIT_API
    except (NotFoundError, HistoryError) as exc:
        logger.error("%s", exc)
        return EXIT_NOT_FOUND
    except Exception:
        logger.exception("Unexpected error while generating release notes")
        return EXIT_UNEXPECTED


def main() -> None:
    sys.exit(orchestrate_release_notes())


if __name__ == "__main__":
    main()
