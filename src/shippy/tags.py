"""Release tag resolution.

Release tags are named ``<prefix><number>`` (for example ``release-41``). The
latest release is the tag with the greatest number, not the most recent one.
"""

from __future__ import annotations

import glob
import logging
import re
from typing import Optional

from .errors import ConfigurationError, NotFoundError, ParseError
from .models import Tag
from .repository import GitRepository

logger = logging.getLogger(__name__)

_NUMBER_PATTERN = re.compile(r"[0-9]+")


def parse_tag(name: str, prefix: str) -> Tag:
    """Parse the numeric suffix of ``name`` after ``prefix``.

    Raises:
        ParseError: If the suffix is not an unsigned decimal integer.
    """
    suffix = name[len(prefix):]
    if not _NUMBER_PATTERN.fullmatch(suffix):
        raise ParseError(
            f"Could not parse an unsigned integer from '{suffix}' in tag '{name}'"
        )
    return Tag(name=name, number=int(suffix))


def resolve_latest(repository: GitRepository, prefix: str) -> Tag:
    """Find the release tag with the highest number for ``prefix``.

    Every tag matching ``prefix*`` must carry a numeric suffix; a malformed
    tag fails the lookup instead of being skipped. When two tags carry the same
    number (``v01`` and ``v1``) the one listed last wins.

    Raises:
        ConfigurationError: If ``prefix`` is empty.
        ParseError: If a matching tag has a non-numeric suffix.
        NotFoundError: If no tag matches ``prefix``.
    """
    if not prefix:
        raise ConfigurationError(
            "prefix must be non-empty; an empty prefix would match every tag in the repository"
        )

    latest: Optional[Tag] = None
    for name in repository.list_tag_names(f"{glob.escape(prefix)}*"):
        tag = parse_tag(name, prefix)
        if latest is None or tag.number >= latest.number:
            latest = tag

    if latest is None:
        raise NotFoundError(f"Could not find any tags with prefix '{prefix}'")

    logger.debug("Resolved latest tag", extra={"prefix": prefix, "tag": latest.name})
    return latest
