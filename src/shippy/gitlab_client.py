"""GitLab REST API client for merge request lookups."""

from __future__ import annotations

import enum
import logging
from typing import Any, Dict, Iterable, List, Optional, Set

import requests

from .config import Config
from .errors import DecodeError, NotFoundError, TransportError
from .models import MergeRequest, User

logger = logging.getLogger(__name__)


class FetchStrategy(str, enum.Enum):
    """How ``GitLabClient.fetch_by_ids`` resolves a set of iids."""

    DIRECT = "direct"
    PAGINATED = "paginated"


class GitLabClient:
    """Small, typed client for the GitLab merge request API of one project."""

    _PAGE_SIZE = 100

    def __init__(self, config: Config, api_token: str) -> None:
        """Initialize an authenticated GitLab API client.

        Args:
            config: Validated runtime configuration with base URL and project.
            api_token: Resolved private token sent with every request.
        """
        self._config = config
        self._timeout_seconds = config.timeout_seconds
        self._base_url = f"{config.base_url}/api/v4/projects/{config.project_id}"

        self._session = requests.Session()
        self._session.headers.update(
            {"Private-Token": api_token, "Accept": "application/json"}
        )

    def _build_url(self, path: str) -> str:
        """Build a fully qualified API URL from a path below the project."""
        return f"{self._base_url}/{path.lstrip('/')}"

    def _get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Execute a single GET request and decode its JSON body.

        No retries are attempted; the first failure is raised.

        Raises:
            TransportError: If the request cannot be sent or returns HTTP >= 400.
            DecodeError: If the body is not valid JSON.
        """
        url = self._build_url(path)

        try:
            response = self._session.get(url, params=params, timeout=self._timeout_seconds)
        except requests.RequestException as exc:
            raise TransportError(f"GitLab request failed: GET {url}") from exc

        if response.status_code >= 400:
            raise TransportError(
                "GitLab API request failed: "
                f"GET {url} returned {response.status_code} - {response.text}"
            )

        try:
            return response.json()
        except ValueError as exc:
            raise DecodeError(
                f"GitLab API returned invalid JSON: GET {url}\n{response.text}"
            ) from exc

    def _parse_merge_request(self, item: Any) -> MergeRequest:
        """Build a ``MergeRequest`` from one API record.

        Raises:
            DecodeError: If required fields are missing or have the wrong type.
        """
        try:
            author = item["author"]
            return MergeRequest(
                iid=int(item["iid"]),
                title=str(item["title"]),
                description=item.get("description") or "",
                author=User(
                    id=int(author["id"]),
                    name=str(author["name"]),
                    username=str(author["username"]),
                ),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise DecodeError(
                f"GitLab merge request payload is missing required fields: payload={item}"
            ) from exc

    def get_merge_request(self, iid: int) -> MergeRequest:
        """Fetch a single merge request by its project-scoped iid."""
        payload = self._get_json(f"merge_requests/{iid}")
        return self._parse_merge_request(payload)

    def list_merge_requests_page(self, page: int) -> List[Any]:
        """Fetch one page of the merge request listing.

        Raises:
            DecodeError: If the page is not a JSON array.
        """
        payload = self._get_json(
            "merge_requests",
            params={"page": page, "per_page": self._PAGE_SIZE},
        )
        if not isinstance(payload, list):
            raise DecodeError(
                f"GitLab API returned unexpected payload shape for page {page}: {payload}"
            )
        return payload

    def _fetch_directly(self, ids: Iterable[int]) -> List[MergeRequest]:
        merge_requests: List[MergeRequest] = []
        for iid in ids:
            try:
                merge_requests.append(self.get_merge_request(iid))
            except TransportError as exc:
                raise TransportError(f"Could not fetch merge request !{iid}: {exc}") from exc
        return merge_requests

    def _fetch_paginated(self, ids: Iterable[int]) -> List[MergeRequest]:
        """Walk the listing until every requested iid has been seen.

        Records for iids that were not requested are ignored; records without
        an integer iid fail the fetch. Pages are requested one at a time,
        starting at page 0.

        Raises:
            NotFoundError: If the listing runs out of records while iids are
                still outstanding.
            DecodeError: If a listing record is not an object with an integer iid.
        """
        outstanding: Set[int] = set(ids)
        merge_requests: List[MergeRequest] = []
        page = 0

        while outstanding:
            items = self.list_merge_requests_page(page)
            if not items:
                missing = ", ".join(f"!{iid}" for iid in sorted(outstanding))
                raise NotFoundError(
                    f"Could not find merge requests {missing} in project {self._config.project_id} "
                    f"after {page} page(s) of results"
                )

            for item in items:
                iid = item.get("iid") if isinstance(item, dict) else None
                if isinstance(iid, bool) or not isinstance(iid, int):
                    raise DecodeError(
                        f"GitLab merge request listing record on page {page} has no integer iid: "
                        f"payload={item}"
                    )
                if iid not in outstanding:
                    continue
                merge_requests.append(self._parse_merge_request(item))
                outstanding.discard(iid)

            logger.debug(
                "Fetched merge request page",
                extra={"page": page, "records": len(items), "outstanding": len(outstanding)},
            )
            page += 1

        return merge_requests

    def fetch_by_ids(
        self,
        ids: Iterable[int],
        strategy: FetchStrategy = FetchStrategy.PAGINATED,
    ) -> List[MergeRequest]:
        """Resolve merge request iids into full records.

        An empty ``ids`` returns ``[]`` without any request. The result holds
        each requested iid exactly once, in no particular order.

        Raises:
            TransportError: If a request fails.
            DecodeError: If a response cannot be decoded.
            NotFoundError: If the paginated listing does not contain every iid.
        """
        unique_ids = sorted(set(ids))
        if not unique_ids:
            return []

        if strategy is FetchStrategy.DIRECT:
            return self._fetch_directly(unique_ids)
        return self._fetch_paginated(unique_ids)
