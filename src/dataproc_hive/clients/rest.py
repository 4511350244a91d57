"""Dataproc cluster controller client over the v1 REST API."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import httpx

from dataproc_hive.models.cluster import ClusterRecord
from dataproc_hive.utils.errors import ClusterServiceError

if TYPE_CHECKING:
    from dataproc_hive.config import DataprocConfig

logger = logging.getLogger(__name__)


class DataprocRestClient:
    """Client for the Dataproc clusters REST resource.

    Usage:
        with DataprocRestClient(config) as client:
            for cluster in client.list_clusters("my-project", "us-central1", "status.state = ACTIVE"):
                ...
    """

    def __init__(self, config: DataprocConfig, http_client: httpx.Client | None = None) -> None:
        self._config = config
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(timeout=config.request_timeout)

    def __enter__(self) -> DataprocRestClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            self._http.close()

    def list_clusters(self, project_id: str, region: str, filter: str) -> Iterator[ClusterRecord]:
        """List clusters matching a filter, following nextPageToken across pages."""
        url = self._clusters_url(project_id, region)
        params: dict[str, Any] = {"filter": filter, "pageSize": self._config.page_size}

        while True:
            payload = self._get(url, params=params)
            for item in payload.get("clusters") or []:
                yield _parse_cluster(item, region)

            page_token = payload.get("nextPageToken")
            if not page_token:
                return
            logger.debug(f"Fetching next page of clusters in {project_id}/{region}")
            params = {**params, "pageToken": page_token}

    def get_cluster(self, project_id: str, region: str, name: str) -> ClusterRecord:
        """Get a cluster by name.

        Raises:
            ClusterServiceError: With status NOT_FOUND if the cluster does not exist,
                or without status if the response is not a cluster resource.
        """
        payload = self._get(f"{self._clusters_url(project_id, region)}/{quote(name, safe='')}")
        return _parse_cluster(payload, region)

    def _clusters_url(self, project_id: str, region: str) -> str:
        base = self._config.endpoint_for(region)
        return f"{base}/v1/projects/{project_id}/regions/{region}/clusters"

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._config.access_token:
            headers["Authorization"] = f"Bearer {self._config.access_token}"
        return headers

    def _get(self, url: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        logger.debug(f"GET {url} params={params}")
        try:
            response = self._http.get(url, params=params, headers=self._headers())
        except httpx.HTTPError as e:
            raise ClusterServiceError(f"Request to Dataproc API failed: {e}") from e

        if response.is_error:
            raise _service_error(response)

        try:
            return response.json()
        except ValueError as e:
            raise ClusterServiceError(f"Invalid JSON from Dataproc API: {e}") from e


def _parse_cluster(data: Any, region: str) -> ClusterRecord:
    """Parse a cluster resource, reporting malformed payloads as service errors."""
    try:
        return ClusterRecord.from_api(data, region=region)
    except (KeyError, TypeError, AttributeError, ValueError) as e:
        raise ClusterServiceError(f"Malformed cluster resource from Dataproc API: {e!r}") from e


def _service_error(response: httpx.Response) -> ClusterServiceError:
    """Build a ClusterServiceError from a Google API error response."""
    status: str | None = None
    message = response.text
    try:
        error = response.json().get("error") or {}
        status = error.get("status")
        message = error.get("message") or message
    except (ValueError, AttributeError):
        pass
    return ClusterServiceError(
        f"Dataproc API returned {response.status_code}: {message}",
        status=status,
        code=response.status_code,
    )
