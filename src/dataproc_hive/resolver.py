"""Resolution of connection options to a single running Dataproc cluster.

Resolution strategy:
1. With a cluster name, fetch that cluster directly.
2. Otherwise build a filter from the cluster pool label (or the default
   active-cluster filter) and list matching clusters.
3. Require exactly one match and require it to be RUNNING.
4. Take the host from the cluster's Component Gateway endpoints.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

from dataproc_hive.filters import build_filter
from dataproc_hive.urls import to_target_url
from dataproc_hive.utils.errors import (
    AmbiguousClusterError,
    ClusterNotFoundError,
    ClusterNotReadyError,
    ClusterServiceError,
    NoReachableEndpointError,
)

if TYPE_CHECKING:
    from dataproc_hive.clients.base import ClusterControllerClient
    from dataproc_hive.config import DataprocConfig
    from dataproc_hive.models.cluster import ClusterRecord
    from dataproc_hive.models.options import ConnectionOptions

logger = logging.getLogger(__name__)

DEFAULT_PREFERRED_PORT = "YARN ResourceManager"


def extract_host(cluster: ClusterRecord, preferred_port: str = DEFAULT_PREFERRED_PORT) -> str:
    """Get the bare hostname of a cluster's Component Gateway.

    All endpoint URLs of a cluster share one host. The URL of
    ``preferred_port`` is used when it is an HTTPS URL; otherwise the HTTPS
    URL whose port name sorts first.

    Raises:
        NoReachableEndpointError: If the cluster has no HTTPS endpoint.
    """
    http_ports = cluster.endpoint_config.http_ports if cluster.endpoint_config else {}

    hosts: dict[str, str] = {}
    for port_name, url in http_ports.items():
        parts = urlsplit(url)
        if parts.scheme == "https" and parts.hostname:
            hosts[port_name] = parts.hostname

    if not hosts:
        raise NoReachableEndpointError(cluster.name)

    if preferred_port in hosts:
        return hosts[preferred_port]
    return hosts[min(hosts)]


class ClusterResolver:
    """Resolves connection options to a cluster host through the cluster controller."""

    def __init__(
        self, client: ClusterControllerClient, config: DataprocConfig | None = None
    ) -> None:
        self._client = client
        self._preferred_port = (
            config.preferred_endpoint_port if config is not None else DEFAULT_PREFERRED_PORT
        )

    def resolve_cluster(self, options: ConnectionOptions) -> ClusterRecord:
        """Find the single running cluster the options refer to.

        Raises:
            InvalidSelectorError: If the cluster pool label is malformed.
            ClusterNotFoundError: If no cluster matches.
            AmbiguousClusterError: If more than one cluster matches the selector.
            ClusterNotReadyError: If the matched cluster is not RUNNING.
            ClusterServiceError: If the cluster controller call fails.
        """
        if options.uses_cluster_name:
            cluster = self._get_by_name(options, str(options.cluster_name))
        else:
            cluster = self._get_by_selector(options)

        if not cluster.is_running:
            raise ClusterNotReadyError(cluster.name, cluster.state.value)

        logger.info(f"Resolved cluster '{cluster.name}' in {options.project_id}/{options.region}")
        return cluster

    def resolve_host(self, options: ConnectionOptions) -> str:
        """Resolve the options to the host of a running cluster."""
        cluster = self.resolve_cluster(options)
        host = extract_host(cluster, self._preferred_port)
        logger.debug(f"Cluster '{cluster.name}' is reachable at {host}")
        return host

    def to_target_url(self, options: ConnectionOptions) -> str:
        """Resolve the options and compose the jdbc:hive2 URL."""
        return to_target_url(options, self.resolve_host(options))

    def _get_by_name(self, options: ConnectionOptions, name: str) -> ClusterRecord:
        logger.debug(f"Looking up cluster '{name}' in {options.project_id}/{options.region}")
        try:
            return self._client.get_cluster(options.project_id, options.region, name)
        except ClusterServiceError as e:
            if e.is_not_found:
                raise ClusterNotFoundError(
                    options.project_id, options.region, f"cluster '{name}' does not exist"
                ) from e
            raise

    def _get_by_selector(self, options: ConnectionOptions) -> ClusterRecord:
        filter_string = build_filter(options.cluster_pool_label)
        logger.debug(
            f"Listing clusters in {options.project_id}/{options.region} "
            f"with filter '{filter_string}'"
        )
        # Drain every page before counting matches.
        clusters = list(
            self._client.list_clusters(options.project_id, options.region, filter_string)
        )

        if not clusters:
            raise ClusterNotFoundError(
                options.project_id,
                options.region,
                f"no cluster satisfies filter '{filter_string}'",
            )
        if len(clusters) > 1:
            raise AmbiguousClusterError(filter_string, [c.name for c in clusters])
        return clusters[0]


def resolve_target_url(options: ConnectionOptions, client: ClusterControllerClient) -> str:
    """Resolve connection options to a jdbc:hive2 URL."""
    return ClusterResolver(client).to_target_url(options)
