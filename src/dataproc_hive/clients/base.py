"""Interface the resolver needs from the Dataproc cluster controller."""

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from dataproc_hive.models.cluster import ClusterRecord


@runtime_checkable
class ClusterControllerClient(Protocol):
    """Read-only access to Dataproc clusters.

    Implementations raise ClusterServiceError on failure. A missing cluster
    in get_cluster is reported with status NOT_FOUND.
    """

    def list_clusters(self, project_id: str, region: str, filter: str) -> Iterable[ClusterRecord]:
        """List clusters matching a filter. The result may be lazy or paged."""
        ...

    def get_cluster(self, project_id: str, region: str, name: str) -> ClusterRecord:
        """Get a single cluster by name."""
        ...
