"""Pytest fixtures for dataproc-hive-url tests."""

from collections.abc import Iterator

import pytest

from dataproc_hive.models import ClusterRecord, ClusterState, ConnectionOptions, EndpointConfig
from dataproc_hive.models.cluster import ClusterMetrics
from dataproc_hive.models.options import ConnectionOptionsBuilder
from dataproc_hive.utils.errors import ClusterServiceError

PROJECT_ID = "pid"
REGION = "us-central1"

HOST_1 = "uklx3owiy5bjlgps5cr72oppla-dot-us-central1.dataproc.googleusercontent.com"
HOST_2 = "xgqoq4dqbja2jlqz7dltjhxoka-dot-dataproc-test.googleusercontent.com"

FILTER_DEFAULT = "status.state = ACTIVE"
FILTER_CLUSTER_NAME = "status.state = ACTIVE AND clusterName = simple-cluster1"
FILTER_LONG = (
    "status.state = ACTIVE AND labels.com = google AND labels.env = staging"
    " AND labels.team = dataproc"
)
FILTER_CREATING = "status.state = ACTIVE AND labels.tag = creating"
FILTER_NO_ENDPOINT = "status.state = ACTIVE AND labels.tag = no-endpoint"


class FakeClusterController:
    """In-memory cluster controller keyed by filter string and cluster name."""

    def __init__(
        self,
        listings: dict[str, list[ClusterRecord]],
        clusters: dict[str, ClusterRecord],
    ) -> None:
        self.listings = listings
        self.clusters = clusters
        self.list_calls: list[tuple[str, str, str]] = []
        self.get_calls: list[tuple[str, str, str]] = []

    def list_clusters(self, project_id: str, region: str, filter: str) -> Iterator[ClusterRecord]:
        self.list_calls.append((project_id, region, filter))
        # Yield lazily, like a paged response.
        yield from self.listings.get(filter, [])

    def get_cluster(self, project_id: str, region: str, name: str) -> ClusterRecord:
        self.get_calls.append((project_id, region, name))
        if name not in self.clusters:
            raise ClusterServiceError(
                f"Not found: Cluster projects/{project_id}/regions/{region}/clusters/{name}",
                status="NOT_FOUND",
                code=404,
            )
        return self.clusters[name]


def _http_ports(host: str) -> dict[str, str]:
    return {
        "YARN ResourceManager": f"https://{host}/yarn/",
        "HDFS NameNode": f"https://{host}/hdfs/dfshealth.html",
    }


def _metrics() -> ClusterMetrics:
    return ClusterMetrics(yarn_metrics={"yarn-memory-mb-available": 0})


@pytest.fixture
def cluster1() -> ClusterRecord:
    """Running cluster reachable at HOST_1."""
    return ClusterRecord(
        name="simple-cluster1",
        project_id=PROJECT_ID,
        region=REGION,
        state=ClusterState.RUNNING,
        labels={"com": "google", "env": "staging", "team": "dataproc"},
        metrics=_metrics(),
        endpoint_config=EndpointConfig(http_ports=_http_ports(HOST_1), enable_http_port_access=True),
    )


@pytest.fixture
def cluster2() -> ClusterRecord:
    """Running cluster reachable at HOST_2."""
    return ClusterRecord(
        name="simple-cluster2",
        project_id=PROJECT_ID,
        region=REGION,
        state=ClusterState.RUNNING,
        metrics=_metrics(),
        endpoint_config=EndpointConfig(http_ports=_http_ports(HOST_2), enable_http_port_access=True),
    )


@pytest.fixture
def cluster3() -> ClusterRecord:
    """Cluster still being created, without endpoints."""
    return ClusterRecord(
        name="simple-cluster3",
        project_id=PROJECT_ID,
        region=REGION,
        state=ClusterState.CREATING,
        labels={"tag": "creating"},
    )


@pytest.fixture
def cluster_no_endpoint() -> ClusterRecord:
    """Running cluster without Component Gateway."""
    return ClusterRecord(
        name="no-gateway-cluster",
        project_id=PROJECT_ID,
        region=REGION,
        state=ClusterState.RUNNING,
        labels={"tag": "no-endpoint"},
    )


@pytest.fixture
def fake_controller(
    cluster1: ClusterRecord,
    cluster2: ClusterRecord,
    cluster3: ClusterRecord,
    cluster_no_endpoint: ClusterRecord,
) -> FakeClusterController:
    """Cluster controller with two running clusters, one creating, one without endpoints."""
    return FakeClusterController(
        listings={
            FILTER_DEFAULT: [cluster2, cluster1],
            FILTER_CLUSTER_NAME: [cluster1],
            FILTER_LONG: [cluster1],
            FILTER_CREATING: [cluster3],
            FILTER_NO_ENDPOINT: [cluster_no_endpoint],
        },
        clusters={
            cluster1.name: cluster1,
            cluster2.name: cluster2,
            cluster3.name: cluster3,
            cluster_no_endpoint.name: cluster_no_endpoint,
        },
    )


@pytest.fixture
def options_builder() -> ConnectionOptionsBuilder:
    """Builder preset with the test project and region."""
    return ConnectionOptions.builder().set_project_id(PROJECT_ID).set_region(REGION)
