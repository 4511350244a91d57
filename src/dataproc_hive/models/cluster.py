"""Pydantic models for Dataproc clusters as returned by the cluster controller."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ClusterState(str, Enum):
    """Dataproc cluster lifecycle states."""

    UNKNOWN = "UNKNOWN"
    CREATING = "CREATING"
    RUNNING = "RUNNING"
    ERROR = "ERROR"
    ERROR_DUE_TO_UPDATE = "ERROR_DUE_TO_UPDATE"
    DELETING = "DELETING"
    UPDATING = "UPDATING"
    STOPPING = "STOPPING"
    STOPPED = "STOPPED"
    STARTING = "STARTING"
    REPAIRING = "REPAIRING"

    @classmethod
    def from_str(cls, value: str | None) -> "ClusterState":
        """Parse a state string, falling back to UNKNOWN."""
        if not value:
            return cls.UNKNOWN
        try:
            return cls(value.upper())
        except ValueError:
            return cls.UNKNOWN


class EndpointConfig(BaseModel):
    """Component Gateway endpoints of a cluster."""

    model_config = ConfigDict(frozen=True)

    http_ports: dict[str, str] = Field(
        default_factory=dict, description="Service port name to HTTPS URL"
    )
    enable_http_port_access: bool = Field(False, description="Whether Component Gateway is on")


class ClusterMetrics(BaseModel):
    """HDFS and YARN metrics reported for a cluster."""

    model_config = ConfigDict(frozen=True)

    hdfs_metrics: dict[str, int] = Field(default_factory=dict, description="HDFS metrics")
    yarn_metrics: dict[str, int] = Field(default_factory=dict, description="YARN metrics")


class ClusterRecord(BaseModel):
    """A Dataproc cluster as seen by the resolver."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Cluster name")
    project_id: str = Field(..., description="Owning project ID")
    region: str | None = Field(None, description="Region the cluster runs in")
    state: ClusterState = Field(ClusterState.UNKNOWN, description="Current lifecycle state")
    labels: dict[str, str] = Field(default_factory=dict, description="Cluster labels")
    metrics: ClusterMetrics | None = Field(None, description="Cluster metrics")
    endpoint_config: EndpointConfig | None = Field(None, description="Component Gateway endpoints")

    @property
    def is_running(self) -> bool:
        """Check if the cluster can accept connections."""
        return self.state == ClusterState.RUNNING

    @classmethod
    def from_api(cls, data: dict[str, Any], region: str | None = None) -> "ClusterRecord":
        """Create from a Dataproc v1 REST API cluster resource.

        Args:
            data: Decoded JSON cluster resource.
            region: Region the cluster was fetched from. The REST resource
                does not carry it.
        """
        status = data.get("status") or {}
        config = data.get("config") or {}

        endpoint_config = None
        raw_endpoint = config.get("endpointConfig")
        if raw_endpoint is not None:
            endpoint_config = EndpointConfig(
                http_ports=dict(raw_endpoint.get("httpPorts") or {}),
                enable_http_port_access=bool(raw_endpoint.get("enableHttpPortAccess", False)),
            )

        metrics = None
        raw_metrics = data.get("metrics")
        if raw_metrics is not None:
            metrics = ClusterMetrics(
                hdfs_metrics=_parse_metrics(raw_metrics.get("hdfsMetrics")),
                yarn_metrics=_parse_metrics(raw_metrics.get("yarnMetrics")),
            )

        return cls(
            name=data["clusterName"],
            project_id=data.get("projectId", ""),
            region=region,
            state=ClusterState.from_str(status.get("state")),
            labels=dict(data.get("labels") or {}),
            metrics=metrics,
            endpoint_config=endpoint_config,
        )


def _parse_metrics(values: dict[str, Any] | None) -> dict[str, int]:
    """Parse metric values, which the REST API encodes as int64 strings."""
    result: dict[str, int] = {}
    for key, value in (values or {}).items():
        try:
            result[key] = int(value)
        except (ValueError, TypeError):
            continue
    return result
