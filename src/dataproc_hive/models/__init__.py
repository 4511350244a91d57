"""Pydantic models for connection options and Dataproc clusters."""

from dataproc_hive.models.cluster import (
    ClusterMetrics,
    ClusterRecord,
    ClusterState,
    EndpointConfig,
)
from dataproc_hive.models.options import ConnectionOptions, ConnectionOptionsBuilder

__all__ = [
    "ClusterMetrics",
    "ClusterRecord",
    "ClusterState",
    "ConnectionOptions",
    "ConnectionOptionsBuilder",
    "EndpointConfig",
]
