"""
Dataproc Hive URL resolution

Resolves jdbc:dataproc Hive URLs to jdbc:hive2 URLs pointing at the
Component Gateway of a running Dataproc cluster.
"""

from dataproc_hive.filters import DEFAULT_FILTER, LabelSelector, build_filter, parse_label_selector
from dataproc_hive.models import ClusterRecord, ClusterState, ConnectionOptions, EndpointConfig
from dataproc_hive.resolver import ClusterResolver, extract_host, resolve_target_url
from dataproc_hive.urls import parse_url, to_target_url
from dataproc_hive.utils.errors import (
    ClusterServiceError,
    DataprocError,
    InvalidSelectorError,
    InvalidURLError,
)

__version__ = "0.1.0"
__all__ = [
    # Filters
    "DEFAULT_FILTER",
    "LabelSelector",
    "build_filter",
    "parse_label_selector",
    # Models
    "ClusterRecord",
    "ClusterState",
    "ConnectionOptions",
    "EndpointConfig",
    # Resolution
    "ClusterResolver",
    "extract_host",
    "resolve_target_url",
    # URLs
    "parse_url",
    "to_target_url",
    # Errors
    "DataprocError",
    "InvalidURLError",
    "InvalidSelectorError",
    "ClusterServiceError",
]
