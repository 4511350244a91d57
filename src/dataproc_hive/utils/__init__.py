"""Utility helpers for Dataproc Hive URL resolution."""

from dataproc_hive.utils.errors import (
    AmbiguousClusterError,
    ClusterNotFoundError,
    ClusterNotReadyError,
    ClusterServiceError,
    DataprocError,
    DuplicateLabelKeyError,
    InvalidSelectorError,
    InvalidURLError,
    MalformedSelectorError,
    NoReachableEndpointError,
    ReservedLabelKeyError,
)

__all__ = [
    # Errors
    "DataprocError",
    "InvalidURLError",
    "InvalidSelectorError",
    "MalformedSelectorError",
    "DuplicateLabelKeyError",
    "ReservedLabelKeyError",
    "ClusterNotFoundError",
    "AmbiguousClusterError",
    "ClusterNotReadyError",
    "NoReachableEndpointError",
    "ClusterServiceError",
]
