"""Dataproc cluster controller clients."""

from dataproc_hive.clients.base import ClusterControllerClient
from dataproc_hive.clients.rest import DataprocRestClient

__all__ = [
    "ClusterControllerClient",
    "DataprocRestClient",
]
