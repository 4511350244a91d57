"""Exception hierarchy for Dataproc Hive URL resolution."""


class DataprocError(Exception):
    """Base exception for all Dataproc Hive URL errors."""

    pass


class InvalidURLError(DataprocError):
    """The connection URL cannot be turned into a reachable Hive endpoint."""

    pass


class InvalidSelectorError(InvalidURLError):
    """The cluster pool label selector is malformed."""

    def __init__(self, selector: str | None, reason: str) -> None:
        self.selector = selector
        self.reason = reason
        super().__init__(f"Invalid cluster pool label '{selector}': {reason}")


class MalformedSelectorError(InvalidSelectorError):
    """A selector token is not of the form key=value."""

    pass


class DuplicateLabelKeyError(InvalidSelectorError):
    """A label key appears more than once in the selector."""

    def __init__(self, selector: str, key: str) -> None:
        self.key = key
        super().__init__(selector, f"label key '{key}' is repeated")


class ReservedLabelKeyError(InvalidSelectorError):
    """The selector tries to set a key that is supplied internally."""

    def __init__(self, selector: str, key: str) -> None:
        self.key = key
        super().__init__(selector, f"'{key}' cannot be set in a cluster pool label")


class ClusterNotFoundError(InvalidURLError):
    """No cluster matches the requested name or selector."""

    def __init__(self, project_id: str, region: str, detail: str) -> None:
        self.project_id = project_id
        self.region = region
        super().__init__(f"No cluster found in project '{project_id}', region '{region}': {detail}")


class AmbiguousClusterError(InvalidURLError):
    """More than one cluster satisfies the selector."""

    def __init__(self, filter_string: str, cluster_names: list[str]) -> None:
        self.filter_string = filter_string
        self.cluster_names = cluster_names
        names = ", ".join(cluster_names)
        super().__init__(
            f"Multiple clusters match filter '{filter_string}': {names}. "
            "Use a more specific cluster pool label or a cluster name."
        )


class ClusterNotReadyError(InvalidURLError):
    """The matched cluster is not in the RUNNING state."""

    def __init__(self, cluster_name: str, state: str) -> None:
        self.cluster_name = cluster_name
        self.state = state
        super().__init__(f"Cluster '{cluster_name}' is not ready (state: {state})")


class NoReachableEndpointError(InvalidURLError):
    """The cluster exposes no HTTPS endpoint to connect through."""

    def __init__(self, cluster_name: str) -> None:
        self.cluster_name = cluster_name
        super().__init__(
            f"Cluster '{cluster_name}' has no reachable HTTPS endpoint. "
            "Enable Component Gateway on the cluster."
        )


class ClusterServiceError(DataprocError):
    """The cluster management service call failed."""

    def __init__(
        self,
        message: str,
        status: str | None = None,
        code: int | None = None,
    ) -> None:
        self.status = status
        self.code = code
        super().__init__(message)

    @property
    def is_not_found(self) -> bool:
        """Check if the remote reported that the resource does not exist."""
        return self.status == "NOT_FOUND" or self.code == 404
