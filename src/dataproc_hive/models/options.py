"""Connection options parsed from a jdbc:dataproc URL."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from dataproc_hive.utils.errors import InvalidURLError


class ConnectionOptions(BaseModel):
    """Everything needed to resolve a cluster and rewrite the connection URL.

    At most one of ``cluster_name`` and ``cluster_pool_label`` is set. When
    neither is set the default selector (any active cluster) applies.
    """

    model_config = ConfigDict(frozen=True)

    project_id: str = Field(..., min_length=1, description="GCP project ID")
    region: str = Field(..., min_length=1, description="Dataproc region")
    cluster_name: str | None = Field(
        None, min_length=1, description="Cluster to connect to by name"
    )
    cluster_pool_label: str | None = Field(
        None, min_length=1, description="Colon-separated key=value labels selecting a cluster"
    )
    database: str = Field("", description="Database path segment")
    user: str | None = Field(None, description="Hive user, passed through")
    password: str | None = Field(None, description="Hive password, passed through")
    extra_params: tuple[tuple[str, str], ...] = Field(
        default=(), description="Other session parameters, passed through in order"
    )
    query: str | None = Field(None, description="Hive configuration list after '?'")
    fragment: str | None = Field(None, description="Hive variable list after '#'")

    @model_validator(mode="after")
    def check_selection_mode(self) -> ConnectionOptions:
        if self.cluster_name is not None and self.cluster_pool_label is not None:
            raise ValueError("clusterName and clusterPoolLabel cannot both be set")
        return self

    @property
    def uses_cluster_name(self) -> bool:
        """Check if the cluster is addressed directly by name."""
        return self.cluster_name is not None

    @classmethod
    def builder(cls) -> ConnectionOptionsBuilder:
        """Start building a ConnectionOptions instance."""
        return ConnectionOptionsBuilder()


class ConnectionOptionsBuilder:
    """Accumulates fields and builds an immutable ConnectionOptions."""

    def __init__(self) -> None:
        self._fields: dict[str, object] = {}
        self._extra: list[tuple[str, str]] = []

    def set_project_id(self, project_id: str) -> ConnectionOptionsBuilder:
        self._fields["project_id"] = project_id
        return self

    def set_region(self, region: str) -> ConnectionOptionsBuilder:
        self._fields["region"] = region
        return self

    def set_cluster_name(self, cluster_name: str | None) -> ConnectionOptionsBuilder:
        self._fields["cluster_name"] = cluster_name
        return self

    def set_cluster_pool_label(self, label: str | None) -> ConnectionOptionsBuilder:
        self._fields["cluster_pool_label"] = label
        return self

    def set_database(self, database: str) -> ConnectionOptionsBuilder:
        self._fields["database"] = database
        return self

    def set_user(self, user: str | None) -> ConnectionOptionsBuilder:
        self._fields["user"] = user
        return self

    def set_password(self, password: str | None) -> ConnectionOptionsBuilder:
        self._fields["password"] = password
        return self

    def add_param(self, key: str, value: str) -> ConnectionOptionsBuilder:
        self._extra.append((key, value))
        return self

    def set_query(self, query: str | None) -> ConnectionOptionsBuilder:
        self._fields["query"] = query
        return self

    def set_fragment(self, fragment: str | None) -> ConnectionOptionsBuilder:
        self._fields["fragment"] = fragment
        return self

    def build(self) -> ConnectionOptions:
        """Build the options.

        Raises:
            InvalidURLError: If required fields are missing or both cluster
                selection modes are set.
        """
        try:
            return ConnectionOptions(**self._fields, extra_params=tuple(self._extra))
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'options'}: {err['msg']}"
                for err in e.errors()
            )
            raise InvalidURLError(f"Invalid connection options: {problems}") from e
