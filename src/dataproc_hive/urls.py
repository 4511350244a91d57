"""Parsing of jdbc:dataproc URLs and composition of jdbc:hive2 URLs.

Input form::

    jdbc:dataproc://hive/[db];projectId=p;region=r[;clusterName=c|;clusterPoolLabel=l]
        [;user=u;password=pw][?hive_conf_list][#hive_var_list]

Output form::

    jdbc:hive2://<host>:443/[db];transportMode=http;httpPath=hive;ssl=true;
        http.interceptor=<auth interceptor>[;user=u;password=pw][?...][#...]
"""

from __future__ import annotations

from dataproc_hive.models.options import ConnectionOptions
from dataproc_hive.utils.errors import InvalidURLError

SOURCE_PREFIX = "jdbc:dataproc://hive/"
TARGET_SCHEME = "jdbc:hive2"
TARGET_PORT = 443
AUTH_INTERCEPTOR = "com.google.cloud.dataproc.jdbc.DataprocCGAuthInterceptor"
HTTP_TRANSPORT_PARAMS = (
    f"transportMode=http;httpPath=hive;ssl=true;http.interceptor={AUTH_INTERCEPTOR}"
)

_FIELD_SETTERS = {
    "projectId": "set_project_id",
    "region": "set_region",
    "clusterName": "set_cluster_name",
    "clusterPoolLabel": "set_cluster_pool_label",
    "user": "set_user",
    "password": "set_password",
}


def is_dataproc_url(url: str) -> bool:
    """Check if a URL uses the jdbc:dataproc Hive scheme."""
    return url.startswith(SOURCE_PREFIX)


def parse_url(url: str) -> ConnectionOptions:
    """Parse a jdbc:dataproc Hive URL into connection options.

    Raises:
        InvalidURLError: If the scheme is wrong, a session parameter is not
            key=value, a parameter is repeated, or required options are missing.
    """
    if not is_dataproc_url(url):
        raise InvalidURLError(f"URL must start with '{SOURCE_PREFIX}': {url}")

    rest = url[len(SOURCE_PREFIX):]
    rest, hash_sep, fragment = rest.partition("#")
    rest, query_sep, query = rest.partition("?")

    database, *session_params = rest.split(";")

    builder = ConnectionOptions.builder().set_database(database)
    if query_sep:
        builder.set_query(query)
    if hash_sep:
        builder.set_fragment(fragment)

    seen: set[str] = set()
    for param in session_params:
        if not param:
            continue
        key, sep, value = param.partition("=")
        if not sep or not key:
            raise InvalidURLError(f"Session parameter '{param}' is not of the form key=value")
        if key in seen:
            raise InvalidURLError(f"Session parameter '{key}' is repeated")
        seen.add(key)

        setter = _FIELD_SETTERS.get(key)
        if setter:
            getattr(builder, setter)(value)
        else:
            builder.add_param(key, value)

    return builder.build()


def to_target_url(options: ConnectionOptions, host: str) -> str:
    """Compose the jdbc:hive2 URL for a resolved cluster host."""
    parts = [f"{TARGET_SCHEME}://{host}:{TARGET_PORT}/{options.database};{HTTP_TRANSPORT_PARAMS}"]
    if options.user is not None:
        parts.append(f";user={options.user}")
    if options.password is not None:
        parts.append(f";password={options.password}")
    for key, value in options.extra_params:
        parts.append(f";{key}={value}")
    if options.query is not None:
        parts.append(f"?{options.query}")
    if options.fragment is not None:
        parts.append(f"#{options.fragment}")
    return "".join(parts)
