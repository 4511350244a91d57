"""Cluster pool label selectors and Dataproc list filters.

A cluster pool label is a colon-separated list of ``key=value`` tokens, for
example ``com=google:env=staging``. It is turned into a filter understood by
the Dataproc ``clusters.list`` call, always restricted to active clusters::

    status.state = ACTIVE AND labels.com = google AND labels.env = staging

A single ``clusterName=<name>`` token is a shorthand that filters on the
cluster name field instead of a label::

    status.state = ACTIVE AND clusterName = <name>

In a selector with more than one token every key is a label key.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from dataproc_hive.utils.errors import (
    DuplicateLabelKeyError,
    MalformedSelectorError,
    ReservedLabelKeyError,
)

logger = logging.getLogger(__name__)

STATUS_KEY = "status.state"
CLUSTER_NAME_KEY = "clusterName"
DEFAULT_FILTER = f"{STATUS_KEY} = ACTIVE"

TOKEN_SEPARATOR = ":"
PAIR_SEPARATOR = "="

LABEL_KEY_PATTERN = re.compile(r"[A-Za-z][\w.-]*")
LABEL_VALUE_PATTERN = re.compile(r"[\w.-]+")


@dataclass(frozen=True)
class LabelSelector:
    """Ordered, validated key/value pairs of a cluster pool label."""

    pairs: tuple[tuple[str, str], ...]

    @property
    def is_cluster_name_shorthand(self) -> bool:
        """Check if the selector is the single clusterName=<name> form."""
        return self.keys() == [CLUSTER_NAME_KEY]

    def keys(self) -> list[str]:
        """Get the label keys in input order."""
        return [key for key, _ in self.pairs]


def parse_label_selector(selector: str) -> LabelSelector:
    """Tokenize and validate a cluster pool label.

    Raises:
        MalformedSelectorError: If the selector is empty or a token is not
            a non-empty key=value pair, or a key or value holds characters
            outside the label character set.
        ReservedLabelKeyError: If a token sets the cluster status key.
        DuplicateLabelKeyError: If a key appears more than once.
    """
    if not selector:
        raise MalformedSelectorError(selector, "selector is empty")

    pairs: list[tuple[str, str]] = []
    seen: set[str] = set()
    for token in selector.split(TOKEN_SEPARATOR):
        key, sep, value = token.partition(PAIR_SEPARATOR)
        if not sep:
            raise MalformedSelectorError(selector, f"token '{token}' is not of the form key=value")
        if not key or not value:
            raise MalformedSelectorError(selector, f"token '{token}' has an empty key or value")
        if not LABEL_KEY_PATTERN.fullmatch(key):
            raise MalformedSelectorError(selector, f"label key '{key}' has invalid characters")
        if not LABEL_VALUE_PATTERN.fullmatch(value):
            raise MalformedSelectorError(
                selector, f"label value '{value}' has invalid characters"
            )
        if key == STATUS_KEY:
            raise ReservedLabelKeyError(selector, key)
        if key in seen:
            raise DuplicateLabelKeyError(selector, key)
        seen.add(key)
        pairs.append((key, value))

    return LabelSelector(pairs=tuple(pairs))


def build_filter(selector: str | None) -> str:
    """Build the clusters.list filter for a cluster pool label.

    Args:
        selector: Cluster pool label, or None to match any active cluster.

    Returns:
        Filter string, never empty.

    Raises:
        InvalidSelectorError: If the selector is malformed.
    """
    if selector is None:
        return DEFAULT_FILTER

    label_selector = parse_label_selector(selector)

    if label_selector.is_cluster_name_shorthand:
        clauses = [f"{CLUSTER_NAME_KEY} = {label_selector.pairs[0][1]}"]
    else:
        clauses = [f"labels.{key} = {value}" for key, value in label_selector.pairs]

    filter_string = " AND ".join([DEFAULT_FILTER, *clauses])
    logger.debug(f"Built cluster filter '{filter_string}' from selector '{selector}'")
    return filter_string
