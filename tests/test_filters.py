"""Tests for cluster pool label parsing and filter building."""

import pytest

from dataproc_hive.filters import DEFAULT_FILTER, build_filter, parse_label_selector
from dataproc_hive.utils.errors import (
    DuplicateLabelKeyError,
    InvalidSelectorError,
    InvalidURLError,
    MalformedSelectorError,
    ReservedLabelKeyError,
)


class TestParseLabelSelector:
    """Tests for parse_label_selector."""

    def test_pairs_keep_input_order(self) -> None:
        """Test pairs are returned in the order they were given."""
        selector = parse_label_selector("team=dataproc:com=google:env=staging")
        assert selector.pairs == (("team", "dataproc"), ("com", "google"), ("env", "staging"))
        assert selector.keys() == ["team", "com", "env"]

    def test_value_with_equals_rejected(self) -> None:
        """Test a value containing '=' is rejected."""
        with pytest.raises(MalformedSelectorError) as exc_info:
            parse_label_selector("expr=a=b")
        assert "a=b" in str(exc_info.value)

    @pytest.mark.parametrize(
        "selector",
        [
            " status.state =ERROR",
            "env=prod OR status.state = ERROR",
            "env=prod\n",
            "env='prod'",
            "1env=prod",
            "labels.env=(prod)",
        ],
    )
    def test_invalid_characters_rejected(self, selector: str) -> None:
        """Test keys and values outside the label character set are rejected."""
        with pytest.raises(MalformedSelectorError):
            parse_label_selector(selector)

    def test_label_characters_accepted(self) -> None:
        """Test dots, dashes and underscores are valid in keys and values."""
        selector = parse_label_selector("goog-dataproc.pool_id=pool-1.a_b")
        assert selector.pairs == (("goog-dataproc.pool_id", "pool-1.a_b"),)

    def test_cluster_name_shorthand(self) -> None:
        """Test the single clusterName token is recognized as shorthand."""
        assert parse_label_selector("clusterName=c1").is_cluster_name_shorthand
        assert not parse_label_selector("env=prod").is_cluster_name_shorthand
        assert not parse_label_selector("clusterName=c1:env=prod").is_cluster_name_shorthand

    def test_token_without_equals(self) -> None:
        """Test a token lacking '=' is rejected."""
        with pytest.raises(MalformedSelectorError) as exc_info:
            parse_label_selector("com=google:foo:env=staging")
        assert "foo" in str(exc_info.value)

    @pytest.mark.parametrize("selector", ["", "=google", "com=", "com=google:"])
    def test_empty_parts_rejected(self, selector: str) -> None:
        """Test empty selectors, keys and values are rejected."""
        with pytest.raises(MalformedSelectorError):
            parse_label_selector(selector)

    def test_duplicate_key(self) -> None:
        """Test a repeated key is rejected rather than overridden."""
        with pytest.raises(DuplicateLabelKeyError) as exc_info:
            parse_label_selector("com=google:env=staging:com=random")
        assert exc_info.value.key == "com"

    def test_reserved_status_key(self) -> None:
        """Test the status key cannot be set by the user."""
        with pytest.raises(ReservedLabelKeyError) as exc_info:
            parse_label_selector("env=prod:status.state=ACTIVE")
        assert exc_info.value.key == "status.state"


class TestBuildFilter:
    """Tests for build_filter."""

    def test_no_selector(self) -> None:
        """Test the default filter matches active clusters only."""
        assert build_filter(None) == DEFAULT_FILTER
        assert build_filter(None) == "status.state = ACTIVE"

    def test_long_selector(self) -> None:
        """Test each label becomes an AND clause in input order."""
        assert build_filter("com=google:env=staging:team=dataproc") == (
            "status.state = ACTIVE AND labels.com = google AND labels.env = staging"
            " AND labels.team = dataproc"
        )

    def test_single_label(self) -> None:
        """Test a single label token."""
        assert build_filter("tag=creating") == "status.state = ACTIVE AND labels.tag = creating"

    def test_cluster_name_shorthand(self) -> None:
        """Test clusterName=<name> filters on the cluster name field."""
        assert build_filter("clusterName=simple-cluster1") == (
            "status.state = ACTIVE AND clusterName = simple-cluster1"
        )

    def test_cluster_name_in_multi_token_selector_is_a_label(self) -> None:
        """Test clusterName is an ordinary label key next to other tokens."""
        assert build_filter("env=prod:clusterName=c1") == (
            "status.state = ACTIVE AND labels.env = prod AND labels.clusterName = c1"
        )

    def test_duplicate_status_filter(self) -> None:
        """Test repeating the status predicate fails."""
        with pytest.raises(ReservedLabelKeyError):
            build_filter("status.state=ACTIVE")

    def test_invalid_label(self) -> None:
        """Test a malformed token fails."""
        with pytest.raises(MalformedSelectorError):
            build_filter("com=google:foo:env=staging")

    def test_duplicate_label_key(self) -> None:
        """Test a repeated key fails."""
        with pytest.raises(DuplicateLabelKeyError):
            build_filter("com=google:env=staging:com=random")

    def test_wrong_separator(self) -> None:
        """Test a selector without any '=' fails."""
        with pytest.raises(MalformedSelectorError):
            build_filter("com&google")

    def test_selector_errors_are_url_errors(self) -> None:
        """Test selector errors can be handled as invalid URL errors."""
        with pytest.raises(InvalidURLError):
            build_filter("com&google")
        assert issubclass(InvalidSelectorError, InvalidURLError)

    def test_filter_syntax_in_value_rejected(self) -> None:
        """Test a value cannot widen the filter with extra predicates."""
        with pytest.raises(MalformedSelectorError):
            build_filter("env=prod OR status.state = ERROR")

    def test_padded_status_key_rejected(self) -> None:
        """Test whitespace cannot be used to smuggle the status key through."""
        with pytest.raises(InvalidSelectorError):
            build_filter(" status.state =ERROR")
