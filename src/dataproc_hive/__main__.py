"""Entry point for the dataproc-hive-url command."""

import argparse
import logging
import sys
from typing import Any

from pydantic import ValidationError

from dataproc_hive import __version__
from dataproc_hive.clients.rest import DataprocRestClient
from dataproc_hive.config import DataprocConfig, LogLevel
from dataproc_hive.filters import build_filter
from dataproc_hive.resolver import ClusterResolver
from dataproc_hive.urls import parse_url
from dataproc_hive.utils.errors import DataprocError


def setup_logging(level: LogLevel) -> None:
    """Configure logging for the command."""
    logging.basicConfig(
        level=level.value,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="dataproc-hive-url",
        description="Resolve jdbc:dataproc Hive URLs to jdbc:hive2 URLs",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--api-endpoint",
        default=None,
        help="Dataproc API base URL, {region} is substituted (default: regional endpoint)",
    )
    parser.add_argument(
        "--access-token",
        default=None,
        help="OAuth2 access token for the Dataproc API",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: INFO)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve = subparsers.add_parser("resolve", help="Print the jdbc:hive2 URL for a cluster")
    resolve.add_argument("url", help="jdbc:dataproc://hive/ URL")

    show_filter = subparsers.add_parser("filter", help="Print the cluster list filter")
    show_filter.add_argument(
        "selector",
        nargs="?",
        default=None,
        help="Cluster pool label, e.g. env=staging:team=dataproc",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    config_kwargs: dict[str, Any] = {}
    if args.api_endpoint:
        config_kwargs["api_endpoint"] = args.api_endpoint
    if args.access_token:
        config_kwargs["access_token"] = args.access_token
    if args.log_level:
        config_kwargs["log_level"] = LogLevel(args.log_level)

    logger = logging.getLogger(__name__)

    try:
        config = DataprocConfig(**config_kwargs)
    except ValidationError as e:
        setup_logging(LogLevel.INFO)
        logger.error(f"Configuration error: {e}")
        return 1

    setup_logging(config.log_level)

    try:
        if args.command == "filter":
            print(build_filter(args.selector))
            return 0

        options = parse_url(args.url)
        with DataprocRestClient(config) as client:
            print(ClusterResolver(client, config).to_target_url(options))
    except DataprocError as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
