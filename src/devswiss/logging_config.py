"""Logging setup shared by the CLI and the API server."""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Configure the root logger.

    Logs go to stderr so they never mix with rendered output on stdout.
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
