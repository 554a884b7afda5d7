"""Logging configuration for structured logging."""
import logging
import sys


def configure_structured_logging(level: str = "INFO"):
    """Configure structured logging for the pricing engine."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(message)s",  # JSON already formatted
        stream=sys.stdout,
    )

    # Registry chatter is not useful next to order events
    logging.getLogger("prometheus_client").setLevel(logging.WARNING)
