"""Logging configuration."""

from praia_news.monitoring.logging import JSONFormatter, log_event, setup_logging, setup_structured_logging

__all__ = ["JSONFormatter", "log_event", "setup_logging", "setup_structured_logging"]
