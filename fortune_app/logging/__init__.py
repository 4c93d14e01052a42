"""
Logging configuration and utilities for the fortune series generator.
"""
from .config import configure_logging, get_logger, get_session_logger, log_generation

__all__ = ["configure_logging", "get_logger", "get_session_logger", "log_generation"]
