# Flagset CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Flagset."""
import logging

logger: logging.Logger = logging.getLogger("flagset")
