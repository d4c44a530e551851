# Argbind CLI Binder — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Argbind."""
import logging

logger: logging.Logger = logging.getLogger("argbind")
