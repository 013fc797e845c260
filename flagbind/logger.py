# Flagbind Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Package-wide logger for Flagbind."""
import logging

logger = logging.getLogger("flagbind")
