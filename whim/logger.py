# Whim Document Library — (c) 2023 Evan Overman — MIT Licensed
"""Global logger instance for whim."""
import logging

logger: logging.Logger = logging.getLogger("whim")
