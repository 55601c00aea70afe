"""Shared utility helpers used across the validator."""

from .config import (
    RuntimeConfig,
    get_config,
    configure,
)
from .serialization import (
    serialize_to_json,
    mask_sensitive_data,
)
from .logging import (
    PrivacyFilter,
    get_logger,
    configure_logging,
)
from .param_validation import (
    ensure,
    ensure_type,
    ParamValidationError,
)

__all__ = [
    "RuntimeConfig",
    "get_config",
    "configure",
    "serialize_to_json",
    "mask_sensitive_data",
    "PrivacyFilter",
    "get_logger",
    "configure_logging",
    "ensure",
    "ensure_type",
    "ParamValidationError",
]
