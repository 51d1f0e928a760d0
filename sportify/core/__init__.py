"""Public façade for the sportify.core package.

This module exposes logging helpers, domain errors and base models that are
safe to import from other packages. Callers should import these cross-cutting
concerns from this façade instead of the internal submodules.
"""

from .errors import (
    InvalidParameter,
    NoMatchingTracks,
    ProviderFetchFailed,
    SportifyError,
    TempoBatchFailed,
)
from .logging_config import configure_logging, resolve_level
from .logging_utils import (
    format_duration,
    log_error,
    log_info,
    log_progress,
    log_section,
    log_step,
    log_success,
    log_warning,
)
from .models import PlaylistProposal, TempoRecord, Track

__all__ = [
    "configure_logging",
    "resolve_level",
    "format_duration",
    "log_section",
    "log_info",
    "log_step",
    "log_success",
    "log_warning",
    "log_error",
    "log_progress",
    "SportifyError",
    "ProviderFetchFailed",
    "TempoBatchFailed",
    "NoMatchingTracks",
    "InvalidParameter",
    "Track",
    "TempoRecord",
    "PlaylistProposal",
]
