"""Shared constants used across the gate and the host."""
from __future__ import annotations

# Application version
VERSION: str = "1.0.0"

# Default minimum versions
DEFAULT_MIN_RUNTIME_VERSION: str = "7.2.0"
DEFAULT_MIN_HOST_VERSION: str = "4.9"

# Host event fired when admin notices are rendered
ADMIN_NOTICES_EVENT: str = "admin_notices"

# Product labels used in rendered notices
DEFAULT_RUNTIME_LABEL: str = "Python"
DEFAULT_HOST_LABEL: str = "the host application"

# Service name used in log entries
EXTENSION_HOST_SERVICE_NAME: str = "extension-host"
