"""Minimum-version gate for host extensions.

Checks the running interpreter and the hosting framework against configured
minimum versions and, when either is too old, keeps the extension from
loading and schedules admin notices through the host.
"""

from src.shared.constants import VERSION
from src.version_gate.comparator import is_version_at_least
from src.version_gate.config import RequirementsConfig, load_requirements_config
from src.version_gate.gate import VersionGate
from src.version_gate.protocols import HostServices

__version__ = VERSION

__all__ = [
    "HostServices",
    "RequirementsConfig",
    "VersionGate",
    "is_version_at_least",
    "load_requirements_config",
]
