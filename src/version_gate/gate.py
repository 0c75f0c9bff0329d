"""Version Gate -- minimum runtime and host version check for an extension.

Runs two independent checks at extension bootstrap:

    Runtime -- the running interpreter against ``min_runtime_version``
    Host    -- the hosting framework against ``min_host_version``

Both checks always run so that every unmet requirement gets its own
notice.  On failure nothing is rendered or deactivated immediately: the
notices and the deactivation are registered as deferred callbacks and run
when the host fires its admin-notices event.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from src.shared.constants import ADMIN_NOTICES_EVENT
from src.version_gate.comparator import is_version_at_least
from src.version_gate.config import RequirementsConfig
from src.version_gate.notices import render_host_notice, render_runtime_notice
from src.version_gate.protocols import HostServices

logger = logging.getLogger(__name__)


class VersionGate:
    """Minimum-version precondition check for one extension.

    Usage
    -----
    ::

        gate = VersionGate({"title": "My Extension", "file": __file__}, host)
        if not gate.passes():
            return  # skip loading the rest of the extension
    """

    is_version_at_least = staticmethod(is_version_at_least)

    def __init__(
        self,
        config: RequirementsConfig | Mapping[str, Any] | None,
        host: HostServices,
    ) -> None:
        if isinstance(config, RequirementsConfig):
            self._config = config
        else:
            self._config = RequirementsConfig.from_mapping(config)
        self._host = host

    # ------------------------------------------------------------------
    # Configured values
    # ------------------------------------------------------------------

    @property
    def display_name(self) -> str:
        return self._config.display_name

    @property
    def min_runtime_version(self) -> str:
        return self._config.min_runtime_version

    @property
    def min_host_version(self) -> str:
        return self._config.min_host_version

    @property
    def identifier_path(self) -> str:
        return self._config.identifier_path

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def passes(self) -> bool:
        """Check every requirement.

        When a requirement is unmet, admin notices describing it are
        scheduled along with a deactivation of the extension.  Only load
        code that depends on the minimum versions when this returns True.
        """
        runtime_ok = self.runtime_passes()
        host_ok = self.host_passes()
        passed = runtime_ok and host_ok

        if passed:
            logger.info("Version gate passed for %r", self.display_name)
        else:
            unmet = [
                label
                for label, ok in (
                    (f"runtime>={self.min_runtime_version}", runtime_ok),
                    (f"host>={self.min_host_version}", host_ok),
                )
                if not ok
            ]
            logger.warning(
                "Version gate failed for %r -- unmet: %s; deactivation scheduled",
                self.display_name,
                ", ".join(unmet),
            )
            self._host.register_deferred_callback(ADMIN_NOTICES_EVENT, self.deactivate)
        return passed

    def runtime_passes(self) -> bool:
        """Check the interpreter version, scheduling a notice on failure."""
        current = self._host.query_runtime_version()
        if self.is_version_at_least(current, self.min_runtime_version):
            return True
        logger.debug(
            "Runtime %s is older than required %s", current, self.min_runtime_version
        )
        self._host.register_deferred_callback(
            ADMIN_NOTICES_EVENT, self.runtime_version_notice
        )
        return False

    def host_passes(self) -> bool:
        """Check the host framework version, scheduling a notice on failure."""
        current = self._host.query_host_version()
        if self.is_version_at_least(current, self.min_host_version):
            return True
        logger.debug("Host %s is older than required %s", current, self.min_host_version)
        self._host.register_deferred_callback(
            ADMIN_NOTICES_EVENT, self.host_version_notice
        )
        return False

    def deactivate(self) -> None:
        """Ask the host to disable this extension."""
        identifier = self._host.resolve_identifier(self.identifier_path)
        logger.info("Deactivating extension %s", identifier)
        self._host.deactivate_extension(identifier)

    # ------------------------------------------------------------------
    # Notices
    # ------------------------------------------------------------------

    def runtime_version_notice(self) -> str:
        """Write the unmet-runtime notice to the host output and return it."""
        markup = render_runtime_notice(
            self.display_name,
            self.min_runtime_version,
            self._host.runtime_label,
            self._host.escape_for_output,
        )
        self._host.write_output(markup)
        return markup

    def host_version_notice(self) -> str:
        """Write the unmet-host notice to the host output and return it."""
        markup = render_host_notice(
            self.display_name,
            self.min_host_version,
            self._host.host_label,
            self._host.escape_for_output,
        )
        self._host.write_output(markup)
        return markup
