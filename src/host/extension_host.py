"""Reference in-process host implementing the version gate's host services."""

from __future__ import annotations

import html
import logging
import platform
from typing import Any, Callable

from src.host.notice_board import NoticeBoard, get_notice_board
from src.shared.config import HostConfig
from src.shared.constants import (
    ADMIN_NOTICES_EVENT,
    DEFAULT_HOST_LABEL,
    DEFAULT_RUNTIME_LABEL,
    EXTENSION_HOST_SERVICE_NAME,
)
from src.shared.logging import new_trace_id, setup_logging
from src.shared.utils import relative_posix

logger = logging.getLogger(__name__)


class ExtensionHost:
    """Minimal host: tracks active extensions and renders admin notices.

    Usage::

        host = ExtensionHost()
        host.activate_extension("my-ext/my-ext.py")
        gate = VersionGate({"title": "My Ext", "file": path}, host)
        if gate.passes():
            load_extension()
        html_out = host.render_admin_notices()
    """

    def __init__(
        self,
        config: HostConfig | None = None,
        notice_board: NoticeBoard | None = None,
        runtime_version: str | None = None,
        host_version: str | None = None,
        runtime_label: str = DEFAULT_RUNTIME_LABEL,
        host_label: str = DEFAULT_HOST_LABEL,
        configure_logging: bool = True,
    ) -> None:
        self._config = config or HostConfig()
        if configure_logging:
            # JSON entries for every logger under the top-level package
            setup_logging(
                EXTENSION_HOST_SERVICE_NAME,
                self._config.log_level,
                logger_name=__name__.split(".")[0],
            )
        self._board = notice_board if notice_board is not None else get_notice_board()
        self._runtime_version = runtime_version
        self._host_version = host_version
        self.runtime_label = runtime_label
        self.host_label = host_label
        self.active_extensions: set[str] = set()
        self.output: list[str] = []

    @property
    def notice_board(self) -> NoticeBoard:
        return self._board

    # ------------------------------------------------------------------
    # Host services
    # ------------------------------------------------------------------

    def query_runtime_version(self) -> str:
        return self._runtime_version or platform.python_version()

    def query_host_version(self) -> str:
        return self._host_version or self._config.host_version

    def register_deferred_callback(self, event: str, callback: Callable[[], Any]) -> None:
        self._board.register(event, callback)

    def deactivate_extension(self, identifier: str) -> None:
        if identifier not in self.active_extensions:
            logger.warning("Cannot deactivate %s: extension is not active", identifier)
            return
        self.active_extensions.discard(identifier)
        logger.info("Extension %s deactivated", identifier)

    def resolve_identifier(self, path: str) -> str:
        return relative_posix(path, self._config.extensions_dir)

    def escape_for_output(self, text: str) -> str:
        return html.escape(text, quote=True)

    def write_output(self, markup: str) -> None:
        self.output.append(markup)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def begin_request(self) -> str:
        """Start a new request; returns the trace id used in log entries."""
        return new_trace_id()

    def activate_extension(self, identifier: str) -> None:
        self.active_extensions.add(identifier)

    def render_admin_notices(self) -> str:
        """Fire the admin-notices event and return the markup it produced."""
        count = self._board.fire(ADMIN_NOTICES_EVENT)
        rendered = "".join(self.output)
        self.output.clear()
        logger.debug("Rendered admin notices (%d callbacks)", count)
        return rendered
