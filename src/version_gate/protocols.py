"""Runtime-checkable protocol for the host capabilities the gate consumes."""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class HostServices(Protocol):
    """Capabilities supplied by the embedding host application."""

    runtime_label: str
    host_label: str

    def query_runtime_version(self) -> str:
        """Return the version of the running interpreter."""
        ...

    def query_host_version(self) -> str:
        """Return the version of the hosting framework."""
        ...

    def register_deferred_callback(self, event: str, callback: Callable[[], Any]) -> None:
        """Schedule *callback* to run when the host later fires *event*.

        Args:
            event: Host event name, e.g. ``"admin_notices"``.
            callback: Zero-argument callable; must not be invoked here.
        """
        ...

    def deactivate_extension(self, identifier: str) -> None:
        """Disable the extension addressed by *identifier*."""
        ...

    def resolve_identifier(self, path: str) -> str:
        """Resolve an absolute extension file path to its host identifier."""
        ...

    def escape_for_output(self, text: str) -> str:
        """HTML-escape *text* for inclusion in rendered markup."""
        ...

    def write_output(self, markup: str) -> None:
        """Write rendered markup to the host's notice output."""
        ...
