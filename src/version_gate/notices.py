"""Markup for the admin notices shown when a minimum version is unmet."""
from __future__ import annotations

from typing import Callable

Escaper = Callable[[str], str]

_LEFT_QUOTE = "&#8220;"
_RIGHT_QUOTE = "&#8221;"


def render_error_notice(paragraph: str) -> str:
    """Wrap an already-escaped paragraph in the host's error notice box."""
    return f'<div class="error"><p>{paragraph}</p></div>'


def render_runtime_notice(
    display_name: str, min_version: str, runtime_label: str, escape: Escaper
) -> str:
    """Notice for an interpreter older than *min_version*."""
    return render_error_notice(
        f"The {_LEFT_QUOTE}{escape(display_name)}{_RIGHT_QUOTE} plugin cannot run on "
        f"{escape(runtime_label)} versions older than {escape(min_version)}. "
        "Please contact your host and ask them to upgrade."
    )


def render_host_notice(
    display_name: str, min_version: str, host_label: str, escape: Escaper
) -> str:
    """Notice for a hosting framework older than *min_version*."""
    label = escape(host_label)
    return render_error_notice(
        f"The {_LEFT_QUOTE}{escape(display_name)}{_RIGHT_QUOTE} plugin cannot run on "
        f"{label} versions older than {escape(min_version)}. "
        f"Please update {label}."
    )
