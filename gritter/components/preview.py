"""Notification preview component — static Gritter-style card."""

from __future__ import annotations

from typing import Callable

from gritter.notification import DEFAULT_TIME, Notification


def html_escape(text: str) -> str:
    """Basic HTML escaping."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def render_notification_preview(
    notification: Notification,
    encode_url: Callable[[str], str] | None = None,
) -> str:
    """Render a notification the way the Gritter plugin lays it out.

    Args:
        notification: Notification to preview.
        encode_url: Optional URL rewriter applied to the image source.
    """
    wrapper_cls = "gritter-item-wrapper"
    if notification.sclass:
        wrapper_cls += f" {html_escape(notification.sclass)}"

    image_html = ""
    body_cls = "gritter-without-image"
    if notification.image:
        src = encode_url(notification.image) if encode_url else notification.image
        image_html = f'<img src="{html_escape(src)}" class="gritter-image" />'
        body_cls = "gritter-with-image"

    if notification.sticky:
        meta = '<span class="gritter-meta">sticky</span>'
    elif notification.time != DEFAULT_TIME:
        meta = f'<span class="gritter-meta">fades after {notification.time} ms</span>'
    else:
        meta = ""

    return (
        f'<div class="{wrapper_cls}">'
        f'<div class="gritter-item">'
        f"{image_html}"
        f'<div class="{body_cls}">'
        f'<span class="gritter-title">{html_escape(notification.title)}</span>'
        f"<p>{html_escape(notification.text)}</p>"
        f"{meta}"
        f"</div>"
        f"</div>"
        f"</div>"
    )


def render_preview_error(message: str) -> str:
    """Render the card shown when the builder rejects the input."""
    return f'<div class="gritter-preview-error">{html_escape(message)}</div>'
