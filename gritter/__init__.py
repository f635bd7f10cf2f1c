"""Gritter notifications for Gradio apps.

Fluent builder for toast-style notifications rendered client-side by the
jQuery Gritter plugin. Notifications are validated on the server, serialized
to a compact JSON payload and handed to a script sink that the host UI
evaluates in the browser.
"""

from gritter.display import ScriptSink, remove_all, show
from gritter.notification import (
    DEFAULT_TIME,
    IncompleteNotificationError,
    Notification,
    NotificationBuilder,
    notification,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_TIME",
    "IncompleteNotificationError",
    "Notification",
    "NotificationBuilder",
    "ScriptSink",
    "notification",
    "remove_all",
    "show",
]
