"""Gritter notification value object and its fluent builder.

Build a notification, then either hand it to :func:`gritter.display.show`
or call :meth:`NotificationBuilder.show` directly::

    notification().with_title("Saved").with_text("Project stored").show(sink)
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Callable

from gritter import display

# Fade-out time (ms) the client plugin applies when none is given.
DEFAULT_TIME = 6000


class IncompleteNotificationError(RuntimeError):
    """Raised when a notification is built before title and text are set."""


@dataclass(frozen=True)
class Notification:
    """A single Gritter notification.

    Fields are trusted as given; validation happens in NotificationBuilder.
    """

    title: str
    text: str
    image: str | None = None  # image URL, rewritten per session on output
    sticky: bool = False
    time: int = DEFAULT_TIME  # ms before auto fade-out
    sclass: str | None = None  # extra CSS class on the client

    def to_dict(self, encode_url: Callable[[str], str] | None = None) -> dict:
        """Return the plugin payload with optional keys only when meaningful."""
        payload: dict = {"title": self.title, "text": self.text}

        if self.image:
            payload["image"] = encode_url(self.image) if encode_url else self.image
        if self.sticky:
            payload["sticky"] = True
        if self.time != DEFAULT_TIME:
            payload["time"] = self.time
        if self.sclass:
            payload["class_name"] = self.sclass

        return payload

    def to_json_string(self, encode_url: Callable[[str], str] | None = None) -> str:
        """Serialize to the compact JSON object passed to ``$.gritter.add``."""
        return json.dumps(self.to_dict(encode_url), separators=(",", ":"), ensure_ascii=False)


def _require_text(name: str, value: str | None) -> str:
    if value is None:
        raise TypeError(f"{name} cannot be None")
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    if not value:
        raise ValueError(f"{name} cannot be empty")
    return value


class NotificationBuilder:
    """Accumulates and validates notification fields.

    Every setter returns the builder so calls can be chained. Setters fail
    fast and leave the builder unchanged when they reject a value.
    """

    def __init__(self):
        self.title: str | None = None
        self.text: str | None = None
        self.image: str | None = None
        self.sticky = False
        self.time = DEFAULT_TIME
        self.sclass: str | None = None

    def with_title(self, title: str) -> NotificationBuilder:
        """Set the title.

        Raises:
            TypeError: if title is None or not a string.
            ValueError: if title is empty.
        """
        self.title = _require_text("title", title)
        return self

    def with_text(self, text: str) -> NotificationBuilder:
        """Set the body text.

        Raises:
            TypeError: if text is None or not a string.
            ValueError: if text is empty.
        """
        self.text = _require_text("text", text)
        return self

    def with_image(self, image: str | None) -> NotificationBuilder:
        """Set the image URL (any value, including None, is accepted)."""
        self.image = image
        return self

    def with_sticky(self, sticky: bool) -> NotificationBuilder:
        """Keep the notification until it is removed instead of fading out."""
        self.sticky = bool(sticky)
        return self

    def with_time(self, time: int) -> NotificationBuilder:
        """Set the fade-out time in milliseconds.

        Raises:
            TypeError: if time is not an integer.
            ValueError: if time is negative.
        """
        if isinstance(time, bool) or not isinstance(time, int):
            raise TypeError(f"time must be an integer, got {type(time).__name__}")
        if time < 0:
            raise ValueError("time must be positive")
        self.time = time
        return self

    def with_sclass(self, sclass: str | None) -> NotificationBuilder:
        self.sclass = sclass
        return self

    def build(self) -> Notification:
        """Snapshot the current fields into a Notification.

        Raises:
            IncompleteNotificationError: if title or text has not been set.
        """
        if not self.title:
            raise IncompleteNotificationError("title has to be set")
        if not self.text:
            raise IncompleteNotificationError("text has to be set")
        return Notification(
            title=self.title,
            text=self.text,
            image=self.image,
            sticky=self.sticky,
            time=self.time,
            sclass=self.sclass,
        )

    def show(
        self,
        sink: display.ScriptSink,
        encode_url: Callable[[str], str] | None = None,
    ) -> None:
        """Build and display in one step. Shortcut for ``display.show(self.build(), ...)``."""
        display.show(self.build(), sink, encode_url)


def notification() -> NotificationBuilder:
    """Create a new notification builder."""
    return NotificationBuilder()
