"""Display facade — hands Gritter scripts to the host's script sink."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from gritter.notification import Notification

logger = logging.getLogger(__name__)

UrlEncoder = Callable[[str], str]

ADD_SCRIPT_TEMPLATE = "$.gritter.add({payload})"
REMOVE_ALL_SCRIPT = "$.gritter.removeAll()"


class ScriptSink(ABC):
    """Host capability that runs a script on the client of the current session."""

    @abstractmethod
    def eval_javascript(self, script: str) -> None:
        """Schedule ``script`` for execution in the browser.

        Fire-and-forget: nothing is reported back from the client.
        """

    def encode_url(self, url: str) -> str:
        """Rewrite a resource URL for this session. Identity unless the host overrides it."""
        return url


def add_script(notification: Notification, encode_url: UrlEncoder | None = None) -> str:
    """Return the ``$.gritter.add(...)`` call for a notification."""
    return ADD_SCRIPT_TEMPLATE.format(payload=notification.to_json_string(encode_url))


def show(
    notification: Notification,
    sink: ScriptSink,
    encode_url: UrlEncoder | None = None,
) -> None:
    """Display a notification on the client behind ``sink``.

    Args:
        notification: Notification to display.
        sink: Script sink bound to the current request/session.
        encode_url: Per-session rewriter for the image URL; defaults to
            ``sink.encode_url``.
    """
    if notification is None:
        raise TypeError("notification cannot be None")
    if sink is None:
        raise TypeError("sink cannot be None")
    script = add_script(notification, encode_url or sink.encode_url)
    logger.debug("Queueing gritter notification %r", notification.title)
    sink.eval_javascript(script)


def remove_all(sink: ScriptSink) -> None:
    """Remove every notification still displayed on the client."""
    if sink is None:
        raise TypeError("sink cannot be None")
    logger.debug("Queueing gritter removeAll")
    sink.eval_javascript(REMOVE_ALL_SCRIPT)
