"""Gradio host adapter — request-local script sink and session URL encoder.

Gradio event handlers cannot run JavaScript on the client directly. A
handler collects Gritter calls in a :class:`ScriptQueue`, returns
``queue.drain()`` into a hidden script channel, and the channel's chained
``js`` step evaluates the payload in the browser.
"""

from __future__ import annotations

import json
import logging
from urllib.parse import urlparse

import gradio as gr

from gritter.config import GritterSettings, settings as default_settings
from gritter.display import ScriptSink

logger = logging.getLogger(__name__)

DEFAULT_FILE_ROUTE = "/gradio_api/file="

# Browser-side runner: lazily loads jQuery + Gritter once, then evaluates the
# drained script with ``$`` bound to jQuery.
_RUNNER_TEMPLATE = """
(script) => {
    if (!script) {
        return [];
    }
    const load = (url) => new Promise((resolve, reject) => {
        const isCss = url.endsWith(".css");
        const el = document.createElement(isCss ? "link" : "script");
        if (isCss) {
            el.rel = "stylesheet";
            el.href = url;
        } else {
            el.src = url;
        }
        el.onload = resolve;
        el.onerror = reject;
        document.head.appendChild(el);
    });
    if (!(window.jQuery && window.jQuery.gritter)) {
        window.__gritterBoot = window.__gritterBoot || load(%(stylesheet)s)
            .then(() => (window.jQuery ? null : load(%(jquery)s)))
            .then(() => load(%(script)s));
    }
    Promise.resolve(window.__gritterBoot)
        .then(() => new Function("$", script)(window.jQuery))
        .catch((err) => console.error("gritter:", err));
    return [];
}
"""


def encode_session_url(url: str, root_path: str = "", file_route: str = DEFAULT_FILE_ROUTE) -> str:
    """Rewrite a resource URL so the browser of this session can load it.

    Absolute URLs (with a scheme or protocol-relative) pass through. Paths
    starting with ``/`` are placed under the app's root path. Anything else
    is treated as a local file served by Gradio's file route.
    """
    if not url:
        return url
    if url.startswith("//") or urlparse(url).scheme:
        return url
    root = root_path.rstrip("/")
    if url.startswith("/"):
        return f"{root}{url}"
    return f"{root}{file_route}{url}"


def runner_js(settings: GritterSettings | None = None) -> str:
    """Return the browser function that evaluates a drained script payload."""
    cfg = settings or default_settings
    return _RUNNER_TEMPLATE % {
        "jquery": json.dumps(cfg.jquery_url),
        "script": json.dumps(cfg.script_url),
        "stylesheet": json.dumps(cfg.stylesheet_url),
    }


class ScriptQueue(ScriptSink):
    """Collects client scripts for a single Gradio request."""

    def __init__(self, root_path: str = "", file_route: str = DEFAULT_FILE_ROUTE):
        self.root_path = root_path
        self.file_route = file_route
        self._scripts: list[str] = []

    @classmethod
    def for_request(
        cls,
        request: gr.Request | None,
        settings: GritterSettings | None = None,
    ) -> ScriptQueue:
        """Create a queue whose URL encoding follows the request's root path."""
        cfg = settings or default_settings
        scope = getattr(getattr(request, "request", None), "scope", None) or {}
        root_path = scope.get("root_path") or cfg.root_path
        return cls(root_path=root_path, file_route=cfg.file_route)

    def eval_javascript(self, script: str) -> None:
        self._scripts.append(script)

    def encode_url(self, url: str) -> str:
        return encode_session_url(url, self.root_path, self.file_route)

    @property
    def pending(self) -> list[str]:
        return list(self._scripts)

    def __len__(self) -> int:
        return len(self._scripts)

    def drain(self) -> str:
        """Return all queued scripts as one payload and clear the queue."""
        if not self._scripts:
            return ""
        payload = ";\n".join(self._scripts)
        logger.debug("Draining %d gritter script(s)", len(self._scripts))
        self._scripts.clear()
        return payload


def create_script_channel() -> gr.Textbox:
    """Hidden textbox carrying drained scripts from handlers to the browser."""
    return gr.Textbox(value="", visible=False, interactive=False, elem_id="gritter-channel")


def run_channel(event, channel: gr.Textbox, settings: GritterSettings | None = None):
    """Chain a browser-only step that evaluates ``channel`` after ``event``."""
    return event.then(fn=None, inputs=[channel], outputs=None, js=runner_js(settings))
