"""Gritter demo — compose a notification and push it to the browser.

Launch:
    python -m gritter.app
"""

import logging
import os
from pathlib import Path

import gradio as gr
from dotenv import load_dotenv

from gritter.components.preview import render_notification_preview, render_preview_error
from gritter.config import GritterSettings, settings as default_settings
from gritter.display import remove_all, show
from gritter.host import ScriptQueue, create_script_channel, run_channel
from gritter.notification import DEFAULT_TIME, IncompleteNotificationError, notification

logger = logging.getLogger(__name__)

PROJECT_ROOT = str(Path(__file__).resolve().parents[1])

PREVIEW_CSS = """
.gritter-item-wrapper { background: #1e293b; color: #f1f5f9; border-radius: 8px; padding: 12px; max-width: 320px; }
.gritter-title { font-weight: 600; display: block; margin-bottom: 4px; }
.gritter-image { float: left; width: 48px; height: 48px; margin-right: 10px; }
.gritter-meta { font-size: 11px; color: #94a3b8; }
.gritter-preview-error { color: #ef4444; }
"""


def _build_from_form(title, text, image, sticky, time, sclass):
    return (
        notification()
        .with_title(title)
        .with_text(text)
        .with_image(image or None)
        .with_sticky(sticky)
        .with_time(int(time) if time is not None else None)
        .with_sclass(sclass or None)
        .build()
    )


def preview_style_html() -> str:
    """Preview card styling as an inline <style> block."""
    return f"<style>{PREVIEW_CSS}</style>"


def handle_show(title, text, image, sticky, time, sclass, request, settings: GritterSettings | None = None):
    """Show-button handler. Returns ``(preview_html, script_payload)``.

    Rejected input is rendered as an error card and queues no script.
    """
    queue = ScriptQueue.for_request(request, settings)
    try:
        note = _build_from_form(title, text, image, sticky, time, sclass)
    except (TypeError, ValueError, IncompleteNotificationError) as exc:
        logger.warning("Rejected notification: %s", exc)
        return render_preview_error(str(exc)), ""
    show(note, queue)
    return render_notification_preview(note, queue.encode_url), queue.drain()


def handle_remove_all(request, settings: GritterSettings | None = None):
    """Remove-all handler. Clears the preview and queues ``$.gritter.removeAll()``."""
    queue = ScriptQueue.for_request(request, settings)
    remove_all(queue)
    return "", queue.drain()


def create_app(settings: GritterSettings | None = None) -> gr.Blocks:
    """Build the Gritter demo page."""
    cfg = settings or default_settings

    with gr.Blocks(title="Gritter") as app:
        # Inline so the styling survives both launch() and mount_gradio_app().
        gr.HTML(preview_style_html(), elem_id="gritter-preview-css")
        gr.Markdown("## Gritter notifications")

        with gr.Row():
            with gr.Column(scale=2):
                title = gr.Textbox(label="Title", placeholder="Saved")
                text = gr.Textbox(label="Text", placeholder="Your changes were stored.", lines=2)
                image = gr.Textbox(label="Image URL", placeholder="https://example.com/icon.png")
                with gr.Row():
                    sticky = gr.Checkbox(label="Sticky", value=False)
                    time = gr.Number(label="Fade-out time (ms)", value=DEFAULT_TIME, precision=0, minimum=0)
                    sclass = gr.Textbox(label="CSS class", placeholder="gritter-light")
                with gr.Row():
                    show_btn = gr.Button("Show", variant="primary")
                    clear_btn = gr.Button("Remove all")

            with gr.Column(scale=1):
                preview = gr.HTML(label="Preview")

        channel = create_script_channel()

        def show_notification(title, text, image, sticky, time, sclass, request: gr.Request):
            return handle_show(title, text, image, sticky, time, sclass, request, cfg)

        def clear_notifications(request: gr.Request):
            return handle_remove_all(request, cfg)

        run_channel(
            show_btn.click(
                show_notification,
                inputs=[title, text, image, sticky, time, sclass],
                outputs=[preview, channel],
            ),
            channel,
            cfg,
        )
        run_channel(
            clear_btn.click(clear_notifications, outputs=[preview, channel]),
            channel,
            cfg,
        )

    return app


def main():
    load_dotenv(os.path.join(PROJECT_ROOT, ".env"))
    cfg = GritterSettings()
    logging.basicConfig(
        level=getattr(logging, cfg.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    app = create_app(cfg)
    app.queue()
    launch_kwargs = {
        "server_name": cfg.server_name,
        "server_port": cfg.server_port,
        "show_error": True,
        "root_path": cfg.root_path or None,
    }
    app.launch(**launch_kwargs)


if __name__ == "__main__":
    main()
