"""Tests for the notification preview component."""

from __future__ import annotations

from gritter.components.preview import html_escape, render_notification_preview, render_preview_error
from gritter.notification import Notification


class TestPreview:
    def test_renders_title_and_text(self):
        html = render_notification_preview(Notification(title="Saved", text="All good"))
        assert "Saved" in html
        assert "All good" in html
        assert "gritter-without-image" in html

    def test_escapes_markup(self):
        html = render_notification_preview(Notification(title="<b>x</b>", text="a & b"))
        assert "<b>" not in html
        assert "&lt;b&gt;" in html
        assert "a &amp; b" in html

    def test_image_encoded(self, encode_url):
        html = render_notification_preview(Notification(title="A", text="B", image="foo.png"), encode_url)
        assert 'src="/ctx/foo.png;jsessionid=abc"' in html
        assert "gritter-with-image" in html

    def test_class_name_on_wrapper(self):
        html = render_notification_preview(Notification(title="A", text="B", sclass="gritter-light"))
        assert 'class="gritter-item-wrapper gritter-light"' in html

    def test_sticky_and_time_meta(self):
        assert "sticky" in render_notification_preview(Notification(title="A", text="B", sticky=True))
        assert "fades after 0 ms" in render_notification_preview(Notification(title="A", text="B", time=0))

    def test_error_card(self):
        html = render_preview_error("title cannot be empty")
        assert "gritter-preview-error" in html
        assert "title cannot be empty" in html

    def test_html_escape(self):
        assert html_escape('"<>&') == "&quot;&lt;&gt;&amp;"
