from contactrelay.application.compose import compose_email, render_html_message
from contactrelay.domain import Submission


def test_compose_uses_fixed_sender_and_submitter_reply_to():
    email = compose_email(
        Submission(email="visitor@example.com", message="Hi there"),
        sender="owner@example.com",
        recipient="inbox@example.com",
    )

    assert email.sender == "owner@example.com"
    assert email.recipient == "inbox@example.com"
    assert email.reply_to == "visitor@example.com"
    assert email.subject == "New Contact Form Message from visitor@example.com"
    assert email.text == (
        "You received a new message from your portfolio contact form:\n\n"
        "From: visitor@example.com\n\n"
        "Message:\nHi there"
    )
    assert "<h2>New Contact Form Submission</h2>" in email.html
    assert "<p>Hi there</p>" in email.html


def test_html_body_escapes_markup_and_converts_newlines():
    email = compose_email(
        Submission(email="v@example.com", message="<script>x</script>\nline two"),
        sender="o@example.com",
        recipient="o@example.com",
    )

    assert "<script>" not in email.html
    assert "&lt;script&gt;x&lt;/script&gt;<br>line two" in email.html
    # plain text keeps the message verbatim
    assert "<script>x</script>\nline two" in email.text


def test_escaping_can_be_disabled():
    assert render_html_message("<b>hi</b>\nthere", escape_html=False) == "<b>hi</b><br>there"


def test_crlf_becomes_single_break():
    assert render_html_message("a\r\nb") == "a<br>b"
