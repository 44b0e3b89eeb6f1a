"""Builds the outbound email for a contact submission."""

from __future__ import annotations

import html

from contactrelay.domain.models import OutboundEmail, Submission

SUBJECT_TEMPLATE = "New Contact Form Message from {email}"

TEXT_TEMPLATE = (
    "You received a new message from your portfolio contact form:\n\n"
    "From: {email}\n\n"
    "Message:\n{message}"
)

HTML_TEMPLATE = """
<h2>New Contact Form Submission</h2>
<p><strong>From:</strong> {email}</p>
<p><strong>Message:</strong></p>
<p>{message}</p>
""".strip()


def render_html_message(message: str, escape_html: bool = True) -> str:
    """Render the message for an HTML body, converting newlines to <br>."""
    if escape_html:
        message = html.escape(message)
    return message.replace("\r\n", "\n").replace("\n", "<br>")


def compose_email(
    submission: Submission,
    sender: str,
    recipient: str,
    escape_html: bool = True,
) -> OutboundEmail:
    """
    Compose the email relayed to the site owner.

    The sender is the fixed authenticated account; the submitter is only
    used as Reply-To so replies go straight back to them.
    """
    email = submission.email or ""
    message = submission.message or ""
    html_email = html.escape(email) if escape_html else email

    return OutboundEmail(
        sender=sender,
        recipient=recipient,
        reply_to=email,
        subject=SUBJECT_TEMPLATE.format(email=email),
        text=TEXT_TEMPLATE.format(email=email, message=message),
        html=HTML_TEMPLATE.format(
            email=html_email,
            message=render_html_message(message, escape_html=escape_html),
        ),
    )
