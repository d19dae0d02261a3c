"""Compose the message sent to a document recipient.

Only the draft is produced; delivery is left to the user's mail client via a
``mailto:`` link.
"""

from dataclasses import dataclass
from urllib.parse import quote

from signflow.domain.entities import Document

SIGNED_SUBJECT = "Ihr signiertes Dokument: {name}"
SIGNED_BODY = (
    "Sehr geehrte Damen und Herren,\n"
    "\n"
    'im Anhang finden Sie Ihr signiertes Dokument "{name}".\n'
    "\n"
    "Mit freundlichen Grüßen"
)


@dataclass(frozen=True)
class EmailDraft:
    recipient: str
    subject: str
    body: str


def compose_signed_document_email(document: Document) -> EmailDraft:
    return EmailDraft(
        recipient=document.recipient_email,
        subject=SIGNED_SUBJECT.format(name=document.template_name),
        body=SIGNED_BODY.format(name=document.template_name),
    )


def build_mailto_link(draft: EmailDraft) -> str:
    """Return a ``mailto:`` URL with percent-encoded subject and body."""

    subject = quote(draft.subject, safe="")
    body = quote(draft.body, safe="")
    return f"mailto:{draft.recipient}?subject={subject}&body={body}"
