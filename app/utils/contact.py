"""
Contact form payload handling.
"""
from typing import Any, Dict
from app.schemas.contact import ContactRequest, PopupContactRequest

DEFAULT_SUBJECT = "General/Other Enquiries"
POPUP_MESSAGE_MARKER = "[Sent via popup contact form]"


def build_popup_contact_payload(popup: PopupContactRequest) -> ContactRequest:
    """
    Translate the popup form into the regular contact payload.

    The selected service becomes the subject; the phone number and a marker
    identifying the popup are appended to the message.
    """
    phone = popup.phone or "Not provided"
    message = f"{popup.message}\n\nPhone: {phone}\n\n{POPUP_MESSAGE_MARKER}"

    return ContactRequest(
        name=popup.name,
        email=popup.email,
        subject=popup.service or DEFAULT_SUBJECT,
        message=message,
        captchaValue=popup.captcha_value,
    )


def build_contact_record(contact: ContactRequest) -> Dict[str, Any]:
    """Column values for the ``contacts`` row; an empty subject gets the default."""
    record = {
        "name": contact.name,
        "email": contact.email,
        "subject": contact.subject or DEFAULT_SUBJECT,
        "message": contact.message,
    }
    if contact.preferred_contact_time:
        record["preferred_contact_time"] = contact.preferred_contact_time
    if contact.preferred_contact_method:
        record["preferred_contact_method"] = contact.preferred_contact_method
    return record
