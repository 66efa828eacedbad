"""
API endpoints for the contact and popup contact forms.
"""
import asyncio
from fastapi import APIRouter
from fastapi.responses import JSONResponse
from app.core.database import insert_contact
from app.core.logging import logger
from app.schemas.contact import ContactRequest, ContactResponse, PopupContactRequest
from app.utils.captcha import captcha_required, verify_captcha
from app.utils.contact import build_contact_record, build_popup_contact_payload

router = APIRouter()

SUCCESS_MESSAGE = "Message sent successfully!"
OTHER_METHODS = ["GET", "PUT", "PATCH", "DELETE"]


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def _submit(contact: ContactRequest, source: str):
    """
    Verify the CAPTCHA (when configured) and store the submission.

    Single attempt; a failed insert is reported to the visitor without
    database details.
    """
    if captcha_required():
        if not contact.captcha_value:
            return _error(400, "reCAPTCHA verification required")
        if not await asyncio.to_thread(verify_captcha, contact.captcha_value):
            return _error(400, "reCAPTCHA verification failed")

    inserted = await insert_contact(build_contact_record(contact))
    if inserted is None:
        return _error(500, "Failed to send message. Please try again later.")

    logger.info(f"Stored {source} contact submission {inserted.get('id')}")
    return ContactResponse(message=SUCCESS_MESSAGE)


@router.post("", response_model=ContactResponse)
async def submit_contact(contact: ContactRequest):
    return await _submit(contact, "contact form")


@router.post("/popup", response_model=ContactResponse)
async def submit_popup_contact(popup: PopupContactRequest):
    return await _submit(build_popup_contact_payload(popup), "popup")


@router.api_route("", methods=OTHER_METHODS, include_in_schema=False)
@router.api_route("/popup", methods=OTHER_METHODS, include_in_schema=False)
async def method_not_allowed():
    return _error(405, "Method not allowed")
