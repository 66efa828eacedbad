"""
Schema definitions for the contact forms.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ContactRequest(BaseModel):
    """Request schema for the main contact form"""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, description="Sender's name")
    email: str = Field(..., min_length=3, description="Reply-to email address")
    subject: Optional[str] = Field(None, description="Enquiry subject; defaults to general enquiries")
    message: str = Field(..., min_length=1)
    captcha_value: Optional[str] = Field(None, alias="captchaValue", description="reCAPTCHA response token")
    preferred_contact_time: Optional[str] = None
    preferred_contact_method: Optional[str] = None


class PopupContactRequest(BaseModel):
    """Request schema for the popup contact form"""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    phone: Optional[str] = None
    service: Optional[str] = Field(None, description="Service the visitor is interested in")
    message: str = Field(..., min_length=1)
    captcha_value: Optional[str] = Field(None, alias="captchaValue")


class ContactResponse(BaseModel):
    message: str
