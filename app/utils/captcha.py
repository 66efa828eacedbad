"""
Google reCAPTCHA verification.
"""
import requests
from typing import Optional
from app.core.config import settings
from app.core.logging import logger


def captcha_required() -> bool:
    return bool(settings.RECAPTCHA_SECRET_KEY)


def verify_captcha(token: Optional[str]) -> bool:
    """
    Check a reCAPTCHA response token with Google's siteverify endpoint.

    Args:
        token: The ``captchaValue`` sent by the form

    Returns:
        True only when Google reports success; network errors count as failure
    """
    if not token:
        return False

    try:
        response = requests.post(
            settings.RECAPTCHA_VERIFY_URL,
            data={"secret": settings.RECAPTCHA_SECRET_KEY, "response": token},
            timeout=settings.RECAPTCHA_TIMEOUT,
        )
        response.raise_for_status()
        result = response.json()
    except (requests.RequestException, ValueError) as e:
        logger.warning(f"reCAPTCHA verification request failed: {str(e)}")
        return False

    if not result.get("success"):
        logger.info(f"reCAPTCHA rejected token: {result.get('error-codes', [])}")
        return False
    return True
