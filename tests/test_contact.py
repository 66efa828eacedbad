from __future__ import annotations

import unittest

from support import ApiTestCase

from app.api.v1.endpoints import contact as contact_endpoint
from app.schemas.contact import PopupContactRequest
from app.utils.contact import DEFAULT_SUBJECT, POPUP_MESSAGE_MARKER, build_popup_contact_payload

VALID_BODY = {
    "name": "Jane",
    "email": "jane@x.com",
    "subject": "Web Development",
    "message": "I need a new website",
}


class TestContactEndpoint(ApiTestCase):
    def test_contact_is_stored(self) -> None:
        response = self.client.post("/api/v1/contact", json=VALID_BODY)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"message": "Message sent successfully!"})
        stored = self.db.tables["contacts"]
        self.assertEqual(len(stored), 1)
        self.assertEqual(stored[0]["subject"], "Web Development")
        self.assertEqual(stored[0]["email"], "jane@x.com")

    def test_missing_subject_defaults(self) -> None:
        for subject in (None, ""):
            with self.subTest(subject=subject):
                self.db.tables.pop("contacts", None)

                response = self.client.post("/api/v1/contact", json={**VALID_BODY, "subject": subject})

                self.assertEqual(response.status_code, 200)
                self.assertEqual(self.db.tables["contacts"][0]["subject"], DEFAULT_SUBJECT)

    def test_insert_failure_is_generic_500(self) -> None:
        self.db.failing_tables.add("contacts")

        response = self.client.post("/api/v1/contact", json=VALID_BODY)

        self.assertEqual(response.status_code, 500)
        self.assertNotIn("contacts is unavailable", response.json()["error"])

    def test_other_methods_not_allowed(self) -> None:
        response = self.client.get("/api/v1/contact")

        self.assertEqual(response.status_code, 405)
        self.assertEqual(response.json(), {"error": "Method not allowed"})

    def test_malformed_body_is_rejected(self) -> None:
        response = self.client.post("/api/v1/contact", json={"name": "Jane"})

        self.assertEqual(response.status_code, 422)
        self.assertNotIn("contacts", self.db.tables)

    def test_popup_submission(self) -> None:
        response = self.client.post(
            "/api/v1/contact/popup",
            json={"name": "Jane", "email": "jane@x.com", "message": "Hi", "service": "Web Development"},
        )

        self.assertEqual(response.status_code, 200)
        stored = self.db.tables["contacts"][0]
        self.assertEqual(stored["subject"], "Web Development")
        self.assertIn(POPUP_MESSAGE_MARKER, stored["message"])


class TestContactCaptcha(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.require_captcha()

    def test_token_required_when_configured(self) -> None:
        response = self.client.post("/api/v1/contact", json=VALID_BODY)

        self.assertEqual(response.status_code, 400)
        self.assertNotIn("contacts", self.db.tables)

    def test_failed_verification(self) -> None:
        self.patch(contact_endpoint, "verify_captcha", lambda token: False)

        response = self.client.post("/api/v1/contact", json={**VALID_BODY, "captchaValue": "bad-token"})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "reCAPTCHA verification failed"})
        self.assertNotIn("contacts", self.db.tables)

    def test_successful_verification(self) -> None:
        seen = []
        self.patch(contact_endpoint, "verify_captcha", lambda token: seen.append(token) or True)

        response = self.client.post("/api/v1/contact", json={**VALID_BODY, "captchaValue": "good-token"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(seen, ["good-token"])
        self.assertEqual(len(self.db.tables["contacts"]), 1)


class TestPopupPayload(unittest.TestCase):
    def test_translation(self) -> None:
        payload = build_popup_contact_payload(
            PopupContactRequest(name="Jane", email="jane@x.com", message="Hi", service="Web Development")
        )

        self.assertEqual(payload.subject, "Web Development")
        self.assertTrue(payload.message.startswith("Hi"))
        self.assertIn("Phone: Not provided", payload.message)
        self.assertIn(POPUP_MESSAGE_MARKER, payload.message)

    def test_keeps_phone_and_captcha(self) -> None:
        payload = build_popup_contact_payload(
            PopupContactRequest(name="Sam", email="sam@x.com", message="Call me", phone="07123", captchaValue="tok")
        )

        self.assertEqual(payload.subject, DEFAULT_SUBJECT)
        self.assertIn("Phone: 07123", payload.message)
        self.assertEqual(payload.captcha_value, "tok")
