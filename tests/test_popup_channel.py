from __future__ import annotations

import asyncio
import unittest

from support import settings

from app.utils.popup_channel import ContactPopupChannel, PopupTrigger


class TestContactPopupChannel(unittest.TestCase):
    def test_publish_reaches_every_subscriber(self) -> None:
        channel = ContactPopupChannel()
        first, second = [], []
        channel.subscribe(first.append)
        channel.subscribe(second.append)

        delivered = channel.trigger("services-cta")

        self.assertEqual(delivered, 2)
        self.assertEqual(first, [PopupTrigger(source="services-cta")])
        self.assertEqual(second, first)

    def test_unsubscribe(self) -> None:
        channel = ContactPopupChannel()
        received = []
        unsubscribe = channel.subscribe(received.append)

        unsubscribe()

        self.assertEqual(channel.trigger("footer"), 0)
        self.assertEqual(received, [])

    def test_hash_trigger(self) -> None:
        channel = ContactPopupChannel()
        received = []
        channel.subscribe(received.append)

        self.assertFalse(channel.handle_hash("#services"))
        self.assertTrue(channel.handle_hash("#popup-contact"))
        self.assertEqual([trigger.source for trigger in received], ["hash"])

    def test_default_delay_comes_from_settings(self) -> None:
        self.assertEqual(ContactPopupChannel().auto_open_delay, settings.POPUP_AUTO_OPEN_DELAY_SECONDS)

    def test_manual_triggers_still_work_after_auto_open(self) -> None:
        channel = ContactPopupChannel()
        received = []
        channel.subscribe(received.append)

        channel.report_scroll(1.0)
        channel.trigger("navigation")

        self.assertEqual([trigger.source for trigger in received], ["auto-scroll", "navigation"])


class TestAutoOpen(unittest.IsolatedAsyncioTestCase):
    async def test_fires_once_after_delay(self) -> None:
        channel = ContactPopupChannel(auto_open_delay=0.01)
        received = []
        channel.subscribe(received.append)

        channel.schedule_auto_open()
        channel.schedule_auto_open()
        await asyncio.sleep(0.05)
        channel.report_scroll(0.9)

        self.assertTrue(channel.has_auto_opened)
        self.assertEqual([trigger.source for trigger in received], ["auto-timer"])

    async def test_scroll_past_half_opens_early_and_cancels_timer(self) -> None:
        channel = ContactPopupChannel(auto_open_delay=0.02)
        received = []
        channel.subscribe(received.append)

        channel.schedule_auto_open()
        self.assertFalse(channel.report_scroll(0.3))
        self.assertTrue(channel.report_scroll(0.6))
        await asyncio.sleep(0.05)

        self.assertEqual([trigger.source for trigger in received], ["auto-scroll"])
