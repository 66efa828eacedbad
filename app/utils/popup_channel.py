"""
Publish/subscribe channel for opening the contact popup.

Trigger buttons, hash links and the auto-open timer all publish a
``PopupTrigger``; the popup subscribes once. Auto-opening happens at most
once per channel, either after the configured delay or when the visitor has
scrolled past half of the page, whichever comes first.
"""
import asyncio
from typing import Callable, List, Optional
from pydantic import BaseModel
from app.core.config import settings
from app.core.logging import logger

AUTO_TIMER_SOURCE = "auto-timer"
AUTO_SCROLL_SOURCE = "auto-scroll"
SCROLL_THRESHOLD = 0.5
POPUP_HASH = "#popup-contact"


class PopupTrigger(BaseModel):
    source: str


PopupSubscriber = Callable[[PopupTrigger], None]


class ContactPopupChannel:
    def __init__(self, auto_open_delay: Optional[float] = None):
        self.auto_open_delay = (
            settings.POPUP_AUTO_OPEN_DELAY_SECONDS if auto_open_delay is None else auto_open_delay
        )
        self._subscribers: List[PopupSubscriber] = []
        self._timer: Optional[asyncio.TimerHandle] = None
        self.has_auto_opened = False

    def subscribe(self, subscriber: PopupSubscriber) -> Callable[[], None]:
        """Register a subscriber and return a function that removes it."""
        self._subscribers.append(subscriber)
        return lambda: self.unsubscribe(subscriber)

    def unsubscribe(self, subscriber: PopupSubscriber) -> None:
        if subscriber in self._subscribers:
            self._subscribers.remove(subscriber)

    def publish(self, trigger: PopupTrigger) -> int:
        """Deliver a trigger to every subscriber; returns how many received it."""
        logger.debug(f"Popup trigger from {trigger.source}")
        subscribers = list(self._subscribers)
        for subscriber in subscribers:
            subscriber(trigger)
        return len(subscribers)

    def trigger(self, source: str) -> int:
        return self.publish(PopupTrigger(source=source))

    def handle_hash(self, url_hash: str) -> bool:
        """Open the popup when a page is loaded or navigated with ``#popup-contact``."""
        if url_hash != POPUP_HASH:
            return False
        self.trigger("hash")
        return True

    def schedule_auto_open(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> Optional[asyncio.TimerHandle]:
        """Start the one-shot auto-open timer on the running (or given) loop."""
        if self.has_auto_opened or self._timer is not None:
            return self._timer
        loop = loop or asyncio.get_running_loop()
        self._timer = loop.call_later(self.auto_open_delay, self._auto_open, AUTO_TIMER_SOURCE)
        return self._timer

    def report_scroll(self, fraction: float) -> bool:
        """
        Record scroll progress as (scrollTop + viewport height) / page height.

        Returns True when this report caused the auto-open.
        """
        if fraction <= SCROLL_THRESHOLD:
            return False
        return self._auto_open(AUTO_SCROLL_SOURCE)

    def cancel(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _auto_open(self, source: str) -> bool:
        if self.has_auto_opened:
            return False
        self.has_auto_opened = True
        self.cancel()
        self.trigger(source)
        return True
