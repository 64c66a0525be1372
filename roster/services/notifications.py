from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from roster.models.directory import Notification, NotificationKind

logger = logging.getLogger(__name__)


class NotificationScheduler:
    """Holds the single live notification and its auto-dismiss timer.

    Each notification gets its own ``call_later`` handle; replacing or
    clearing the notification cancels that handle so an old timer can never
    dismiss a newer message.
    """

    def __init__(
        self,
        ttl: float = 3.0,
        on_change: Callable[[Notification | None], None] | None = None,
    ) -> None:
        self.ttl = ttl
        self.on_change = on_change
        self._current: Notification | None = None
        self._timer: asyncio.TimerHandle | None = None

    @property
    def current(self) -> Notification | None:
        return self._current

    @property
    def pending(self) -> bool:
        return self._timer is not None

    def notify(self, message: str, kind: NotificationKind = NotificationKind.SUCCESS) -> Notification:
        loop = asyncio.get_running_loop()
        self._cancel_timer()

        now = loop.time()
        notification = Notification(
            message=message,
            kind=kind,
            created_at=now,
            expires_at=now + self.ttl,
        )
        self._current = notification
        self._timer = loop.call_later(self.ttl, self._expire, notification)

        if kind is NotificationKind.ERROR:
            logger.info("Notification (error): %s", message)
        else:
            logger.debug("Notification (%s): %s", kind.value, message)
        self._emit()
        return notification

    def success(self, message: str) -> Notification:
        return self.notify(message, NotificationKind.SUCCESS)

    def error(self, message: str) -> Notification:
        return self.notify(message, NotificationKind.ERROR)

    def clear(self) -> None:
        self._cancel_timer()
        if self._current is None:
            return
        self._current = None
        self._emit()

    def close(self) -> None:
        self._cancel_timer()

    def _expire(self, notification: Notification) -> None:
        if self._current is not notification:
            return
        self._timer = None
        self._current = None
        self._emit()

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _emit(self) -> None:
        if self.on_change is not None:
            self.on_change(self._current)
