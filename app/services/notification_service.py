"""
Notification dispatch.

The scheduling core only knows the :class:`NotificationDispatcher`
protocol.  The default implementation writes an in-app
:class:`~app.models.coach_notification.CoachNotification`; push and
e-mail transports plug in behind the same interface.
"""

import logging
from enum import Enum
from typing import Optional, Protocol

from sqlmodel import Session

from app.booster.errors import NotificationError, PersistenceError
from app.core.clock import Clock, SystemClock, utc_timestamp
from app.core.config import settings
from app.db.repositories.coach_notification import CoachNotificationRepository
from app.models.coach_notification import CoachNotification
from app.models.trainee import Trainee

logger = logging.getLogger(__name__)


class NotificationKind(str, Enum):
    BOOSTER_ACCESS_GRANTED = "booster_access_granted"


# (title, message) per kind; ``{name}`` is the trainee's name
NOTIFICATION_TEMPLATES: dict[NotificationKind, tuple[str, str]] = {
    NotificationKind.BOOSTER_ACCESS_GRANTED: (
        "🎉 גישה לתוכנית הבוסטר!",
        "שלום {name}! קיבלת גישה לתוכנית הבוסטר. התחל עכשיו את המסע שלך!",
    ),
}


class NotificationDispatcher(Protocol):
    def notify(self, trainee: Trainee, kind: NotificationKind) -> None:
        """Send *kind* to *trainee*.  Raises :class:`NotificationError` on failure."""
        ...


class InboxNotificationDispatcher:
    """Stores each notification in the trainee's in-app inbox."""

    def __init__(self, session: Session, clock: Optional[Clock] = None, sent_by: Optional[str] = None):
        self.repository = CoachNotificationRepository(session)
        self.clock = clock or SystemClock()
        self.sent_by = sent_by or settings.BOOSTER_NOTIFICATION_SENDER

    def notify(self, trainee: Trainee, kind: NotificationKind) -> None:
        if not trainee.email:
            raise NotificationError(f"Trainee {trainee.id} has no address to notify")
        title, message = NOTIFICATION_TEMPLATES[kind]
        notification = CoachNotification(trainee_id=trainee.id, notification_type=kind.value, title=title,
                                         message=message.format(name=trainee.full_name or "מתאמן/ת"),
                                         sent_by=self.sent_by, sent_at=utc_timestamp(self.clock), )
        try:
            self.repository.create(notification)
        except PersistenceError as e:
            raise NotificationError(f"Could not store notification for {trainee.email}: {e}") from e
        logger.info("Notified %s: %s", trainee.email, kind.value)


class NullNotificationDispatcher:
    """Dispatcher used when ``BOOSTER_NOTIFICATIONS_ENABLED`` is off."""

    def notify(self, trainee: Trainee, kind: NotificationKind) -> None:
        logger.debug("Notifications disabled, not sending %s to %s", kind.value, trainee.email)


def default_dispatcher(session: Session, clock: Optional[Clock] = None) -> NotificationDispatcher:
    if settings.BOOSTER_NOTIFICATIONS_ENABLED:
        return InboxNotificationDispatcher(session, clock)
    return NullNotificationDispatcher()
