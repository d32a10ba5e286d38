"""Coach notification repository."""

from sqlmodel import select

from app.db.repositories.base import BaseRepository
from app.models.coach_notification import CoachNotification


class CoachNotificationRepository(BaseRepository):
    """Repository for CoachNotification database operations."""

    def create(self, notification: CoachNotification) -> CoachNotification:
        self.session.add(notification)
        self._commit(notification)
        return notification

    def list_by_trainee(self, trainee_id: int) -> list[CoachNotification]:
        statement = (select(CoachNotification).where(CoachNotification.trainee_id == trainee_id)
                     .order_by(CoachNotification.sent_at))
        return self._exec(statement)
