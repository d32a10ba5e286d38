"""
Bulk assignment service.

Applies one booster operation to every trainee of a target.

**Batch contract**:

- The target is resolved (and week selections validated) before any
  write; configuration errors raise immediately.
- Each trainee is handled on its own and its writes land in one commit.
  A :class:`BoosterError` for one trainee (store failures arrive as
  :class:`PersistenceError`) is rolled back, recorded in ``failed`` and
  the loop moves on; anything else aborts the batch.
- Notification failures never fail a trainee; they are counted in
  ``notifications_failed``.

Every operation is safe to re-run after a partial failure: generation
is idempotent and freeze/unfreeze only touch records whose
``is_frozen`` flag still needs to change.
"""

import datetime
import logging
from typing import Callable, Optional

from sqlmodel import Session

from app.booster.errors import BoosterError
from app.booster.schedule import normalize_weeks
from app.core.clock import Clock, SystemClock
from app.models.trainee import Trainee
from app.schemas.bulk import BulkFailure, BulkOperation, BulkResult, TargetSpec, TraineeOutcome
from app.services.enrollment_service import EnrollmentService
from app.services.freeze_service import FreezeService
from app.services.notification_service import NotificationDispatcher, NotificationKind, default_dispatcher
from app.services.schedule_service import ScheduleService
from app.services.target_resolver import TargetResolver
from app.services.task_status_service import TaskStatusService

logger = logging.getLogger(__name__)

TraineeStep = Callable[[Trainee], TraineeOutcome]


class BulkAssignmentService:
    """Runs booster operations across resolved trainee sets."""

    def __init__(self, session: Session, clock: Optional[Clock] = None,
                 dispatcher: Optional[NotificationDispatcher] = None):
        self.session = session
        self.clock = clock or SystemClock()
        self.resolver = TargetResolver(session)
        self.schedule_service = ScheduleService(session, self.clock)
        self.enrollment_service = EnrollmentService(session, self.clock, self.schedule_service)
        self.freeze_service = FreezeService(session, clock=self.clock)
        self.status_service = TaskStatusService(session, self.clock)
        self.dispatcher = dispatcher or default_dispatcher(session, self.clock)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def generate(self, target: TargetSpec, start_date: datetime.date) -> BulkResult:
        """(Re)build the 12-week schedule of every targeted trainee."""

        def step(trainee: Trainee) -> TraineeOutcome:
            tasks = self.schedule_service.generate(trainee, start_date)
            return TraineeOutcome(email=trainee.email, tasks_changed=len(tasks))

        return self._run(BulkOperation.GENERATE, target, step)

    def set_enabled(self, target: TargetSpec, enabled: bool) -> BulkResult:
        """Enable (and notify) or disable the program for every targeted trainee."""
        if not enabled:
            def disable(trainee: Trainee) -> TraineeOutcome:
                self.enrollment_service.disable(trainee)
                return TraineeOutcome(email=trainee.email)

            return self._run(BulkOperation.DISABLE, target, disable)

        result = BulkResult(operation=BulkOperation.ENABLE)

        def enable(trainee: Trainee) -> TraineeOutcome:
            created = self.enrollment_service.enable(trainee)
            notified = self._notify(trainee, NotificationKind.BOOSTER_ACCESS_GRANTED)
            if notified:
                result.notifications_sent += 1
            else:
                result.notifications_failed += 1
            return TraineeOutcome(email=trainee.email, tasks_changed=created, notified=notified)

        return self._run(BulkOperation.ENABLE, target, enable, result)

    def reset(self, target: TargetSpec) -> BulkResult:
        def step(trainee: Trainee) -> TraineeOutcome:
            return TraineeOutcome(email=trainee.email, tasks_changed=self.status_service.reset(trainee))

        return self._run(BulkOperation.RESET, target, step)

    def freeze(self, target: TargetSpec) -> BulkResult:
        def step(trainee: Trainee) -> TraineeOutcome:
            return TraineeOutcome(email=trainee.email, tasks_changed=self.freeze_service.freeze(trainee))

        return self._run(BulkOperation.FREEZE, target, step)

    def unfreeze(self, target: TargetSpec, resume_date: datetime.date) -> BulkResult:
        def step(trainee: Trainee) -> TraineeOutcome:
            count = self.freeze_service.unfreeze(trainee, resume_date)
            return TraineeOutcome(email=trainee.email, tasks_changed=count)

        return self._run(BulkOperation.UNFREEZE, target, step)

    def assign_weeks(self, target: TargetSpec, weeks: list[int], week_offset: int = 0) -> BulkResult:
        """Add the selected weeks to every targeted trainee."""
        selected = normalize_weeks(weeks)

        def step(trainee: Trainee) -> TraineeOutcome:
            created, skipped = self.schedule_service.assign_weeks(trainee, selected, week_offset)
            return TraineeOutcome(email=trainee.email, tasks_changed=len(created), skipped_weeks=skipped)

        return self._run(BulkOperation.ASSIGN_WEEKS, target, step)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _run(self, operation: BulkOperation, target: TargetSpec, step: TraineeStep,
             result: Optional[BulkResult] = None) -> BulkResult:
        trainees = self.resolver.resolve(target)
        result = result or BulkResult(operation=operation)
        logger.info("Starting %s for %d trainees", operation.value, len(trainees))

        for trainee in trainees:
            email = trainee.email
            try:
                result.succeeded.append(step(trainee))
            except BoosterError as e:
                # drop whatever this trainee left pending in the session
                self.session.rollback()
                logger.warning("%s failed for %s: %s", operation.value, email, e)
                result.failed.append(BulkFailure(email=email, error=str(e), error_type=type(e).__name__))

        logger.info("Finished %s: %d succeeded, %d failed, %d tasks changed", operation.value,
                    len(result.succeeded), len(result.failed), result.tasks_changed)
        return result

    def _notify(self, trainee: Trainee, kind: NotificationKind) -> bool:
        try:
            self.dispatcher.notify(trainee, kind)
        except Exception as e:  # any transport failure is non-fatal here
            logger.warning("Failed to notify %s (%s): %s", trainee.email, kind.value, e)
            return False
        return True
