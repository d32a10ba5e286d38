"""Business logic services."""

from app.services.target_resolver import TargetResolver
from app.services.schedule_service import ScheduleService
from app.services.freeze_service import FreezeService
from app.services.task_status_service import TaskStatusService
from app.services.enrollment_service import EnrollmentService
from app.services.notification_service import InboxNotificationDispatcher, NotificationKind
from app.services.bulk_assignment_service import BulkAssignmentService
from app.services.overview_service import OverviewService

__all__ = [
    "TargetResolver",
    "ScheduleService",
    "FreezeService",
    "TaskStatusService",
    "EnrollmentService",
    "InboxNotificationDispatcher",
    "NotificationKind",
    "BulkAssignmentService",
    "OverviewService",
]
