"""
Booster program endpoints.

Administrative surface for bulk scheduling (generate, enable/disable,
reset, freeze, unfreeze, assign weeks), gated status changes and the
progress overview.  Bulk endpoints answer 207 when some trainees failed.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.api.dependencies import get_clock
from app.booster.catalog import MissionTemplate, TemplateVariant, get_catalog
from app.core.clock import Clock
from app.db.session import get_db
from app.schemas.bulk import (ActivationRequest, AssignWeeksRequest, BulkResult, ScheduleRequest, TargetRequest,
                              UnfreezeRequest, )
from app.schemas.overview import TraineeOverview
from app.schemas.trainee import TraineeResponse
from app.schemas.weekly_task import NoteCreate, TaskStatusUpdate, WeeklyTaskResponse
from app.services.bulk_assignment_service import BulkAssignmentService
from app.services.overview_service import OverviewService
from app.services.schedule_service import ScheduleService
from app.services.task_status_service import TaskStatusService

router = APIRouter()


@router.post("/schedule", summary="Set a start date and (re)generate the 12-week schedule.",
             response_model=BulkResult, )
def generate_schedule(data: ScheduleRequest, db: Session = Depends(get_db), clock: Clock = Depends(get_clock), ):
    service = BulkAssignmentService(db, clock)
    return service.generate(data.target, data.start_date).raise_for_failures()


@router.post("/activation", summary="Enable or disable the booster program.", response_model=BulkResult, )
def set_activation(data: ActivationRequest, db: Session = Depends(get_db), clock: Clock = Depends(get_clock), ):
    service = BulkAssignmentService(db, clock)
    return service.set_enabled(data.target, data.enabled).raise_for_failures()


@router.post("/reset", summary="Reset task progress without re-dating.", response_model=BulkResult, )
def reset_tasks(data: TargetRequest, db: Session = Depends(get_db), clock: Clock = Depends(get_clock), ):
    service = BulkAssignmentService(db, clock)
    return service.reset(data.target).raise_for_failures()


@router.post("/freeze", summary="Freeze all open tasks.", response_model=BulkResult, )
def freeze_tasks(data: TargetRequest, db: Session = Depends(get_db), clock: Clock = Depends(get_clock), ):
    service = BulkAssignmentService(db, clock)
    return service.freeze(data.target).raise_for_failures()


@router.post("/unfreeze", summary="Resume frozen tasks from a new date.", response_model=BulkResult, )
def unfreeze_tasks(data: UnfreezeRequest, db: Session = Depends(get_db), clock: Clock = Depends(get_clock), ):
    service = BulkAssignmentService(db, clock)
    return service.unfreeze(data.target, data.resume_date).raise_for_failures()


@router.post("/assign-weeks", summary="Assign selected program weeks.", response_model=BulkResult, )
def assign_weeks(data: AssignWeeksRequest, db: Session = Depends(get_db), clock: Clock = Depends(get_clock), ):
    service = BulkAssignmentService(db, clock)
    return service.assign_weeks(data.target, data.weeks, data.week_offset).raise_for_failures()


@router.get("/trainees/{email}", summary="A trainee's booster enrolment.", response_model=TraineeResponse, )
def get_trainee(email: str, db: Session = Depends(get_db), clock: Clock = Depends(get_clock), ):
    service = ScheduleService(db, clock)
    return service.get_trainee(email)


@router.get("/trainees/{email}/tasks", summary="List a trainee's tasks, frozen ones included.",
            response_model=list[WeeklyTaskResponse], )
def list_trainee_tasks(email: str, db: Session = Depends(get_db), clock: Clock = Depends(get_clock), ):
    service = ScheduleService(db, clock)
    return service.list_tasks(email)


@router.patch("/tasks/{task_id}/status", summary="Change a task's status (refused on frozen tasks).",
              response_model=WeeklyTaskResponse, )
def change_task_status(task_id: int, data: TaskStatusUpdate, db: Session = Depends(get_db),
                       clock: Clock = Depends(get_clock), ):
    service = TaskStatusService(db, clock)
    return service.change_status(task_id, data.status, data.actor)


@router.post("/tasks/{task_id}/notes", summary="Append a trainee note.", response_model=WeeklyTaskResponse,
             status_code=status.HTTP_201_CREATED, )
def add_task_note(task_id: int, data: NoteCreate, db: Session = Depends(get_db),
                  clock: Clock = Depends(get_clock), ):
    service = TaskStatusService(db, clock)
    return service.add_note(task_id, data.text)


@router.get("/overview", summary="Current progress of every active booster trainee.",
            response_model=list[TraineeOverview], )
def get_overview(db: Session = Depends(get_db), clock: Clock = Depends(get_clock), ):
    service = OverviewService(db, clock)
    return service.overview()


@router.get("/templates/{variant}", summary="Mission templates of a variant.",
            response_model=list[MissionTemplate], )
def list_templates(variant: TemplateVariant):
    return get_catalog().weeks(variant)
