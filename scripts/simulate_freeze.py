"""Walk one trainee through generate -> progress -> freeze -> unfreeze.

Runs against an in-memory SQLite database and prints the task windows
after each step, so the week-alignment of unfreeze can be eyeballed.

Usage:
    python scripts/simulate_freeze.py [resume-date]
"""

import datetime
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlmodel import Session, SQLModel, create_engine

import app.db.base  # noqa: F401
from app.booster.transitions import StatusActor
from app.core.clock import FixedClock
from app.db.repositories.trainee import TraineeRepository
from app.models.trainee import Trainee
from app.models.weekly_task import TaskStatus
from app.services.freeze_service import FreezeService
from app.services.schedule_service import ScheduleService
from app.services.task_status_service import TaskStatusService

START = datetime.date(2024, 1, 7)
TODAY = datetime.date(2024, 2, 1)
RESUME = datetime.date.fromisoformat(sys.argv[1]) if len(sys.argv) > 1 else datetime.date(2024, 6, 10)


def show(title, tasks):
    print(f"\n-- {title} " + "-" * (60 - len(title)))
    for t in tasks:
        flag = "*" if t.is_frozen else " "
        print(f"  {flag} week {t.week:>2}  {t.week_start_date} -> {t.week_end_date}  {t.status}")


if __name__ == "__main__":
    engine = create_engine("sqlite://")
    SQLModel.metadata.create_all(engine)
    clock = FixedClock(TODAY)

    with Session(engine) as session:
        trainee = TraineeRepository(session).create(
            Trainee(email="dana@example.com", full_name="Dana", gender="female"))

        schedule = ScheduleService(session, clock)
        tasks = schedule.generate(trainee, START)
        show(f"generated from {START}", tasks)

        status = TaskStatusService(session, clock)
        for task in tasks[:3]:
            status.change_status(task.id, TaskStatus.COMPLETED, StatusActor.STAFF)

        freeze = FreezeService(session)
        print(f"\nfroze {freeze.freeze(trainee)} tasks")
        show("frozen", schedule.list_tasks(trainee.email))

        print(f"\nunfroze {freeze.unfreeze(trainee, RESUME)} tasks from {RESUME}")
        show(f"resumed in the week of {RESUME}", schedule.list_tasks(trainee.email))
