"""
Weekly task repository.

The task store of the booster program.  Bulk writes for one trainee
(regeneration, freeze, unfreeze, reset) land in a single commit.
"""

from typing import Iterable, Optional

from sqlalchemy import func
from sqlmodel import select

from app.db.repositories.base import BaseRepository
from app.models.weekly_task import WeeklyTask


class WeeklyTaskRepository(BaseRepository):
    """Repository for WeeklyTask database operations."""

    def get_by_id(self, task_id: int) -> Optional[WeeklyTask]:
        return self._get(WeeklyTask, task_id)

    def list_by_trainee(self, trainee_id: int) -> list[WeeklyTask]:
        statement = select(WeeklyTask).where(WeeklyTask.trainee_id == trainee_id).order_by(WeeklyTask.week)
        return self._exec(statement)

    def list_by_trainees(self, trainee_ids: list[int]) -> list[WeeklyTask]:
        if not trainee_ids:
            return []
        statement = (select(WeeklyTask).where(WeeklyTask.trainee_id.in_(trainee_ids))
                     .order_by(WeeklyTask.trainee_id, WeeklyTask.week))
        return self._exec(statement)

    def count_by_trainee(self, trainee_id: int) -> int:
        statement = select(func.count()).select_from(WeeklyTask).where(WeeklyTask.trainee_id == trainee_id)
        return self._exec(statement)[0]

    def existing_weeks(self, trainee_id: int) -> set[int]:
        statement = select(WeeklyTask.week).where(WeeklyTask.trainee_id == trainee_id)
        return set(self._exec(statement))

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def create(self, task: WeeklyTask) -> WeeklyTask:
        self.session.add(task)
        self._commit(task)
        return task

    def create_many(self, tasks: list[WeeklyTask]) -> list[WeeklyTask]:
        self.session.add_all(tasks)
        self._commit(*tasks)
        return tasks

    def update(self, task: WeeklyTask) -> WeeklyTask:
        self.session.add(task)
        self._commit(task)
        return task

    def update_many(self, tasks: Iterable[WeeklyTask]) -> list[WeeklyTask]:
        tasks = list(tasks)
        self.session.add_all(tasks)
        self._commit(*tasks)
        return tasks

    def delete(self, task_id: int) -> bool:
        task = self.get_by_id(task_id)
        if task:
            self.session.delete(task)
            self._commit()
            return True
        return False

    def replace_for_trainee(self, trainee_id: int, tasks: list[WeeklyTask], *staged) -> list[WeeklyTask]:
        """Delete every task of *trainee_id* and insert *tasks*, in one commit.

        *staged* rows (the trainee itself) are written in the same commit.
        """
        for existing in self.list_by_trainee(trainee_id):
            self.session.delete(existing)
        # deletes must reach the database before the inserts (unique trainee/week)
        self._flush()
        self.session.add_all([*tasks, *staged])
        self._commit(*tasks, *staged)
        return tasks
