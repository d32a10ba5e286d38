"""
Bulk target resolution.

Turns a :class:`~app.schemas.bulk.TargetSpec` into the concrete list
of trainees an operation applies to.  Group membership is read from the
directory on every call, never cached.
"""

import logging

from sqlmodel import Session

from app.booster.errors import NotFoundError, ValidationError
from app.db.repositories.group import GroupRepository
from app.db.repositories.trainee import TraineeRepository
from app.models.trainee import Trainee
from app.schemas.bulk import TargetSpec

logger = logging.getLogger(__name__)


class TargetResolver:
    """Resolves target specs against the trainee store and group directory."""

    def __init__(self, session: Session):
        self.trainee_repo = TraineeRepository(session)
        self.group_repo = GroupRepository(session)

    def resolve(self, target: TargetSpec) -> list[Trainee]:
        """Deduplicated trainees for *target*, ordered by email.

        Raises:
            ValidationError: no target, an ambiguous target, or a target
                that resolves to nobody.
            NotFoundError: unknown trainee or group.
        """
        kinds = [bool(target.trainee_email), bool(target.group_name), target.all_active]
        if sum(kinds) > 1:
            raise ValidationError("Target exactly one of a trainee, a group or all active trainees")

        if target.trainee_email:
            trainee = self.trainee_repo.get_by_email(target.trainee_email)
            if not trainee:
                raise NotFoundError(f"Trainee '{target.trainee_email}' not found")
            trainees = [trainee]
        elif target.group_name:
            trainees = self._resolve_group(target.group_name, target.member_emails)
        elif target.all_active:
            trainees = self.trainee_repo.list_booster_active()
        else:
            raise ValidationError("Select a trainee or a group")

        resolved = self._dedupe(trainees)
        if not resolved:
            raise ValidationError("The selected target has no trainees")
        logger.debug("Resolved target %s to %d trainees", target.model_dump(), len(resolved))
        return resolved

    def _resolve_group(self, group_name: str, member_emails: list[str]) -> list[Trainee]:
        if not self.group_repo.get_by_name(group_name):
            raise NotFoundError(f"Group '{group_name}' not found")
        members = self.trainee_repo.list_by_group(group_name)
        wanted = {e.strip().lower() for e in member_emails if e and e.strip()}
        if not wanted:
            return members
        return [m for m in members if m.email in wanted]

    @staticmethod
    def _dedupe(trainees: list[Trainee]) -> list[Trainee]:
        by_email = {t.email: t for t in trainees}
        return [by_email[email] for email in sorted(by_email)]
