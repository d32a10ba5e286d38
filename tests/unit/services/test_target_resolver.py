"""Tests for TargetResolver."""

import pytest

from app.booster.errors import NotFoundError, ValidationError
from app.db.repositories.group import GroupRepository
from app.models.trainee import TraineeRole
from app.schemas.bulk import TargetSpec
from app.services.target_resolver import TargetResolver


@pytest.fixture
def resolver(session):
    return TargetResolver(session)


@pytest.fixture
def cohort(make_trainee, make_group):
    members = [make_trainee(f"t{i}@example.com") for i in range(3)]
    make_group("Cohort A", members)
    return members


def emails(trainees):
    return [t.email for t in trainees]


class TestSingleTrainee:
    def test_resolves_by_email(self, resolver, make_trainee):
        make_trainee("dana@example.com")
        assert emails(resolver.resolve(TargetSpec(trainee_email="Dana@Example.com"))) == ["dana@example.com"]

    def test_unknown_trainee(self, resolver):
        with pytest.raises(NotFoundError):
            resolver.resolve(TargetSpec(trainee_email="ghost@example.com"))


class TestGroup:
    def test_whole_group_sorted(self, resolver, cohort):
        resolved = resolver.resolve(TargetSpec(group_name="Cohort A"))
        assert emails(resolved) == ["t0@example.com", "t1@example.com", "t2@example.com"]

    def test_sub_selection(self, resolver, cohort):
        target = TargetSpec(group_name="Cohort A", member_emails=["T2@example.com", "t0@example.com"])
        assert emails(resolver.resolve(target)) == ["t0@example.com", "t2@example.com"]

    def test_sub_selection_ignores_non_members(self, resolver, cohort, make_trainee):
        make_trainee("outsider@example.com")
        target = TargetSpec(group_name="Cohort A", member_emails=["t1@example.com", "outsider@example.com"])
        assert emails(resolver.resolve(target)) == ["t1@example.com"]

    def test_sub_selection_matching_nobody(self, resolver, cohort):
        with pytest.raises(ValidationError):
            resolver.resolve(TargetSpec(group_name="Cohort A", member_emails=["nobody@example.com"]))

    def test_unknown_group(self, resolver):
        with pytest.raises(NotFoundError):
            resolver.resolve(TargetSpec(group_name="Nope"))

    def test_empty_group(self, resolver, make_group):
        make_group("Empty", [])
        with pytest.raises(ValidationError):
            resolver.resolve(TargetSpec(group_name="Empty"))

    def test_membership_read_on_every_call(self, session, resolver, cohort, make_trainee):
        group = GroupRepository(session).get_by_name("Cohort A")
        late = make_trainee("t9@example.com")
        GroupRepository(session).add_member(group.id, late.id)
        assert "t9@example.com" in emails(resolver.resolve(TargetSpec(group_name="Cohort A")))

        assert GroupRepository(session).remove_member(group.id, late.id) is True
        assert "t9@example.com" not in emails(resolver.resolve(TargetSpec(group_name="Cohort A")))


class TestAllActive:
    def test_only_unlocked_enabled_trainees(self, resolver, make_trainee):
        make_trainee("active@example.com", booster_enabled=True, booster_unlocked=True)
        make_trainee("locked@example.com", booster_enabled=True, booster_unlocked=False)
        make_trainee("coach@example.com", booster_enabled=True, booster_unlocked=True, role=TraineeRole.STAFF.value)
        assert emails(resolver.resolve(TargetSpec(all_active=True))) == ["active@example.com"]


class TestInvalidTargets:
    def test_no_target(self, resolver):
        with pytest.raises(ValidationError, match="Select a trainee or a group"):
            resolver.resolve(TargetSpec())

    def test_trainee_and_group(self, resolver, cohort):
        with pytest.raises(ValidationError):
            resolver.resolve(TargetSpec(trainee_email="t0@example.com", group_name="Cohort A"))

    @pytest.mark.parametrize(
        "target",
        [
            TargetSpec(all_active=True, group_name="Cohort A"),
            TargetSpec(all_active=True, trainee_email="t0@example.com"),
            TargetSpec(all_active=True, trainee_email="t0@example.com", group_name="Cohort A"),
        ],
    )
    def test_all_active_combined_with_another_kind(self, resolver, cohort, target):
        with pytest.raises(ValidationError, match="exactly one"):
            resolver.resolve(target)
