# tests/test_applications.py
import unittest
from unittest.mock import patch
from uuid import uuid4

from helpers import DatabaseTestCase, as_utc

from pydantic import ValidationError as SchemaValidationError

from shadowing.config import get_settings
from shadowing.errors import AccessDenied, InvalidStatus, NotFound, ProfileRequired, ValidationError
from shadowing.models.base import utcnow
from shadowing.schemas.application import ApplicationCreate
from shadowing.services import application_service


class TestApplicationLifecycle(DatabaseTestCase):

    async def asyncSetUp(self):
        await super().asyncSetUp()
        self.business_actor, self.business = await self.make_business()
        self.opportunity = await self.make_opportunity(self.business, max_applicants=5)
        self.student_actor, self.student = await self.make_student()

    def command(self, cover_letter="I would love to learn how a lab runs.", opportunity=None):
        return ApplicationCreate(opportunity_id=(opportunity or self.opportunity).id, cover_letter=cover_letter)

    def test_cover_letter_length_boundary(self):
        with self.assertRaises(SchemaValidationError):
            self.command(cover_letter="x" * 9)
        self.assertEqual(self.command(cover_letter="x" * 10).cover_letter, "x" * 10)

    async def test_apply_with_ten_characters_starts_pending(self):
        application = await application_service.apply(self.db, self.student_actor, self.command("x" * 10))

        self.assertEqual(application.status, "pending")
        self.assertIsNotNone(application.applied_at)
        self.assertIsNone(application.responded_at)
        self.assertEqual(application.student_profile_id, self.student.id)

    async def test_apply_without_student_profile(self):
        actor = await self.make_user("student")
        with self.assertRaises(ProfileRequired):
            await application_service.apply(self.db, actor, self.command())

    async def test_apply_to_missing_opportunity(self):
        data = ApplicationCreate(opportunity_id=uuid4(), cover_letter="Please take me on board.")
        with self.assertRaises(NotFound):
            await application_service.apply(self.db, self.student_actor, data)

    async def test_duplicate_application_rejected(self):
        await application_service.apply(self.db, self.student_actor, self.command())
        with self.assertRaises(ValidationError):
            await application_service.apply(self.db, self.student_actor, self.command())

    async def test_apply_increments_counter_up_to_capacity(self):
        opportunity = await self.make_opportunity(self.business, max_applicants=2)
        for _ in range(2):
            actor, _ = await self.make_student()
            await application_service.apply(self.db, actor, self.command(opportunity=opportunity))

        latecomer, _ = await self.make_student()
        with self.assertRaises(ValidationError):
            await application_service.apply(self.db, latecomer, self.command(opportunity=opportunity))

        await self.db.refresh(opportunity)
        self.assertEqual(opportunity.current_applicants, 2)

    async def test_apply_to_closed_opportunity_rejected(self):
        closed = await self.make_opportunity(self.business, status="closed")
        with self.assertRaises(ValidationError):
            await application_service.apply(self.db, self.student_actor, self.command(opportunity=closed))

    async def test_capacity_check_can_be_disabled(self):
        full = await self.make_opportunity(self.business, max_applicants=1, current_applicants=1)
        with patch.object(get_settings(), "enforce_capacity", False):
            application = await application_service.apply(
                self.db, self.student_actor, self.command(opportunity=full)
            )
        self.assertEqual(application.status, "pending")

    async def test_list_for_student_newest_first(self):
        other = await self.make_opportunity(self.business, title="Clinic Visit")
        first = await application_service.apply(self.db, self.student_actor, self.command())
        second = await application_service.apply(self.db, self.student_actor, self.command(opportunity=other))
        someone_else, _ = await self.make_student()
        await application_service.apply(self.db, someone_else, self.command())

        listed = await application_service.list_for_student(self.db, self.student_actor)

        self.assertEqual([a.id for a in listed], [second.id, first.id])

    async def test_list_for_opportunity_owner_only(self):
        other_opportunity = await self.make_opportunity(self.business, title="Other")
        first = await application_service.apply(self.db, self.student_actor, self.command())
        actor, _ = await self.make_student()
        second = await application_service.apply(self.db, actor, self.command())
        await application_service.apply(self.db, actor, self.command(opportunity=other_opportunity))

        listed = await application_service.list_for_opportunity(self.db, self.business_actor, self.opportunity.id)
        self.assertEqual([a.id for a in listed], [second.id, first.id])

        intruder, _ = await self.make_business()
        with self.assertRaises(AccessDenied):
            await application_service.list_for_opportunity(self.db, intruder, self.opportunity.id)

        with self.assertRaises(AccessDenied):
            await application_service.list_for_opportunity(self.db, self.student_actor, self.opportunity.id)

    async def test_set_status_stamps_responded_at(self):
        application = await application_service.apply(self.db, self.student_actor, self.command())

        accepted = await application_service.set_status(self.db, self.business_actor, application.id, "accepted")
        self.assertEqual(accepted.status, "accepted")
        self.assertGreaterEqual(as_utc(accepted.responded_at), as_utc(accepted.applied_at))
        self.assertLessEqual(as_utc(accepted.responded_at), utcnow())
        first_response = as_utc(accepted.responded_at)

        rejected = await application_service.set_status(self.db, self.business_actor, application.id, "rejected")
        self.assertEqual(rejected.status, "rejected")
        self.assertGreaterEqual(as_utc(rejected.responded_at), first_response)

    async def test_set_status_back_to_pending_is_allowed_by_default(self):
        application = await application_service.apply(self.db, self.student_actor, self.command())
        await application_service.set_status(self.db, self.business_actor, application.id, "accepted")

        reset = await application_service.set_status(self.db, self.business_actor, application.id, "pending")

        self.assertEqual(reset.status, "pending")
        self.assertIsNotNone(reset.responded_at)

    async def test_set_status_rejects_unknown_value(self):
        application = await application_service.apply(self.db, self.student_actor, self.command())
        with self.assertRaises(InvalidStatus):
            await application_service.set_status(self.db, self.business_actor, application.id, "withdrawn")

    async def test_set_status_requires_owning_business(self):
        application = await application_service.apply(self.db, self.student_actor, self.command())
        intruder, _ = await self.make_business()

        with self.assertRaises(AccessDenied):
            await application_service.set_status(self.db, intruder, application.id, "accepted")
        with self.assertRaises(AccessDenied):
            await application_service.set_status(self.db, self.student_actor, application.id, "accepted")

    async def test_set_status_on_missing_application(self):
        with self.assertRaises(NotFound):
            await application_service.set_status(self.db, self.business_actor, uuid4(), "accepted")

    async def test_strict_transitions(self):
        application = await application_service.apply(self.db, self.student_actor, self.command())

        with patch.object(get_settings(), "strict_status_transitions", True):
            with self.assertRaises(InvalidStatus):
                await application_service.set_status(self.db, self.business_actor, application.id, "completed")

            await application_service.set_status(self.db, self.business_actor, application.id, "accepted")
            done = await application_service.set_status(self.db, self.business_actor, application.id, "completed")
            self.assertEqual(done.status, "completed")

            with self.assertRaises(InvalidStatus):
                await application_service.set_status(self.db, self.business_actor, application.id, "pending")


if __name__ == '__main__':
    unittest.main()
