# tests/test_opportunities.py
import unittest
from datetime import datetime, timedelta, timezone
from uuid import uuid4

from helpers import DatabaseTestCase

from pydantic import ValidationError as SchemaValidationError

from shadowing.errors import AccessDenied, NotFound, ProfileRequired, ValidationError
from shadowing.schemas.opportunity import OpportunityCreate, OpportunityUpdate
from shadowing.services import opportunity_service


class TestOpportunityCatalog(DatabaseTestCase):

    async def test_create_requires_business_profile(self):
        actor = await self.make_user("business")
        data = OpportunityCreate(title="Lab Assistant", description="Help in the lab", industry="technology")
        with self.assertRaises(ProfileRequired):
            await opportunity_service.create_opportunity(self.db, actor, data)

    async def test_create_ignores_client_status_and_counter(self):
        actor, business = await self.make_business()
        data = OpportunityCreate.model_validate({
            "title": "Lab Assistant",
            "description": "Help in the lab",
            "industry": "technology",
            "max_applicants": 5,
            "status": "draft",
            "current_applicants": 17,
        })

        opportunity = await opportunity_service.create_opportunity(self.db, actor, data)

        self.assertEqual(opportunity.status, "active")
        self.assertEqual(opportunity.current_applicants, 0)
        self.assertEqual(opportunity.business_profile_id, business.id)
        self.assertEqual(opportunity.max_applicants, 5)

    def test_max_applicants_bounds(self):
        base = {"title": "T", "description": "D", "industry": "technology"}
        for value in (0, 21):
            with self.assertRaises(SchemaValidationError):
                OpportunityCreate(**base, max_applicants=value)
        for value in (1, 20):
            self.assertEqual(OpportunityCreate(**base, max_applicants=value).max_applicants, value)

    def test_required_text_cannot_be_blank(self):
        with self.assertRaises(SchemaValidationError):
            OpportunityCreate(title="   ", description="D", industry="technology")

    async def test_list_only_returns_active_newest_first(self):
        _, business = await self.make_business()
        first = await self.make_opportunity(business, title="First")
        await self.make_opportunity(business, title="Closed", status="closed")
        await self.make_opportunity(business, title="Draft", status="draft")
        second = await self.make_opportunity(business, title="Second")

        listed = await opportunity_service.list_opportunities(self.db)

        self.assertEqual([o.id for o in listed], [second.id, first.id])
        self.assertTrue(all(o.status == "active" for o in listed))

    async def test_filters_combine_conjunctively(self):
        _, business = await self.make_business()
        match = await self.make_opportunity(business, industry="healthcare", location="Austin", is_remote=True)
        await self.make_opportunity(business, industry="healthcare", location="Austin", is_remote=False)
        await self.make_opportunity(business, industry="healthcare", location="Dallas", is_remote=True)
        await self.make_opportunity(business, industry="finance", location="Austin", is_remote=True)

        listed = await opportunity_service.list_opportunities(
            self.db, industry="healthcare", location="Austin", is_remote=True
        )
        self.assertEqual([o.id for o in listed], [match.id])

        on_site = await opportunity_service.list_opportunities(self.db, is_remote=False)
        self.assertEqual(len(on_site), 1)

    async def test_get_missing_opportunity(self):
        with self.assertRaises(NotFound):
            await opportunity_service.get_opportunity(self.db, uuid4())

    async def test_list_for_business_is_scoped_and_includes_all_statuses(self):
        actor, business = await self.make_business()
        _, other = await self.make_business()
        mine_active = await self.make_opportunity(business)
        mine_closed = await self.make_opportunity(business, status="closed")
        await self.make_opportunity(other)

        listed = await opportunity_service.list_for_business(self.db, actor)

        self.assertEqual([o.id for o in listed], [mine_closed.id, mine_active.id])

    async def test_update_by_owner(self):
        actor, business = await self.make_business()
        opportunity = await self.make_opportunity(business)

        updated = await opportunity_service.update_opportunity(
            self.db, actor, opportunity.id, OpportunityUpdate(status="closed", max_applicants=8)
        )

        self.assertEqual(updated.status, "closed")
        self.assertEqual(updated.max_applicants, 8)
        self.assertEqual(updated.title, "Lab Assistant")

    async def test_update_by_other_business_is_denied(self):
        _, business = await self.make_business()
        intruder, _ = await self.make_business()
        opportunity = await self.make_opportunity(business)

        with self.assertRaises(AccessDenied):
            await opportunity_service.update_opportunity(
                self.db, intruder, opportunity.id, OpportunityUpdate(status="closed")
            )

    async def test_update_rejects_capacity_below_received_applications(self):
        actor, business = await self.make_business()
        opportunity = await self.make_opportunity(business, current_applicants=3)

        with self.assertRaises(ValidationError):
            await opportunity_service.update_opportunity(
                self.db, actor, opportunity.id, OpportunityUpdate(max_applicants=2)
            )

    async def test_update_rejects_end_before_start(self):
        actor, business = await self.make_business()
        start = datetime(2026, 11, 2, tzinfo=timezone.utc)
        opportunity = await self.make_opportunity(business, start_date=start)

        with self.assertRaises(ValidationError):
            await opportunity_service.update_opportunity(
                self.db, actor, opportunity.id, OpportunityUpdate(end_date=start - timedelta(days=1))
            )

    async def test_update_cannot_null_required_text(self):
        actor, business = await self.make_business()
        opportunity = await self.make_opportunity(business)

        with self.assertRaises(ValidationError):
            await opportunity_service.update_opportunity(
                self.db, actor, opportunity.id, OpportunityUpdate(title=None)
            )


if __name__ == '__main__':
    unittest.main()
