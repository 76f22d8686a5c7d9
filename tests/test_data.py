"""Tests for record types and sample data."""

from datetime import timedelta


class TestSampleData:
    """Tests for the bundled sample collections."""

    def test_collections_are_populated(self, sample_data, today):
        assert sample_data.today == today
        assert len(sample_data.work_orders) == 12
        for collection in (
            sample_data.invoices,
            sample_data.tickets,
            sample_data.projects,
            sample_data.bids,
            sample_data.payments,
        ):
            assert collection

    def test_ids_are_unique(self, sample_data):
        ids = [wo.work_order_id for wo in sample_data.work_orders]
        assert len(set(ids)) == len(ids)

    def test_dates_follow_reference_day(self, today):
        from src.data import sample_work_orders

        shifted = sample_work_orders(today + timedelta(days=10))
        original = sample_work_orders(today)
        assert shifted[0].due_date - original[0].due_date == timedelta(days=10)

    def test_bids_reference_projects(self, sample_data):
        project_ids = {p.project_id for p in sample_data.projects}
        assert all(bid.project_id in project_ids for bid in sample_data.bids)

    def test_statuses_have_badges(self, sample_data):
        from config.constants import STATUS_BADGES

        for screen, records in (
            ("work_orders", sample_data.work_orders),
            ("invoices", sample_data.invoices),
            ("tickets", sample_data.tickets),
            ("projects", sample_data.projects),
            ("bids", sample_data.bids),
            ("payments", sample_data.payments),
        ):
            assert {r.status for r in records} <= set(STATUS_BADGES[screen])


class TestModels:
    """Tests for record dataclasses."""

    def test_project_budget_and_deadline(self, today):
        from src.analysis import average_budget
        from src.screens import days_until_deadline
        from src.data import MarketplaceProject

        project = MarketplaceProject(
            project_id="MP-1",
            property_address="1 Main St",
            service_category="plumbing",
            project_description="Repipe",
            budget_min=1000,
            budget_max=3000,
            deadline=today + timedelta(days=5),
            number_of_bids=2,
            status="open",
        )
        assert average_budget(project) == 2000
        assert days_until_deadline(today)(project) == 5
        assert project.to_dict()["budget_max"] == 3000
