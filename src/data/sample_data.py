"""Bundled sample records.

Dates are laid out relative to a reference day so that "overdue",
"this month" and "ending soon" stay meaningful whenever the dashboard
runs. Controllers receive these collections as their source; nothing
in the filtering engine reads this module.
"""

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import List, Optional

from .models import Bid, Invoice, MarketplaceProject, Payment, SupportTicket, WorkOrder


def _day(today: date, offset: int) -> date:
    return today + timedelta(days=offset)


def sample_work_orders(today: Optional[date] = None) -> List[WorkOrder]:
    today = today or date.today()
    rows = [
        ("WO-2024-001", "1420 Maple Ave, Springfield", "Greenfield Properties", "plumbing",
         "Replace leaking water heater in unit 4B", "in-progress", "urgent", 2, 1850.00, "Rapid Plumbing Co"),
        ("WO-2024-002", "88 Harbor Rd, Bayview", "Coastal Living LLC", "hvac",
         "Annual HVAC inspection for common areas", "pending", "medium", 12, 640.00, None),
        ("WO-2024-003", "310 Oak St, Riverside", "Riverside Apartments", "electrical",
         "Repair tripping breaker in laundry room", "assigned", "high", -3, 420.00, "Bright Spark Electric"),
        ("WO-2024-004", "77 Pine Ct, Lakewood", "Greenfield Properties", "carpentry",
         "Rebuild damaged back porch steps", "completed", "low", -10, 980.00, "Northwood Carpentry"),
        ("WO-2024-005", "501 Elm Blvd, Springfield", "Summit Realty Group", "painting",
         "Repaint hallway and stairwell", "pending", "low", 25, 2300.00, None),
        ("WO-2024-006", "19 Cedar Ln, Hillcrest", "Hillcrest HOA", "landscaping",
         "Clear storm debris from entrance grounds", "in-progress", "high", 1, 760.00, "GreenEdge Landscaping"),
        ("WO-2024-007", "240 Birch Way, Bayview", "Coastal Living LLC", "appliance",
         "Replace faulty dishwasher in unit 12", "cancelled", "medium", -5, 550.00, None),
        ("WO-2024-008", "1420 Maple Ave, Springfield", "Greenfield Properties", "general",
         "Replace lobby door closer", "assigned", "urgent", -1, 310.00, "Handy Pros"),
        ("WO-2024-009", "65 Willow Dr, Riverside", "Riverside Apartments", "plumbing",
         "Unclog main sewer line", "completed", "urgent", -2, 1200.00, "Rapid Plumbing Co"),
        ("WO-2024-010", "903 Spruce St, Lakewood", "Summit Realty Group", "hvac",
         "Install new thermostat in leasing office", "pending", "high", 6, 380.00, None),
        ("WO-2024-011", "12 Aspen Pl, Hillcrest", "Hillcrest HOA", "electrical",
         "Upgrade parking lot lighting to LED", "in-progress", "medium", 18, 4200.00, "Bright Spark Electric"),
        ("WO-2024-012", "88 Harbor Rd, Bayview", "Coastal Living LLC", "painting",
         "Touch up exterior trim after pressure wash", "assigned", "low", 30, 890.00, "ColorPro Painters"),
    ]
    return [
        WorkOrder(
            work_order_id=wo_id,
            property_address=address,
            client_name=client,
            service_category=category,
            service_description=description,
            status=status,
            priority=priority,
            due_date=_day(today, due),
            estimated_cost=cost,
            assigned_vendor=vendor,
        )
        for wo_id, address, client, category, description, status, priority, due, cost, vendor in rows
    ]


def sample_invoices(today: Optional[date] = None) -> List[Invoice]:
    today = today or date.today()
    rows = [
        ("INV-1001", "Greenfield Properties", -40, -10, 1850.00, "paid", "WO-2024-001"),
        ("INV-1002", "Coastal Living LLC", -20, 10, 640.00, "sent", "WO-2024-002"),
        ("INV-1003", "Riverside Apartments", -45, -15, 420.00, "overdue", "WO-2024-003"),
        ("INV-1004", "Greenfield Properties", -12, 18, 980.00, "approved", "WO-2024-004"),
        ("INV-1005", "Summit Realty Group", -3, 27, 2300.00, "draft", None),
        ("INV-1006", "Hillcrest HOA", -30, -2, 760.00, "overdue", "WO-2024-006"),
        ("INV-1007", "Coastal Living LLC", -25, 5, 550.00, "cancelled", "WO-2024-007"),
        ("INV-1008", "Riverside Apartments", -18, 12, 1200.00, "viewed", "WO-2024-009"),
        ("INV-1009", "Summit Realty Group", -60, -30, 380.00, "paid", "WO-2024-010"),
        ("INV-1010", "Hillcrest HOA", -8, 22, 4200.00, "disputed", "WO-2024-011"),
    ]
    return [
        Invoice(
            invoice_number=number,
            client_name=client,
            issue_date=_day(today, issued),
            due_date=_day(today, due),
            total=total,
            status=status,
            work_order_id=work_order_id,
        )
        for number, client, issued, due, total, status, work_order_id in rows
    ]


def sample_tickets(today: Optional[date] = None) -> List[SupportTicket]:
    today = today or date.today()
    rows = [
        ("TKT-501", "Cannot upload invoice PDF", "Upload fails with a timeout for files over 5 MB",
         "technical", "high", "open", -1, None),
        ("TKT-502", "Duplicate charge on statement", "Payment for INV-1001 appears twice",
         "billing", "urgent", "in-progress", -2, "Dana Cole"),
        ("TKT-503", "Add second admin user", "Need another admin on the company account",
         "account", "low", "resolved", -9, "Sam Ortiz"),
        ("TKT-504", "Export work orders to Excel", "Feature request for a spreadsheet export",
         "feature-request", "medium", "waiting-response", -4, "Dana Cole"),
        ("TKT-505", "Calendar shows wrong due dates", "Due dates are shifted by one day",
         "bug", "high", "in-progress", -3, "Lee Park"),
        ("TKT-506", "Question about bid rules", "Can a bid be edited after submission?",
         "other", "low", "closed", -14, "Sam Ortiz"),
        ("TKT-507", "Password reset email not received", "Reset link never arrives",
         "account", "medium", "open", 0, None),
        ("TKT-508", "Late fee applied incorrectly", "Invoice INV-1003 has a late fee after payment",
         "billing", "medium", "resolved", -6, "Dana Cole"),
    ]
    return [
        SupportTicket(
            ticket_id=ticket_id,
            subject=subject,
            description=description,
            category=category,
            priority=priority,
            status=status,
            created_date=_day(today, created),
            assigned_agent=agent,
        )
        for ticket_id, subject, description, category, priority, status, created, agent in rows
    ]


def sample_projects(today: Optional[date] = None) -> List[MarketplaceProject]:
    today = today or date.today()
    rows = [
        ("PRJ-301", "14 Lakeview Dr, Lakewood", "plumbing", "Repipe three-unit building", 8000, 12000, 5, 4, "open"),
        ("PRJ-302", "220 Summit Ave, Hillcrest", "hvac", "Replace rooftop AC units", 15000, 22000, 20, 6, "open"),
        ("PRJ-303", "9 Meadow Ln, Springfield", "painting", "Exterior repaint of townhomes", 5000, 7000, 2, 3, "in-review"),
        ("PRJ-304", "75 Ocean Blvd, Bayview", "landscaping", "Redesign courtyard garden", 3000, 4500, 9, 2, "open"),
        ("PRJ-305", "401 River Rd, Riverside", "electrical", "Install EV chargers in garage", 10000, 14000, -3, 5, "awarded"),
        ("PRJ-306", "58 Forest Way, Lakewood", "carpentry", "Build storage lockers", 2500, 3500, 7, 1, "open"),
        ("PRJ-307", "3 Harbor Pt, Bayview", "general", "Turnover cleaning for 10 units", 1500, 2500, -8, 4, "closed"),
        ("PRJ-308", "120 Elm Blvd, Springfield", "appliance", "Replace laundry machines", 6000, 9000, 15, 0, "cancelled"),
    ]
    return [
        MarketplaceProject(
            project_id=project_id,
            property_address=address,
            service_category=category,
            project_description=description,
            budget_min=float(budget_min),
            budget_max=float(budget_max),
            deadline=_day(today, deadline),
            number_of_bids=bids,
            status=status,
        )
        for project_id, address, category, description, budget_min, budget_max, deadline, bids, status in rows
    ]


def sample_bids(today: Optional[date] = None) -> List[Bid]:
    today = today or date.today()
    rows = [
        ("BID-901", "PRJ-301", 10500.00, "3 weeks", -4, "pending"),
        ("BID-902", "PRJ-302", 19800.00, "6 weeks", -6, "under-review"),
        ("BID-903", "PRJ-305", 12200.00, "4 weeks", -20, "accepted"),
        ("BID-904", "PRJ-307", 2100.00, "1 week", -15, "rejected"),
        ("BID-905", "PRJ-303", 6400.00, "2 weeks", -7, "withdrawn"),
        ("BID-906", "PRJ-304", 3900.00, "10 days", -2, "pending"),
    ]
    return [
        Bid(
            bid_id=bid_id,
            project_id=project_id,
            proposed_cost=cost,
            estimated_timeline=timeline,
            submitted_date=_day(today, submitted),
            status=status,
        )
        for bid_id, project_id, cost, timeline, submitted, status in rows
    ]


def sample_payments(today: Optional[date] = None) -> List[Payment]:
    today = today or date.today()
    rows = [
        ("PAY-701", "INV-1001", "Greenfield Properties", -12, 1850.00, "ach", "completed", "ACH-558120"),
        ("PAY-702", "INV-1009", "Summit Realty Group", -35, 380.00, "check", "completed", "CHK-10442"),
        ("PAY-703", "INV-1004", "Greenfield Properties", 0, 980.00, "wire", "pending", "WIR-99812"),
        ("PAY-704", "INV-1003", "Riverside Apartments", -5, 420.00, "credit-card", "failed", None),
        ("PAY-705", "INV-1008", "Riverside Apartments", -1, 600.00, "ach", "pending", "ACH-558301"),
        ("PAY-706", "INV-1007", "Coastal Living LLC", -20, 550.00, "credit-card", "refunded", "CC-4411"),
        ("PAY-707", "INV-1002", "Coastal Living LLC", -2, 320.00, "cash", "completed", None),
        ("PAY-708", "INV-1010", "Hillcrest HOA", -3, 1000.00, "other", "cancelled", "MISC-17"),
    ]
    return [
        Payment(
            payment_id=payment_id,
            invoice_number=invoice_number,
            client_name=client,
            payment_date=_day(today, paid),
            amount=amount,
            payment_method=method,
            status=status,
            reference_number=reference,
        )
        for payment_id, invoice_number, client, paid, amount, method, status, reference in rows
    ]


@dataclass
class SampleDataSet:
    """All sample collections generated for one reference day."""

    today: date
    work_orders: List[WorkOrder] = field(default_factory=list)
    invoices: List[Invoice] = field(default_factory=list)
    tickets: List[SupportTicket] = field(default_factory=list)
    projects: List[MarketplaceProject] = field(default_factory=list)
    bids: List[Bid] = field(default_factory=list)
    payments: List[Payment] = field(default_factory=list)


def load_sample_data(today: Optional[date] = None) -> SampleDataSet:
    """Build every sample collection relative to ``today``."""
    today = today or date.today()
    return SampleDataSet(
        today=today,
        work_orders=sample_work_orders(today),
        invoices=sample_invoices(today),
        tickets=sample_tickets(today),
        projects=sample_projects(today),
        bids=sample_bids(today),
        payments=sample_payments(today),
    )
