"""Shared test fixtures for the invoicing test suite."""

from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file BEFORE any config is built so INVOICING_* overrides apply
load_dotenv(Path(__file__).parent.parent / ".env", override=True)


# =============================================================================
# CONFIG AND WIRING FIXTURES
# =============================================================================


@pytest.fixture
def config():
    """Default configuration (9% CGST, 9% SGST, kWp, AS prefix)."""
    from invoicing.config import InvoicingConfig
    return InvoicingConfig()


@pytest.fixture
def event_bus():
    """Fresh in-process event bus."""
    from invoicing.event_bus import EventBus
    return EventBus()


@pytest.fixture
def published(event_bus):
    """Every event published on the bus, in order."""
    events = []
    for name in ("DraftUpdated", "DraftDiscarded", "InvoiceFinalized"):
        event_bus.subscribe(name, events.append)
    return events


@pytest.fixture
def draft_service(config, event_bus):
    from invoicing.services.draft_service import DraftService
    return DraftService(config, event_bus)


@pytest.fixture
def invoice_service(config, event_bus):
    from invoicing.services.invoice_service import InvoiceService
    return InvoiceService(config, event_bus)


# =============================================================================
# DOMAIN FIXTURES
# =============================================================================


@pytest.fixture
def customer():
    from invoicing.models import CustomerDetails
    return CustomerDetails(
        id="cust-1",
        company_name="Sunrise Textiles Pvt Ltd",
        address_line1="12 Park Street",
        city="Kolkata",
        state="West Bengal",
        pincode="700016",
        gst_number="19AABCS1234F1Z5",
    )


@pytest.fixture
def two_items():
    """1.50/kWp x 35 kWp and 2.00/kWp x 10 kWp (52500.00 + 20000.00)."""
    from invoicing.models import LineItem
    return [
        LineItem(
            serial_number=1, description="Rooftop solar plant",
            hsn_sac_code="8541", rate=Decimal("1.50"), quantity=Decimal("35"),
        ),
        LineItem(
            serial_number=2, description="Net metering work",
            hsn_sac_code="9954", rate=Decimal("2.00"), quantity=Decimal("10"),
        ),
    ]


@pytest.fixture
def complete_draft(customer, two_items):
    """Draft that passes validation."""
    from invoicing.models import InvoiceDraft, TaxConfiguration
    return InvoiceDraft(
        invoice_number="022",
        financial_year="24-25",
        invoice_date=date(2024, 11, 5),
        work_order_reference="WO/2024/117",
        work_order_date=date(2024, 10, 1),
        customer=customer,
        line_items=two_items,
        tax=TaxConfiguration(cgst_percentage=Decimal("9"), sgst_percentage=Decimal("9")),
    )
