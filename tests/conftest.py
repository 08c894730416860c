"""Pytest configuration and fixtures."""

from collections.abc import Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient

from quoteforge.application.services import reset_services
from quoteforge.config import reset_settings
from quoteforge.core.entities.quote import CompanySettings, LineItem, QuoteData


@pytest.fixture(autouse=True)
def _reset_singletons() -> Generator[None, None, None]:
    """Isolate tests from cached settings and services."""
    reset_settings()
    reset_services()
    yield
    reset_settings()
    reset_services()


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Create sync test client."""
    from quoteforge.api.main import create_app

    with TestClient(create_app()) as c:
        yield c


@pytest.fixture
def company() -> CompanySettings:
    """Issuer settings printed in the document header."""
    return CompanySettings(
        company_name="Acme Professional Services",
        company_address="1 Main Street, Springfield",
        company_phone="555-0100",
        company_email="billing@acme.test",
        tax_number="TX-998877",
    )


@pytest.fixture
def sample_quote_payload() -> dict[str, Any]:
    """Minimal valid quote in request-body form."""
    return {
        "id": "q-1",
        "quote_number": "Q-1001",
        "client_name": "Jane Client",
        "client_email": "jane@example.com",
        "issue_date": "2024-01-01",
        "due_date": "2024-01-31",
        "status": "draft",
        "subtotal": 100,
        "tax_amount": 15,
        "total_amount": 115,
        "currency": "USD",
        "line_items": [
            {
                "id": "li-1",
                "description": "Consultation",
                "quantity": 1,
                "unit_price": 100,
                "total": 100,
            }
        ],
    }


@pytest.fixture
def legal_quote(company: CompanySettings) -> QuoteData:
    """Legal quote with one case-tagged time entry."""
    return QuoteData(
        id="q-1",
        quote_number="Q-1001",
        client_name="Jane Client",
        client_email="jane@example.com",
        issue_date="2024-01-01",
        due_date="2024-01-31",
        status="draft",
        subtotal=100,
        tax_amount=15,
        total_amount=115,
        currency="USD",
        profession="Legal",
        line_items=[
            LineItem(
                id="li-1",
                description="Contract Review",
                quantity=2,
                unit_price=50,
                total=100,
                case_number="CASE-1",
                legal_matter="Contract Dispute",
                billing_rate=50,
            )
        ],
        company_settings=company,
    )


@pytest.fixture
def general_quote() -> QuoteData:
    """Plain quote without issuer settings."""
    return QuoteData(
        id="q-2",
        quote_number="Q-2002",
        client_name="Bob Buyer",
        client_email="bob@example.com",
        issue_date="2024-03-05",
        due_date="2024-04-04",
        status="sent",
        subtotal=250,
        tax_amount=0,
        total_amount=250,
        currency="USD",
        line_items=[
            LineItem(id="1", description="Widget", quantity=5, unit_price=50, total=250),
        ],
    )
