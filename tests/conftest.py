"""Pytest configuration and shared fixtures."""

import pytest
from dataclasses import dataclass, field
from typing import List, Optional

from record_search.api.service import FuzzySearchService


@dataclass
class Product:
    """Attribute-based record, as returned by an ORM or API client."""
    name: str
    sku: str
    description: str = ""
    tags: List[str] = field(default_factory=list)
    category: Optional[dict] = None


@pytest.fixture
def sample_suppliers() -> List[dict]:
    """Supplier records shaped like backend JSON."""
    return [
        {
            "companyName": "Johnson Wholesale",
            "email": "orders@johnsonwholesale.com",
            "phone": "555-0100",
            "contact": {"name": "Mary Johnson", "city": "Lahore"}
        },
        {
            "companyName": "Johnsen Supply",
            "email": "info@johnsen.example",
            "phone": "555-0101",
            "contact": {"name": "Erik Johnsen", "city": "Oslo"}
        },
        {
            "companyName": "Unrelated Co",
            "email": "hello@unrelated.example",
            "phone": "555-0199",
            "contact": {"name": "Pat Doe", "city": "Austin"}
        },
        {
            "businessName": "Acme Office Supplies",
            "description": "Paper, pens and folders",
            "email": "sales@acme.example",
            "phone": "555-0142",
            "contact": None
        },
    ]


@pytest.fixture
def sample_products() -> List[Product]:
    """Product records accessed by attribute."""
    return [
        Product(
            name="Wireless Mouse",
            sku="WM-1001",
            description="Ergonomic 2.4GHz mouse",
            tags=["electronics", "peripherals"],
            category={"name": "Computer Accessories"}
        ),
        Product(
            name="Mechanical Keyboard",
            sku="KB-2002",
            description="Blue switches, USB-C",
            tags=["electronics", "peripherals"],
            category={"name": "Computer Accessories"}
        ),
        Product(
            name="Printer Paper A4",
            sku="PP-3003",
            description="500 sheets, 80gsm",
            tags=["stationery"],
            category={"name": "Office Supplies"}
        ),
        Product(
            name="Ballpoint Pens",
            sku="BP-4004",
            description="Box of 12, blue ink",
            tags=["stationery"],
        ),
    ]


@pytest.fixture
def search_service():
    """Create a search service for testing."""
    with FuzzySearchService.create(log_level="WARNING") as service:
        yield service
