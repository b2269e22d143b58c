"""Basic usage example for record search."""

import json
from pathlib import Path

from record_search import FuzzySearchService


SAMPLE_SUPPLIERS = [
    {"companyName": "Johnson Wholesale", "email": "orders@johnsonwholesale.com", "phone": "555-0100"},
    {"companyName": "Johnsen Supply", "email": "info@johnsen.example", "phone": "555-0101"},
    {"companyName": "Acme Office Supplies", "email": "sales@acme.example", "phone": "555-0142"},
    {"companyName": "Unrelated Co", "email": "hello@unrelated.example", "phone": "555-0199"},
]


def load_suppliers(data_file: Path) -> list:
    """Load supplier records from a JSON export, falling back to built-in samples."""
    if not data_file.exists():
        return SAMPLE_SUPPLIERS
    with open(data_file) as f:
        return json.load(f)


def basic_search_demo():
    """Demonstrate typo-tolerant supplier search."""
    print("Record Search - Basic Usage Demo")
    print("=" * 40)

    suppliers = load_suppliers(Path(__file__).parent / "suppliers.json")

    with FuzzySearchService.create(log_level="INFO") as service:
        for term in ["johnson", "jonson", "acme suplies", ""]:
            print(f"\nSearch: {term!r}")
            ranked = service.search_ranked(suppliers, term, ["companyName", "email"])
            if not term:
                print(f"   (blank term, {len(service.search(suppliers, term))} records unfiltered)")
                continue
            for result in ranked:
                name = result.item["companyName"]
                print(f"   {result.score:.3f} {result.match_type.value:<8} {service.highlight(name, term)}")

        print(f"\nStats: {json.dumps(service.get_stats(), indent=2)}")


if __name__ == "__main__":
    basic_search_demo()
