"""
Catalog Reference Checker

Cross-checks ids inside an assembled catalog:
  - Offer currencyId   ->  declared currencies
  - Offer categoryId   ->  declared categories
  - Category parentId  ->  declared categories
  - Offer id           ->  unique across offers

Findings are warnings only. The feed is written as-is; aggregators
decide what to do with dangling references.
"""

from __future__ import annotations

from collections import Counter

from ..models import Catalog


def check_references(catalog: Catalog) -> list[str]:
    """Run all reference checks. Returns warning strings, empty list if clean."""
    warnings: list[str] = []

    currency_ids = {currency.id for currency in catalog.currencies}
    category_ids = {category.id for category in catalog.categories}

    for category in catalog.categories:
        if category.parent_id and category.parent_id not in category_ids:
            warnings.append(
                f"category {category.id}: parent {category.parent_id!r} is not declared"
            )

    for offer in catalog.offers:
        if offer.currency_id and offer.currency_id not in currency_ids:
            warnings.append(f"offer {offer.id}: currency {offer.currency_id!r} is not declared")
        if offer.category_id and offer.category_id not in category_ids:
            warnings.append(f"offer {offer.id}: category {offer.category_id!r} is not declared")

    id_counts = Counter(offer.id for offer in catalog.offers)
    for offer_id, count in id_counts.items():
        if count > 1:
            warnings.append(f"offer id {offer_id!r} appears {count} times")

    return warnings
