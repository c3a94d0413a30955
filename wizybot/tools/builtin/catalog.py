"""
Product Catalog Tool - searchProducts.

This module searches the product catalog CSV for products whose title or
description contains the query text (case-insensitive substring match).

Each search streams the whole file in dataset order and returns the first
matches up to the configured limit. The scan runs in the default executor so
the event loop is not blocked by file I/O.

Catalog columns: displayTitle, embeddingText, price, url, imageUrl, productType
"""

import asyncio
import csv
import logging
from pathlib import Path
from typing import Optional, Union

from wizybot.core.config import Settings
from wizybot.core.exceptions import CatalogReadError
from wizybot.models.domain import ProductRecord, ToolDefinition

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 2


# =============================================================================
# Tool Definition
# =============================================================================


SEARCH_PRODUCTS_DEFINITION = ToolDefinition(
    name="searchProducts",
    description="Searches the product catalog for items matching a text query. "
    "Returns relevant products with details including title, description, price, "
    "images, and links.",
    parameters={
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": "Search terms describing what the user wants. Examples: "
                '"smartphone", "wireless headphones", "laptop for gaming", '
                '"birthday gift for mom"',
            },
        },
        "required": ["query"],
        "additionalProperties": False,
    },
)


def to_product_record(row: dict[str, Optional[str]]) -> ProductRecord:
    """Project a catalog row onto a ProductRecord, filling defaults."""
    defaults = ProductRecord()
    return ProductRecord(
        title=row.get("displayTitle") or defaults.title,
        description=row.get("embeddingText") or defaults.description,
        price=row.get("price") or defaults.price,
        url=row.get("url") or defaults.url,
        image_url=row.get("imageUrl") or defaults.image_url,
        category=row.get("productType") or defaults.category,
    )


# =============================================================================
# ProductCatalog
# =============================================================================


class ProductCatalog:
    """
    Read-only product catalog backed by a CSV file.

    Attributes:
        path: Location of the catalog CSV.
        max_results: Number of matches returned per search.

    Example:
        >>> catalog = ProductCatalog("data/products_list.csv")
        >>> products = await catalog.search("phone")
        >>> len(products) <= 2
        True
    """

    def __init__(
        self, path: Union[str, Path], max_results: int = DEFAULT_MAX_RESULTS
    ) -> None:
        self.path = Path(path)
        self.max_results = max_results

    @classmethod
    def from_settings(cls, settings: Settings) -> "ProductCatalog":
        """Build a catalog from application settings."""
        return cls(settings.catalog_path, max_results=settings.catalog_max_results)

    async def search(self, query: str) -> list[ProductRecord]:
        """
        Search the catalog.

        Args:
            query: Free-text search terms.

        Returns:
            Up to max_results matching products, in dataset order. An empty
            list when nothing matches.

        Raises:
            CatalogReadError: If the catalog file cannot be read.
        """
        needle = query.lower().strip()
        loop = asyncio.get_running_loop()
        matches = await loop.run_in_executor(None, self._scan, needle)
        logger.debug(f"Catalog search for {needle!r} matched {len(matches)} products")
        return matches[: self.max_results]

    def _scan(self, needle: str) -> list[ProductRecord]:
        """Stream every row and collect matches (no early exit)."""
        matches: list[ProductRecord] = []
        try:
            with self.path.open(newline="", encoding="utf-8") as f:
                for row in csv.DictReader(f):
                    title = (row.get("displayTitle") or "").lower()
                    description = (row.get("embeddingText") or "").lower()
                    if needle in title or needle in description:
                        matches.append(to_product_record(row))
        except (OSError, csv.Error, UnicodeDecodeError) as e:
            logger.error(f"Error reading product catalog {self.path}: {e}")
            raise CatalogReadError(
                f"Product catalog could not be read: {e}", path=str(self.path)
            ) from e
        return matches
