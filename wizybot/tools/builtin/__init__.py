"""
Built-in Tools Package.

- catalog: searchProducts over the product catalog CSV
- currency: convertCurrencies via Open Exchange Rates
"""

from wizybot.tools.builtin.catalog import SEARCH_PRODUCTS_DEFINITION, ProductCatalog
from wizybot.tools.builtin.currency import (
    CONVERT_CURRENCIES_DEFINITION,
    CurrencyConverter,
)

__all__ = [
    "SEARCH_PRODUCTS_DEFINITION",
    "ProductCatalog",
    "CONVERT_CURRENCIES_DEFINITION",
    "CurrencyConverter",
]
