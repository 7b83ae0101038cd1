"""
Catalog field normalization shared by create and update.

Rental fields only exist on rental items; advisory pricing (floor_price,
target_cost) only on non-package items. Nothing relates floor_price to
target_cost.
"""

import math
from typing import Any, Dict, Optional, Tuple

from orgnet.domain.entities import PackageCategory
from orgnet.libs.result import Error


def _finite(value: Optional[float]) -> Optional[float]:
    if value is None:
        return None
    value = float(value)
    return value if math.isfinite(value) else None


def _non_negative(value: Optional[float]) -> Optional[float]:
    value = _finite(value)
    return value if value is not None and value >= 0 else None


def normalize_package_fields(
    fields: Dict[str, Any],
) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
    """
    Normalize a complete set of package fields.

    Returns:
        (normalized fields, None) or (None, Error)
    """
    name = (fields.get("name") or "").strip()
    if not name:
        return None, Error("INVALID_NAME", "Name is required.")

    price = _finite(fields.get("price"))
    if price is None or price < 0:
        return None, Error("INVALID_PRICE", "Price must be a non-negative number.")

    category = fields.get("category") or PackageCategory.package
    normalized: Dict[str, Any] = {
        "name": name,
        "description": (fields.get("description") or "").strip() or None,
        "category": category,
        "price": price,
        "floor_price": None,
        "target_cost": None,
        "stock_quantity": None,
        "is_sub_rental": False,
        "replacement_cost": None,
        "buffer_days": 0,
    }

    if category != PackageCategory.package:
        normalized["floor_price"] = _finite(fields.get("floor_price"))
        normalized["target_cost"] = _finite(fields.get("target_cost"))

    if category == PackageCategory.rental:
        stock = fields.get("stock_quantity")
        if stock is not None and stock < 0:
            return None, Error(
                "INVALID_STOCK", "Stock quantity must be zero or more for rentals."
            )
        normalized["stock_quantity"] = stock if stock is not None else 0
        normalized["is_sub_rental"] = fields.get("is_sub_rental") is True
        normalized["replacement_cost"] = _non_negative(fields.get("replacement_cost"))
        buffer_days = _non_negative(fields.get("buffer_days"))
        normalized["buffer_days"] = int(math.floor(buffer_days)) if buffer_days else 0

    return normalized, None
