# ==============================================================================
# ENTITY VALIDATORS - Field Rule Checks
# ==============================================================================
# Pure functions returning the list of violated rules (empty = valid)
# Whether a referenced row exists is checked by the services, not here
# ==============================================================================

from __future__ import annotations

import math
from typing import List, Optional

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from catalog_api.core.constants import DatabaseConstants
from catalog_api.schemas.brand import BrandPayload
from catalog_api.schemas.category import CategoryPayload
from catalog_api.schemas.product import ProductPayload

_url_adapter = TypeAdapter(AnyUrl)


# ==============================================================================
# FIELD RULES
# ==============================================================================

def check_string(
    field: str,
    value: Optional[str],
    min_length: int = DatabaseConstants.NAME_MIN_LENGTH,
    max_length: Optional[int] = DatabaseConstants.NAME_MAX_LENGTH,
) -> List[str]:
    """
    Required string with an optional character-length range.

    Pass ``min_length=1, max_length=None`` for plain non-empty text.
    """
    if not value:
        return [f"{field} is required"]
    length = len(value)
    if length < min_length or (max_length is not None and length > max_length):
        if max_length is None:
            return [f"{field} must be at least {min_length} characters"]
        return [f"{field} must be between {min_length} and {max_length} characters"]
    return []


def check_price(field: str, value: Optional[float]) -> List[str]:
    """Required finite number strictly greater than zero."""
    if value is None:
        return [f"{field} is required"]
    if not math.isfinite(value):
        return [f"{field} must be a finite number"]
    if value <= 0:
        return [f"{field} must be greater than 0"]
    return []


def check_url(field: str, value: Optional[str]) -> List[str]:
    """Required absolute URL with a scheme and a host."""
    if not value:
        return [f"{field} is required"]
    try:
        url = _url_adapter.validate_python(value)
    except PydanticValidationError:
        return [f"{field} must be a valid URL"]
    if not url.host:
        return [f"{field} must be a valid URL"]
    return []


def check_reference(field: str, value: Optional[int]) -> List[str]:
    """Required foreign key: present, non-zero and within the id column range."""
    if not value:
        return [f"{field} is required"]
    if value < 0:
        return [f"{field} must be a positive integer"]
    if value > DatabaseConstants.MAX_ID:
        return [f"{field} must be at most {DatabaseConstants.MAX_ID}"]
    return []


# ==============================================================================
# ENTITY VALIDATORS
# ==============================================================================

def validate_brand(payload: BrandPayload) -> List[str]:
    """Rules for a brand body."""
    return [
        *check_string("name", payload.name),
        *check_url("cover_image", payload.cover_image),
    ]


def validate_category(payload: CategoryPayload) -> List[str]:
    """Rules for a category body."""
    return [
        *check_string("title", payload.title),
        *check_url("cover_image", payload.cover_image),
    ]


def validate_product(payload: ProductPayload) -> List[str]:
    """
    Rules for a product body.

    Only the shape of ``category_id`` and ``brand_id`` is checked; the
    product service confirms that both rows exist.
    """
    return [
        *check_string("name", payload.name),
        *check_string("description", payload.description, min_length=1, max_length=None),
        *check_price("price", payload.price),
        *check_url("cover_image", payload.cover_image),
        *check_reference("category_id", payload.category_id),
        *check_reference("brand_id", payload.brand_id),
    ]
