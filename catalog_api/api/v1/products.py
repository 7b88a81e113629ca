# ==============================================================================
# PRODUCTS ENDPOINTS - Catalog Item Routes
# ==============================================================================
# Product reads embed category and brand; writes check both references
# ==============================================================================

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Query, Request, Response, status

from catalog_api.api.dependencies import ProductServiceDep
from catalog_api.schemas.base import APIResponse, request_body_schema
from catalog_api.schemas.product import (
    PRODUCT_EXAMPLE,
    ProductPayload,
    ProductResponse,
)

router = APIRouter(prefix="/products", tags=["Products"])


@router.get(
    "",
    response_model=APIResponse[List[ProductResponse]],
    summary="List products",
    description="Get one page of products with their category and brand.",
)
async def list_products(
    service: ProductServiceDep,
    page: Optional[str] = Query(None, description="Page number (default 1)"),
    limit: Optional[str] = Query(None, description="Items per page (default 10)"),
) -> APIResponse[List[ProductResponse]]:
    """Get products with pagination."""
    products = await service.get_page(page=page, limit=limit)
    return APIResponse.ok(data=products, message="Products fetched successfully")


@router.get(
    "/{product_id}",
    response_model=APIResponse[ProductResponse],
    summary="Get product",
)
async def get_product(
    product_id: str,
    service: ProductServiceDep,
) -> APIResponse[ProductResponse]:
    """Get a product by ID."""
    product = await service.get_by_id(product_id)
    return APIResponse.ok(data=product, message="Product fetched successfully")


@router.post(
    "",
    response_model=APIResponse[ProductResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create product",
    description="Create a product referencing an existing category and brand.",
    openapi_extra=request_body_schema(ProductPayload, PRODUCT_EXAMPLE),
)
async def create_product(
    request: Request,
    service: ProductServiceDep,
) -> APIResponse[ProductResponse]:
    """Create a new product."""
    product = await service.create(await request.body())
    return APIResponse.ok(
        data=product,
        message="Product created successfully",
        status_code=status.HTTP_201_CREATED,
    )


@router.put(
    "/{product_id}",
    response_model=APIResponse[ProductResponse],
    summary="Update product",
    description="Replace every field of an existing product.",
    openapi_extra=request_body_schema(ProductPayload, PRODUCT_EXAMPLE),
)
async def update_product(
    product_id: str,
    request: Request,
    service: ProductServiceDep,
) -> APIResponse[ProductResponse]:
    """Update a product."""
    product = await service.update(product_id, await request.body())
    return APIResponse.ok(data=product, message="Product updated successfully")


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete product",
)
async def delete_product(
    product_id: str,
    service: ProductServiceDep,
) -> Response:
    """Delete a product."""
    await service.delete(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
