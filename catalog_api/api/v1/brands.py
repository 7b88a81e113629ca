# ==============================================================================
# BRANDS ENDPOINTS - Brand Routes
# ==============================================================================

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Request, Response, status

from catalog_api.api.dependencies import BrandServiceDep
from catalog_api.schemas.base import APIResponse, request_body_schema
from catalog_api.schemas.brand import BRAND_EXAMPLE, BrandPayload, BrandResponse

router = APIRouter(prefix="/brands", tags=["Brands"])


@router.get(
    "",
    response_model=APIResponse[List[BrandResponse]],
    summary="List brands",
    description="Get all brands in id order.",
)
async def list_brands(
    service: BrandServiceDep,
) -> APIResponse[List[BrandResponse]]:
    """Get all brands."""
    brands = await service.get_all()
    return APIResponse.ok(data=brands, message="Brands fetched successfully")


@router.get(
    "/{brand_id}",
    response_model=APIResponse[BrandResponse],
    summary="Get brand",
)
async def get_brand(
    brand_id: str,
    service: BrandServiceDep,
) -> APIResponse[BrandResponse]:
    """Get a brand by ID."""
    brand = await service.get_by_id(brand_id)
    return APIResponse.ok(data=brand, message="Brand retrieved successfully")


@router.post(
    "",
    response_model=APIResponse[BrandResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create brand",
    openapi_extra=request_body_schema(BrandPayload, BRAND_EXAMPLE),
)
async def create_brand(
    request: Request,
    service: BrandServiceDep,
) -> APIResponse[BrandResponse]:
    """Create a new brand."""
    brand = await service.create(await request.body())
    return APIResponse.ok(
        data=brand,
        message="Brand created successfully",
        status_code=status.HTTP_201_CREATED,
    )


@router.put(
    "/{brand_id}",
    response_model=APIResponse[BrandResponse],
    summary="Update brand",
    description="Replace every field of an existing brand.",
    openapi_extra=request_body_schema(BrandPayload, BRAND_EXAMPLE),
)
async def update_brand(
    brand_id: str,
    request: Request,
    service: BrandServiceDep,
) -> APIResponse[BrandResponse]:
    """Update a brand."""
    brand = await service.update(brand_id, await request.body())
    return APIResponse.ok(data=brand, message="Brand updated successfully")


@router.delete(
    "/{brand_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete brand",
)
async def delete_brand(
    brand_id: str,
    service: BrandServiceDep,
) -> Response:
    """Delete a brand. Products referencing it are not removed."""
    await service.delete(brand_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
