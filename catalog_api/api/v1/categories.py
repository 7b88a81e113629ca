# ==============================================================================
# CATEGORIES ENDPOINTS - Category Routes
# ==============================================================================

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Request, Response, status

from catalog_api.api.dependencies import CategoryServiceDep
from catalog_api.schemas.base import APIResponse, request_body_schema
from catalog_api.schemas.category import (
    CATEGORY_EXAMPLE,
    CategoryPayload,
    CategoryResponse,
)

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get(
    "",
    response_model=APIResponse[List[CategoryResponse]],
    summary="List categories",
    description="Get all categories in id order.",
)
async def list_categories(
    service: CategoryServiceDep,
) -> APIResponse[List[CategoryResponse]]:
    """Get all categories."""
    categories = await service.get_all()
    return APIResponse.ok(data=categories, message="Categories fetched successfully")


@router.get(
    "/{category_id}",
    response_model=APIResponse[CategoryResponse],
    summary="Get category",
)
async def get_category(
    category_id: str,
    service: CategoryServiceDep,
) -> APIResponse[CategoryResponse]:
    """Get a category by ID."""
    category = await service.get_by_id(category_id)
    return APIResponse.ok(data=category, message="Category retrieved successfully")


@router.post(
    "",
    response_model=APIResponse[CategoryResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create category",
    openapi_extra=request_body_schema(CategoryPayload, CATEGORY_EXAMPLE),
)
async def create_category(
    request: Request,
    service: CategoryServiceDep,
) -> APIResponse[CategoryResponse]:
    """Create a new category."""
    category = await service.create(await request.body())
    return APIResponse.ok(
        data=category,
        message="Category created successfully",
        status_code=status.HTTP_201_CREATED,
    )


@router.put(
    "/{category_id}",
    response_model=APIResponse[CategoryResponse],
    summary="Update category",
    description="Replace every field of an existing category.",
    openapi_extra=request_body_schema(CategoryPayload, CATEGORY_EXAMPLE),
)
async def update_category(
    category_id: str,
    request: Request,
    service: CategoryServiceDep,
) -> APIResponse[CategoryResponse]:
    """Update a category."""
    category = await service.update(category_id, await request.body())
    return APIResponse.ok(data=category, message="Category updated successfully")


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete category",
)
async def delete_category(
    category_id: str,
    service: CategoryServiceDep,
) -> Response:
    """Delete a category. Products referencing it are not removed."""
    await service.delete(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
