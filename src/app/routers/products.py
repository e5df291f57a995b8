from uuid import UUID

from fastapi import APIRouter, Query, status

from app.dependencies import ProductServiceDep
from app.models.requests import (
    CreateProductRequest,
    ProductResponse,
    UpdateProductRequest,
    UpdateStockRequest,
)

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a new product",
)
def create_product(
    request: CreateProductRequest, service: ProductServiceDep
) -> ProductResponse:
    return ProductResponse.from_product(service.create_product(request))


@router.get("", summary="Get all products")
def get_all_products(service: ProductServiceDep) -> list[ProductResponse]:
    return [ProductResponse.from_product(p) for p in service.get_all_products()]


@router.get("/available", summary="Get all available products")
def get_available_products(
    service: ProductServiceDep,
) -> list[ProductResponse]:
    return [ProductResponse.from_product(p) for p in service.get_available_products()]


@router.get("/search", summary="Search products by name")
def search_products(
    service: ProductServiceDep, name: str = Query(..., min_length=1)
) -> list[ProductResponse]:
    return [
        ProductResponse.from_product(p) for p in service.search_products_by_name(name)
    ]


@router.get("/{product_id}", summary="Get product by ID")
def get_product_by_id(
    product_id: UUID, service: ProductServiceDep
) -> ProductResponse:
    return ProductResponse.from_product(service.get_product_by_id(product_id))


@router.put("/{product_id}", summary="Update product")
def update_product(
    product_id: UUID, request: UpdateProductRequest, service: ProductServiceDep
) -> ProductResponse:
    return ProductResponse.from_product(service.update_product(product_id, request))


@router.patch("/{product_id}/stock", summary="Update product stock")
def update_stock(
    product_id: UUID, request: UpdateStockRequest, service: ProductServiceDep
) -> ProductResponse:
    return ProductResponse.from_product(
        service.update_stock(product_id, request.quantity)
    )


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete product",
)
def delete_product(product_id: UUID, service: ProductServiceDep) -> None:
    service.delete_product(product_id)
