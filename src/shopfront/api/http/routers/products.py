"""Product API router."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from src.shopfront.api.http.deps import get_product_service
from src.shopfront.api.http.schemas import MessageResponse, error_responses, json_body
from src.shopfront.core.services import ProductService
from src.shopfront.entities.service.product import Product, ProductCreate

router = APIRouter(tags=["product"])


@router.get("/products", response_model=list[Product], responses=error_responses(500))
def list_products(
    service: ProductService = Depends(get_product_service),
) -> list[Product]:
    """List all products."""
    return service.list_products()


@router.post(
    "/product",
    status_code=201,
    response_model=MessageResponse,
    responses=error_responses(400, 409, 500),
    openapi_extra=json_body(ProductCreate),
)
def create_product(
    payload: Any = Body(default=None),
    service: ProductService = Depends(get_product_service),
) -> MessageResponse:
    """Create a new product."""
    product = service.create_product(payload)
    return MessageResponse(
        message=f"The product {product.name} was created successfully"
    )
