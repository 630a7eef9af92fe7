import logging

from fastapi import APIRouter, Depends, Path

from inventory.api.deps import get_repository
from inventory.exceptions import NotFoundError
from inventory.repository import ProductRepository
from inventory.schemas import ErrorResponse, MessageResponse, ProductCreatedResponse, ProductPayload

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/products",
    tags=["products"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


@router.post("", response_model=ProductCreatedResponse, status_code=201)
async def create_product(
    product: ProductPayload,
    repository: ProductRepository = Depends(get_repository),
):
    """Create a new product."""
    product_id = await repository.create(product.name, product.price, product.quantity)
    logger.info("Created product %s", product_id)
    return ProductCreatedResponse(id=product_id, message="Product saved successfully")


@router.put("/{product_id}", response_model=MessageResponse, responses={404: {"model": ErrorResponse}})
async def update_product(
    product: ProductPayload,
    product_id: int = Path(..., description="Product ID"),
    repository: ProductRepository = Depends(get_repository),
):
    """Replace name, price and quantity of an existing product."""
    affected = await repository.update(product_id, product.name, product.price, product.quantity)
    if affected == 0:
        raise NotFoundError("Product not found for update")
    logger.info("Updated product %s", product_id)
    return MessageResponse(message="Product updated successfully")


@router.delete("/{product_id}", response_model=MessageResponse, responses={404: {"model": ErrorResponse}})
async def delete_product(
    product_id: int = Path(..., description="Product ID"),
    repository: ProductRepository = Depends(get_repository),
):
    """Delete a single product."""
    affected = await repository.delete(product_id)
    if affected == 0:
        raise NotFoundError("Product not found for deletion")
    logger.info("Deleted product %s", product_id)
    return MessageResponse(message=f"Product {product_id} removed successfully")
