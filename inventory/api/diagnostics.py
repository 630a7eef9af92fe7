"""Diagnostic and cleanup routes used by test suites against a live server."""

import logging

from fastapi import APIRouter, Depends, Path

from inventory.api.deps import get_repository
from inventory.repository import ProductRepository
from inventory.schemas import ErrorResponse, MessageResponse, ProductResponse
from inventory.security import require_admin_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/test", tags=["diagnostics"])


@router.get(
    "/check-db/{product_id}",
    response_model=ProductResponse,
    responses={404: {"model": ErrorResponse}},
)
async def check_db(
    product_id: int = Path(..., description="Product ID"),
    repository: ProductRepository = Depends(get_repository),
):
    """Read a product row straight from the database."""
    row = await repository.get_by_id(product_id)
    return ProductResponse.model_validate(row)


@router.delete(
    "/clear-database",
    response_model=MessageResponse,
    responses={403: {"model": ErrorResponse}},
    dependencies=[Depends(require_admin_token)],
)
async def clear_database(repository: ProductRepository = Depends(get_repository)):
    """Delete every product. Requires the ``admin-token`` header."""
    await repository.clear()
    logger.warning("Products table cleared")
    return MessageResponse(message="Database cleared successfully")
