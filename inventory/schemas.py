from decimal import Decimal
from pydantic import BaseModel, Field, field_validator
from typing import List

MIN_NAME_LENGTH = 3

# Limits of the products columns: price DECIMAL(10,2), quantity INT
PRICE_DECIMAL_PLACES = 2
MAX_PRICE = 99999999.99
MAX_QUANTITY = 2147483647


# Product Schemas
class ProductPayload(BaseModel):
    """Body of POST /products and PUT /products/{id}."""

    name: str = Field(..., max_length=255, strict=True, description="Product name")
    price: float = Field(
        ..., gt=0, le=MAX_PRICE, strict=True, allow_inf_nan=False, description="Unit price"
    )
    quantity: int = Field(..., ge=0, le=MAX_QUANTITY, strict=True, description="Units in stock")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        # Whitespace does not count towards the minimum length
        significant = v.strip()
        if not significant:
            raise ValueError("name cannot be blank")
        if len(significant) < MIN_NAME_LENGTH:
            raise ValueError(f"name must have at least {MIN_NAME_LENGTH} characters")
        return v

    @field_validator('price')
    @classmethod
    def validate_price_scale(cls, v):
        # repr of a float is its shortest round-tripping decimal form
        exponent = Decimal(repr(v)).as_tuple().exponent
        if exponent < -PRICE_DECIMAL_PLACES:
            raise ValueError(f"price must have at most {PRICE_DECIMAL_PLACES} decimal places")
        return v


class ProductResponse(BaseModel):
    id: int
    name: str
    price: float
    quantity: int

    class Config:
        from_attributes = True


class ProductCreatedResponse(BaseModel):
    id: int
    message: str


class MessageResponse(BaseModel):
    message: str


# Error Schemas
class FieldError(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    error: str
    details: List[FieldError] = []


class HealthResponse(BaseModel):
    status: str
