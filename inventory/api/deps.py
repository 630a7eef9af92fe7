"""FastAPI dependencies resolving objects built at startup."""

from fastapi import Request

from inventory.config import Settings
from inventory.repository import ProductRepository


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_repository(request: Request) -> ProductRepository:
    return request.app.state.repository
