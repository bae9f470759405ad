"""Product catalogue: listing and creation."""

from collections.abc import Mapping
from typing import Any

from loguru import logger
from sqlmodel import Session

from src.shopfront.core.services.database.db_utils import persistence_errors
from src.shopfront.core.validation import PRODUCT_CREATE_RULES, parse_payload
from src.shopfront.entities.service.product import (
    Product,
    ProductCreate,
    ProductRepository,
)


class ProductService:
    def __init__(self, session: Session):
        self._session = session
        self._repository = ProductRepository(session)

    def list_products(self) -> list[Product]:
        with persistence_errors(self._session):
            return self._repository.list_all()

    def create_product(self, payload: Mapping[str, Any] | None) -> Product:
        data = parse_payload(payload, PRODUCT_CREATE_RULES, ProductCreate)

        with persistence_errors(
            self._session, f"A product with slug {data.slug} already exists"
        ):
            product = self._repository.create(data)
            self._session.commit()

        logger.info("Created product {} ({})", product.id, product.slug)
        return product
