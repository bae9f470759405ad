"""Data-access layer for products."""

from sqlmodel import Session, select

from src.shopfront.entities.service.product.entity import Product, ProductCreate
from src.shopfront.entities.service.product.table import ProductTable


class ProductRepository:
    """Data-access layer for products."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[Product]:
        statement = select(ProductTable).order_by(ProductTable.id)
        rows = self._session.exec(statement).all()
        return [Product.model_validate(row) for row in rows]

    def create(self, data: ProductCreate) -> Product:
        row = ProductTable(**data.model_dump())
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Product.model_validate(row)
