"""Product database table model."""

from sqlmodel import Field

from src.shopfront.entities.core._base import EntityTable


class ProductTable(EntityTable, table=True):
    """Database persistence model for products."""

    __tablename__ = "product"

    slug: str = Field(unique=True, index=True, nullable=False)
    name: str
    price: float
    description: str
    image_alt: str
    image_url: str
