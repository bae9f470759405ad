"""Entity: Product."""

from typing import Any

from pydantic import BaseModel, Field

from src.shopfront.entities.core._base import Entity


class Product(Entity):
    """Product entity representing a catalogue item."""

    slug: str = Field(description="Unique URL-safe identifier")
    name: str
    price: float
    description: str
    image_alt: str
    image_url: str

    def __eq__(self, other: Any) -> bool:
        """Compare products by business attributes, ignoring timestamps."""
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.slug == other.slug
            and self.name == other.name
            and self.price == other.price
            and self.description == other.description
            and self.image_alt == other.image_alt
            and self.image_url == other.image_url
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((self.id, self.slug))


class ProductCreate(BaseModel):
    """Body of `POST /product`, parsed once every field is present."""

    slug: str
    name: str
    price: float
    description: str
    image_alt: str
    image_url: str
