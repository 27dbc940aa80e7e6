"""Wine stock record model."""

import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WineRecord(BaseModel):
    """A stock-keeping unit for one wine product.

    Records are immutable; quantity changes are applied with
    ``with_quantity`` which returns a new record.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), min_length=1)
    name: str
    country_code: str = Field(..., min_length=2, max_length=2)
    vintage: int
    price: float = Field(default=0.0, ge=0)
    quantity: int = Field(default=0, ge=0)

    @field_validator("country_code")
    @classmethod
    def normalize_country_code(cls, v: str) -> str:
        """Store country codes upper-cased (e.g. 'fr' -> 'FR')."""
        return v.upper()

    def with_quantity(self, quantity: int) -> "WineRecord":
        """Return a copy of this record with a new quantity."""
        return self.model_copy(update={"quantity": quantity})

    def __str__(self) -> str:
        return f"{self.name} {self.vintage} ({self.country_code}) [{self.id}] qty={self.quantity}"
