"""Order table request models."""
from typing import Optional

from kitchenpos.core.schemas import CamelModel


class OrderTableRequest(CamelModel):
    """Order table registration request."""

    name: Optional[str] = None


class NumberOfGuestsRequest(CamelModel):
    """Guest count change request."""

    number_of_guests: int = 0
