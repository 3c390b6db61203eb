"""Base pydantic model for request and response bodies."""
from decimal import Decimal
from typing import Annotated, Union

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel


def money_to_number(value: Decimal) -> Union[int, float]:
    """Render a money amount as a JSON number. Whole amounts stay integers."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)


# Prices go out as JSON numbers rather than pydantic's default decimal strings
Money = Annotated[Decimal, PlainSerializer(money_to_number, when_used="json")]


class CamelModel(BaseModel):
    """Model whose JSON keys are camelCase while attributes stay snake_case."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
