"""Pydantic schemas for Event domain.

Events travel over the wire with camelCase keys (``eventName``,
``totalCost``...). snake_case keys are accepted on input as well.
"""

from typing import Annotated, Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

STRING_FIELDS = (
    "id",
    "event_name",
    "customer_name",
    "phone",
    "address",
    "data_type",
    "created_by",
    "status",
    "venue",
    "date_time",
    "created_at",
)
MONEY_FIELDS = ("paid", "balance", "total_cost")

# Whole amounts that fit a signed 64-bit column. Strings and booleans are rejected.
Money = Annotated[int, Field(strict=True, ge=-(2**63), le=2**63 - 1)]


class EventBase(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = ""
    event_name: str = ""
    customer_name: str = ""
    phone: str = ""
    address: str = ""
    data_type: str = ""
    created_by: str = ""
    paid: Money = 0
    balance: Money = 0
    total_cost: Money = 0
    status: str = ""
    venue: str = ""
    date_time: str = ""
    created_at: str = ""

    @field_validator(*STRING_FIELDS, mode="before")
    @classmethod
    def null_string_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator(*MONEY_FIELDS, mode="before")
    @classmethod
    def null_money_to_zero(cls, value: Any) -> Any:
        return 0 if value is None else value


class EventPayload(EventBase):
    """Body of create/update requests. ``balance`` is ignored by the server."""


class EventRead(EventBase):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    def to_response(self) -> dict:
        return self.model_dump(by_alias=True)


class EventFilter(BaseModel):
    page: int = 1
    page_size: int = 50
    status: Optional[str] = None
