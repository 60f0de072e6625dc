"""Pydantic DTOs (Data Transfer Objects) for the Contact feature."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field


class ContactDto(BaseModel):
    """Wire-facing contact record used for both input and output.

    Business fields are optional at the binding level. Missing
    values are reported by the contact validator, not by request parsing.
    """

    id: int | None = Field(None, description="Assigned by the store; ignored on create")
    name: str = Field("", examples=["Jane Doe"])
    birth_date: date | None = Field(None, examples=["1990-05-17"])
    is_married: bool = Field(False, examples=[True])
    phone_number: str = Field("", examples=["+380677777777"])
    salary: Decimal | None = Field(None, examples=["777.77"])

    model_config = {"from_attributes": True}


class ContactFieldUpdate(BaseModel):
    """Payload for updating a single contact field from its text form."""

    value: str = Field(..., examples=["5555.55"])


class ContactPageResponse(BaseModel):
    """One page of contacts returned to the client."""

    items: list[ContactDto]
    total_count: int
    page_number: int
    page_size: int


class FieldViolationSchema(BaseModel):
    """A single validation failure: offending field and message."""

    field: str
    message: str


class ErrorResponse(BaseModel):
    """Generic error body."""

    status: str = "error"
    message: str
