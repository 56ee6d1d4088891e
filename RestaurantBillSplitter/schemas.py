"""
Schemas Module

Pydantic models that validate bill files before they reach the splitter.

Bill file shape (JSON):
    {
        "date": "2024-03-21",
        "location": "Cafe",
        "tipPercentage": 10,
        "items": [
            {"name": "Soup", "price": 20, "isShared": true},
            {"name": "Steak", "price": 50, "isShared": false, "person": "Alice"}
        ],
        "persons": ["Alice", "Bob"]        (optional)
    }

Functions:
    parse_bill: Validate a raw dict and convert it to a BillInput.
"""

from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from bill import BillInput, PersonalItem, SharedItem
from exceptions import BillValidationError


# =============================================================================
# Item Models
# =============================================================================

class SharedItemSchema(BaseModel):
    """A bill line split between everyone."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Item description")
    price: float = Field(..., ge=0, strict=True, description="Item price (number, >= 0)")
    is_shared: Literal[True] = Field(..., alias="isShared")

    def to_item(self) -> SharedItem:
        return SharedItem(name=self.name, price=self.price)


class PersonalItemSchema(BaseModel):
    """A bill line charged to one person."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Item description")
    price: float = Field(..., ge=0, strict=True, description="Item price (number, >= 0)")
    is_shared: Literal[False] = Field(..., alias="isShared")
    person: str = Field(..., min_length=1, description="Who ordered the item")

    def to_item(self) -> PersonalItem:
        return PersonalItem(name=self.name, price=self.price, person=self.person)


# =============================================================================
# Bill Model
# =============================================================================

class BillInputSchema(BaseModel):
    """A whole bill file."""
    model_config = ConfigDict(populate_by_name=True)

    date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$", description="Bill date (YYYY-MM-DD)")
    location: str = Field(..., description="Where the meal took place")
    tip_percentage: float = Field(..., ge=0, strict=True, alias="tipPercentage", description="Tip in percent")
    items: list[Union[SharedItemSchema, PersonalItemSchema]] = Field(..., description="Bill lines")
    persons: Optional[list[str]] = Field(None, description="Optional explicit roster")

    def to_bill_input(self) -> BillInput:
        """Convert the validated schema into the splitter's BillInput."""
        return BillInput(
            date=self.date,
            location=self.location,
            tip_percentage=self.tip_percentage,
            items=[item.to_item() for item in self.items],
            persons=list(self.persons) if self.persons is not None else None
        )


def parse_bill(data: dict, source: Optional[str] = None) -> BillInput:
    """
    Validate a raw bill dict and convert it to a BillInput.

    Args:
        data: Decoded JSON object.
        source: Where the data came from, used in error messages.

    Returns:
        BillInput: Ready for split_bill.

    Raises:
        BillValidationError: If the data does not match the bill shape.
    """
    try:
        schema = BillInputSchema.model_validate(data)
    except ValidationError as e:
        raise BillValidationError(source, e.errors(include_url=False)) from e
    return schema.to_bill_input()


# =============================================================================
# Batch Result Models
# =============================================================================

class FileResult(BaseModel):
    """Outcome of processing one bill file."""

    file: str = Field(..., description="Input file name")
    output: Optional[str] = Field(None, description="Output path (None on failure)")
    success: bool
    error: Optional[str] = Field(None, description="Error message on failure")


class BatchResult(BaseModel):
    """Outcome of a batch run."""

    results: list[FileResult] = Field(default_factory=list)

    @property
    def success_count(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def failure_count(self) -> int:
        return sum(1 for r in self.results if not r.success)

    @property
    def errors(self) -> list[str]:
        return [f"{r.file}: {r.error}" for r in self.results if not r.success]
