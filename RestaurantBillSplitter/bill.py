"""
Bill Module

This module defines the records that flow through the bill splitter.

Data Model:
    BillItem - one line of the bill, either:
        - SharedItem: name, price (split evenly across all participants)
        - PersonalItem: name, price, person (charged to one participant)

    BillInput:
        - date: string (YYYY-MM-DD)
        - location: string
        - tip_percentage: number (15 means 15%)
        - items: list of BillItem
        - persons: list of names or None (roster override)

    PersonItem:
        - name: string
        - amount: float (rounded to the nearest 0.1)

    BillOutput:
        - date: string (display format, e.g. 2024年3月21日)
        - location: string
        - sub_total, tip, total_amount: float
        - items: list of PersonItem

Serialized keys are camelCase (subTotal, totalAmount, tipPercentage,
isShared) to match the bill files on disk.
"""

from typing import Optional, Union


class SharedItem:
    """
    A bill line shared by everyone on the roster.

    Attributes:
        name (str): Item description.
        price (float): Item price.
    """

    def __init__(self, name: str, price: float):
        self.name = name
        self.price = price

    def to_dict(self) -> dict:
        return {"name": self.name, "price": self.price, "isShared": True}

    def __repr__(self) -> str:
        return f"SharedItem(name='{self.name}', price={self.price})"


class PersonalItem:
    """
    A bill line charged entirely to one person.

    Attributes:
        name (str): Item description.
        price (float): Item price.
        person (str): Name of the participant who owes it.
    """

    def __init__(self, name: str, price: float, person: str):
        self.name = name
        self.price = price
        self.person = person

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "price": self.price,
            "isShared": False,
            "person": self.person
        }

    def __repr__(self) -> str:
        return f"PersonalItem(name='{self.name}', price={self.price}, person='{self.person}')"


BillItem = Union[SharedItem, PersonalItem]


class BillInput:
    """
    Everything needed to split one bill.

    Attributes:
        date (str): Bill date (YYYY-MM-DD).
        location (str): Where the meal took place.
        tip_percentage (float): Tip in percentage points.
        items (list[BillItem]): Bill lines in order.
        persons (list[str] | None): Explicit roster; inferred from items when empty.
    """

    def __init__(
        self,
        date: str,
        location: str,
        tip_percentage: float,
        items: list[BillItem],
        persons: Optional[list[str]] = None
    ):
        self.date = date
        self.location = location
        self.tip_percentage = tip_percentage
        self.items = items
        self.persons = persons

    def to_dict(self) -> dict:
        data = {
            "date": self.date,
            "location": self.location,
            "tipPercentage": self.tip_percentage,
            "items": [item.to_dict() for item in self.items]
        }
        if self.persons is not None:
            data["persons"] = list(self.persons)
        return data

    def __repr__(self) -> str:
        return f"BillInput(date='{self.date}', location='{self.location}', items={len(self.items)})"


class PersonItem:
    """
    Amount owed by one participant.

    Attributes:
        name (str): Participant name.
        amount (float): Amount owed, tip included.
    """

    def __init__(self, name: str, amount: float):
        self.name = name
        self.amount = amount

    def to_dict(self) -> dict:
        return {"name": self.name, "amount": self.amount}

    def __eq__(self, other) -> bool:
        if not isinstance(other, PersonItem):
            return NotImplemented
        return self.name == other.name and self.amount == other.amount

    def __repr__(self) -> str:
        return f"PersonItem(name='{self.name}', amount={self.amount})"


class BillOutput:
    """
    Result of splitting a bill.

    Attributes:
        date (str): Display date.
        location (str): Where the meal took place.
        sub_total (float): Sum of all item prices.
        tip (float): Tip on the subtotal, rounded to the nearest 0.1.
        total_amount (float): sub_total + tip.
        items (list[PersonItem]): Per-person amounts in roster order.
    """

    def __init__(
        self,
        date: str,
        location: str,
        sub_total: float,
        tip: float,
        total_amount: float,
        items: list[PersonItem]
    ):
        self.date = date
        self.location = location
        self.sub_total = sub_total
        self.tip = tip
        self.total_amount = total_amount
        self.items = items

    def to_dict(self) -> dict:
        """Convert the output to the JSON shape written to disk."""
        return {
            "date": self.date,
            "location": self.location,
            "subTotal": self.sub_total,
            "tip": self.tip,
            "totalAmount": self.total_amount,
            "items": [item.to_dict() for item in self.items]
        }

    def __repr__(self) -> str:
        return (
            f"BillOutput(date='{self.date}', location='{self.location}', "
            f"total={self.total_amount}, persons={len(self.items)})"
        )
