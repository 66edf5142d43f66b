from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


DEFAULT_DESCRIPTION = "Transaction"


class CategoryType(str, Enum):
    EXPENSE = "EXPENSE"
    INCOME = "INCOME"


@dataclass(frozen=True)
class ParsedTransaction:
    description: str
    amount: Decimal
    category_type: CategoryType
    category_name: str
    date: str

    @property
    def is_low_confidence(self) -> bool:
        return self.amount == 0 or self.description == DEFAULT_DESCRIPTION

    def to_dict(self) -> dict:
        return {
            "description": self.description,
            "amount": float(self.amount),
            "category_type": self.category_type.value,
            "category_name": self.category_name,
            "date": self.date,
            "low_confidence": self.is_low_confidence,
        }


@dataclass(frozen=True)
class NewTransaction:
    description: str
    amount_cents: int
    direction: str
    category_id: str
    date: str
    source: str = "chat"
