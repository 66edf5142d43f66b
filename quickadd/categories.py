from dataclasses import dataclass, field
from typing import Iterable

from .models import CategoryType


EXPENSE_CATEGORIES = (
    "Food",
    "Groceries",
    "Dining",
    "Restaurant",
    "Rent",
    "Housing",
    "Utilities",
    "Transportation",
    "Fuel",
    "Gas",
    "Car",
    "Entertainment",
    "Shopping",
    "Clothing",
    "Health",
    "Medical",
    "Insurance",
    "Education",
    "Travel",
    "Subscription",
    "Bills",
    "Maintenance",
    "Gifts",
    "Charity",
    "Electronics",
    "Personal",
    "Household",
    "Phone",
    "Internet",
    "Fitness",
)

INCOME_CATEGORIES = (
    "Salary",
    "Wages",
    "Bonus",
    "Freelance",
    "Investment",
    "Dividend",
    "Interest",
    "Rental",
    "Gift",
    "Refund",
    "Commission",
    "Business",
    "Royalties",
    "Pension",
    "Grant",
    "Allowance",
)

UNCATEGORIZED_EXPENSE = "Uncategorized"
UNCATEGORIZED_INCOME = "Income"

# Second-chance buckets, checked in order when no taxonomy name matched.
EXPENSE_KEYWORD_BUCKETS = (
    (("food", "eat", "restaurant", "lunch", "dinner", "breakfast"), "Food"),
    (("transport", "uber", "taxi", "fare"), "Transportation"),
    (("shop", "buy", "purchase"), "Shopping"),
)

INCOME_KEYWORD_BUCKETS = (
    (("salary", "wage", "pay"), "Salary"),
    (("freelance", "gig"), "Freelance"),
    (("bonus",), "Bonus"),
)


def _ordered_unique(names: Iterable[str]) -> tuple[str, ...]:
    seen = set()
    result = []
    for name in names:
        cleaned = name.strip()
        if not cleaned or cleaned.lower() in seen:
            continue
        seen.add(cleaned.lower())
        result.append(cleaned)
    return tuple(result)


@dataclass(frozen=True)
class Taxonomy:
    """Ordered category names; the first match during inference wins."""

    expense: tuple[str, ...] = EXPENSE_CATEGORIES
    income: tuple[str, ...] = INCOME_CATEGORIES
    expense_buckets: tuple = field(default=EXPENSE_KEYWORD_BUCKETS, repr=False)
    income_buckets: tuple = field(default=INCOME_KEYWORD_BUCKETS, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "expense", _ordered_unique(self.expense))
        object.__setattr__(self, "income", _ordered_unique(self.income))

    def names_for(self, category_type: CategoryType) -> tuple[str, ...]:
        if category_type is CategoryType.INCOME:
            return self.income
        return self.expense

    def buckets_for(self, category_type: CategoryType) -> tuple:
        if category_type is CategoryType.INCOME:
            return self.income_buckets
        return self.expense_buckets

    def fallback_for(self, category_type: CategoryType) -> str:
        if category_type is CategoryType.INCOME:
            return UNCATEGORIZED_INCOME
        return UNCATEGORIZED_EXPENSE

    def to_dict(self) -> dict:
        return {"expense": list(self.expense), "income": list(self.income)}


DEFAULT_TAXONOMY = Taxonomy()
