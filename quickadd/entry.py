import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from .categories import DEFAULT_TAXONOMY, Taxonomy
from .logic import parse_amount_to_cents, validate_direction
from .models import CategoryType, NewTransaction, ParsedTransaction
from .parser import parse_transaction_text


logger = logging.getLogger(__name__)


class CategoryStore(Protocol):
    def get_or_create(self, name: str, category_type: CategoryType) -> str:
        ...


class TransactionStore(Protocol):
    def add(self, txn: NewTransaction) -> str:
        ...


@dataclass(frozen=True)
class RecordedTransaction:
    transaction_id: str
    category_id: str
    parsed: ParsedTransaction


def record_transaction_text(
    text: str,
    now: datetime,
    categories: CategoryStore,
    transactions: TransactionStore,
    *,
    taxonomy: Taxonomy = DEFAULT_TAXONOMY,
) -> RecordedTransaction:
    parsed = parse_transaction_text(text, now, taxonomy)
    if parsed.amount == 0:
        logger.warning("no amount found in %r", text)
        raise ValueError("amount required")

    amount_cents = parse_amount_to_cents(parsed.amount)
    direction = validate_direction(parsed.category_type)

    category_id = categories.get_or_create(
        parsed.category_name, parsed.category_type
    )
    txn = NewTransaction(
        description=parsed.description,
        amount_cents=amount_cents,
        direction=direction,
        category_id=category_id,
        date=parsed.date,
    )
    transaction_id = transactions.add(txn)
    logger.info(
        "recorded %s %r (%d cents) in %s as %s",
        direction,
        txn.description,
        amount_cents,
        parsed.category_name,
        transaction_id,
    )
    return RecordedTransaction(
        transaction_id=transaction_id, category_id=category_id, parsed=parsed
    )
