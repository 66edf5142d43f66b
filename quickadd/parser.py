import logging
import re
from datetime import date as dt_date, datetime, timedelta
from decimal import Decimal

from dateutil.relativedelta import relativedelta

from .categories import DEFAULT_TAXONOMY, Taxonomy
from .models import DEFAULT_DESCRIPTION, CategoryType, ParsedTransaction


logger = logging.getLogger(__name__)

INCOME_KEYWORDS = ("earned", "received", "income")

# Grouped thousands ("1,000,000") are tried first and must not be followed by
# another digit, so "12,5000" falls through to the single-separator form.
AMOUNT_PATTERN = re.compile(
    r"[₦$]?\s*(\d{1,3}(?:,\d{3})+(?!\d)(?:\.\d+)?|\d+(?:[,.]\d+)?)"
)

ON_PATTERN = re.compile(r"\bon\s")
AS_SEPARATOR = " as "
DATE_TOKEN_PATTERN = re.compile(r"\b(\d{4})-(\d{2})-(\d{2})\b")

STOP_WORDS = frozenset(
    {"a", "an", "the", "as", "for", "on", "to", "at", "in", "my", "your", "their"}
)
WORD_PUNCTUATION = ".,!?()[]{}\"'"

DESCRIPTION_OVERRIDES = (
    (("salary", "wage", "pay"), "Salary"),
    (("food", "lunch", "dinner", "breakfast"), "Food"),
    (("transport", "uber", "taxi", "fare"), "Transport"),
)

# Checked in this order; the first keyword present wins.
DATE_KEYWORDS = (
    ("yesterday", timedelta(days=1)),
    ("today", timedelta(0)),
    ("last week", timedelta(days=7)),
    ("last month", relativedelta(months=1)),
)


def classify(text: str) -> CategoryType:
    lowered = text.lower()
    if any(keyword in lowered for keyword in INCOME_KEYWORDS):
        return CategoryType.INCOME
    return CategoryType.EXPENSE


def extract_amount(text: str) -> tuple[Decimal, re.Match | None]:
    match = AMOUNT_PATTERN.search(text)
    if match is None:
        return Decimal("0"), None
    return Decimal(match.group(1).replace(",", "")), match


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def _first_meaningful_word(fragment: str) -> str | None:
    for word in fragment.split():
        cleaned = word.strip(WORD_PUNCTUATION)
        if len(cleaned) <= 1 or cleaned.lower() in STOP_WORDS:
            continue
        if DATE_TOKEN_PATTERN.fullmatch(cleaned):
            continue
        return _capitalize(cleaned)
    return None


def _description_from_gift(text: str, amount_match: re.Match | None) -> str | None:
    if "gift" in text.lower():
        return "Gift"
    return None


def _description_after_on(text: str, amount_match: re.Match | None) -> str | None:
    lowered = text.lower()
    match = ON_PATTERN.search(lowered)
    if match is None:
        return None
    return _first_meaningful_word(lowered[match.end():])


def _description_after_amount(
    text: str, amount_match: re.Match | None
) -> str | None:
    if amount_match is None:
        return None
    remainder = text[amount_match.end():]
    separator_at = remainder.lower().find(AS_SEPARATOR)
    if separator_at >= 0:
        remainder = remainder[separator_at + len(AS_SEPARATOR):]
    return _first_meaningful_word(remainder)


DESCRIPTION_STRATEGIES = (
    _description_from_gift,
    _description_after_on,
    _description_after_amount,
)


def extract_description(text: str, amount_match: re.Match | None = None) -> str:
    description = None
    for strategy in DESCRIPTION_STRATEGIES:
        description = strategy(text, amount_match)
        if description:
            break

    lowered = text.lower()
    for keywords, label in DESCRIPTION_OVERRIDES:
        if any(keyword in lowered for keyword in keywords):
            description = label
            break

    return _capitalize(description) if description else DEFAULT_DESCRIPTION


def infer_category(
    text: str,
    description: str,
    category_type: CategoryType,
    taxonomy: Taxonomy = DEFAULT_TAXONOMY,
) -> str:
    lowered = text.lower()
    description_key = description.lower()
    for name in taxonomy.names_for(category_type):
        key = name.lower()
        if key in lowered or key == description_key:
            return name

    for keywords, name in taxonomy.buckets_for(category_type):
        if any(keyword in lowered for keyword in keywords):
            return name

    return taxonomy.fallback_for(category_type)


def _explicit_date(text: str) -> dt_date | None:
    for match in DATE_TOKEN_PATTERN.finditer(text):
        year, month, day = (int(part) for part in match.groups())
        try:
            return dt_date(year, month, day)
        except ValueError:
            continue
    return None


def resolve_date(text: str, now: datetime) -> datetime:
    start_of_day = now.replace(hour=0, minute=0, second=0, microsecond=0)
    lowered = text.lower()
    for keyword, offset in DATE_KEYWORDS:
        if keyword in lowered:
            logger.debug("date keyword %r matched", keyword)
            return start_of_day - offset

    explicit = _explicit_date(lowered)
    if explicit is not None:
        logger.debug("explicit date %s matched", explicit.isoformat())
        return start_of_day.replace(
            year=explicit.year, month=explicit.month, day=explicit.day
        )
    return start_of_day


def parse_transaction_text(
    text: str, now: datetime, taxonomy: Taxonomy = DEFAULT_TAXONOMY
) -> ParsedTransaction:
    """Never raises; unparsed fields fall back to their defaults."""
    if not isinstance(text, str):
        text = "" if text is None else str(text)

    category_type = classify(text)
    amount, amount_match = extract_amount(text)
    description = extract_description(text, amount_match)
    category_name = infer_category(text, description, category_type, taxonomy)
    resolved = resolve_date(text, now)

    parsed = ParsedTransaction(
        description=description,
        amount=amount,
        category_type=category_type,
        category_name=category_name,
        date=resolved.isoformat(),
    )
    logger.debug("parsed %r -> %s", text, parsed)
    return parsed
