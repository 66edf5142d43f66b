import os
from dataclasses import dataclass, field
from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .categories import EXPENSE_CATEGORIES, INCOME_CATEGORIES, Taxonomy


@dataclass(frozen=True)
class Settings:
    timezone: tzinfo | None = None
    log_level: str = "INFO"
    taxonomy: Taxonomy = field(default_factory=Taxonomy)

    def now(self) -> datetime:
        return datetime.now(self.timezone)


def _load_timezone(name: str) -> tzinfo | None:
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"unknown timezone: {name}") from exc


def _load_names(env_var: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = os.getenv(env_var, "")
    names = tuple(name.strip() for name in raw.split(",") if name.strip())
    return names or default


def get_settings() -> Settings:
    return Settings(
        timezone=_load_timezone(os.getenv("QUICKADD_TIMEZONE", "").strip()),
        log_level=os.getenv("QUICKADD_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        taxonomy=Taxonomy(
            expense=_load_names("QUICKADD_EXPENSE_CATEGORIES", EXPENSE_CATEGORIES),
            income=_load_names("QUICKADD_INCOME_CATEGORIES", INCOME_CATEGORIES),
        ),
    )
