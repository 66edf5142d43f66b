from datetime import datetime
from typing import Callable

from fastapi import Depends, FastAPI, Form, HTTPException

from .logging_config import setup_logging
from .parser import parse_transaction_text
from .settings import get_settings


settings = get_settings()
setup_logging(settings)

app = FastAPI(title="quickadd")


def get_clock() -> Callable[[], datetime]:
    return settings.now


@app.get("/health")
def health(clock: Callable[[], datetime] = Depends(get_clock)):
    return {"status": "healthy", "timestamp": clock().isoformat()}


@app.get("/categories")
def list_categories():
    return settings.taxonomy.to_dict()


@app.post("/transactions/parse")
def parse_transaction(
    text: str = Form(default=""),
    clock: Callable[[], datetime] = Depends(get_clock),
):
    if not text.strip():
        raise HTTPException(status_code=400, detail="text required")
    parsed = parse_transaction_text(text, clock(), settings.taxonomy)
    return parsed.to_dict()
