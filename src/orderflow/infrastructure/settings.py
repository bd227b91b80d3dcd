"""Runtime settings read from the environment (and an optional .env file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from orderflow.domain.model.order import OrderStatus

# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:

    data_dir: Path = DEFAULT_DATA_DIR
    valid_statuses: frozenset[OrderStatus] = frozenset(OrderStatus)
    log_level: str = "WARNING"


def parse_statuses(raw: str) -> frozenset[OrderStatus]:
    """Parse 'PENDING,PROCESSING,...' into a set of known statuses."""
    statuses: set[OrderStatus] = set()
    for name in raw.split(","):
        name = name.strip().upper()
        if not name:
            continue
        try:
            statuses.add(OrderStatus(name))
        except ValueError:
            raise ValueError(f"Unknown order status in configuration: '{name}'") from None
    if not statuses:
        raise ValueError("At least one order status must be configured")
    return frozenset(statuses)


def load_settings() -> Settings:
    load_dotenv(find_dotenv(usecwd=True))

    data_dir = os.getenv("ORDERFLOW_DATA_DIR")
    statuses = os.getenv("ORDERFLOW_VALID_STATUSES")
    return Settings(
        data_dir=Path(data_dir) if data_dir else DEFAULT_DATA_DIR,
        valid_statuses=parse_statuses(statuses) if statuses else frozenset(OrderStatus),
        log_level=os.getenv("ORDERFLOW_LOG_LEVEL", "WARNING").upper(),
    )
