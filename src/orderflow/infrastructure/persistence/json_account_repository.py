"""JSON-file-backed implementation of AccountRepository."""

from __future__ import annotations

from pathlib import Path

from orderflow.domain.model.account import Account
from orderflow.domain.repository.account_repository import AccountRepository
from orderflow.infrastructure.persistence.json_file import JsonFile


class JsonAccountRepository(AccountRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def get_by_id(self, account_id: int) -> Account | None:
        for raw in self._file.load():
            if raw["id"] == account_id:
                return Account(
                    id=raw["id"],
                    full_name=raw.get("full_name", ""),
                    email=raw.get("email", ""),
                    active=raw.get("active", True),
                )
        return None
