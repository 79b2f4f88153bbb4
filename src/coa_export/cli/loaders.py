"""Load accounts and transactions from JSON files."""

import json
from pathlib import Path
from typing import Any

from coa_export.domain.entities import Account, Transaction
from coa_export.domain.errors import ValidationError
from coa_export.domain.mappers import account_from_dict, transaction_from_dict


def _read_records(path: str, key: str) -> list[dict[str, Any]]:
    """Read a JSON list of records, or an object holding one under ``key``."""
    json_path = Path(path)
    if not json_path.exists():
        raise FileNotFoundError(f"JSON file not found: {path}")

    with open(json_path, "r", encoding="utf-8-sig") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Could not parse {path}: {e}") from e

    if isinstance(data, dict):
        data = data.get(key)
    if not isinstance(data, list):
        raise ValidationError(f"{path} must contain a list of {key} or an object with a '{key}' list")
    return data


def load_accounts(path: str) -> list[Account]:
    """Load a Chart of Accounts, sorted by account number."""
    accounts = [account_from_dict(record) for record in _read_records(path, "accounts")]
    return sorted(accounts, key=lambda a: a.number)


def load_transactions(path: str) -> list[Transaction]:
    """Load transactions in file order."""
    return [transaction_from_dict(record) for record in _read_records(path, "transactions")]
