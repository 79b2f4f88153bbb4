"""Mapper functions to convert collaborator records into domain entities.

Records arrive as plain dicts (decoded JSON) using either the onboarding
service's camelCase keys or snake_case keys. This layer isolates that
conversion so the encoders only ever see validated entities.
"""

from decimal import InvalidOperation
from typing import Any, Mapping, Optional

from coa_export.domain import entities as domain
from coa_export.domain.errors import (
    ValidationError,
    amount_out_of_range,
    invalid_account_type,
    invalid_confidence,
    invalid_transaction_type,
    missing_field,
    negative_amount,
)
from coa_export.utils.amount_parser import format_amount, parse_amount
from coa_export.utils.date_parser import parse_iso_date


def _get(record: Mapping[str, Any], snake: str, camel: Optional[str] = None) -> Any:
    if snake in record:
        return record[snake]
    if camel is not None:
        return record.get(camel)
    return None


def _require(record: Mapping[str, Any], kind: str, snake: str, camel: Optional[str] = None) -> Any:
    value = _get(record, snake, camel)
    if value is None:
        raise ValidationError(missing_field(kind, camel or snake))
    return value


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def account_from_dict(record: Mapping[str, Any]) -> domain.Account:
    """Convert an account record to a domain Account entity.

    Unknown detail types are kept as plain strings; the account-type mapper
    falls back to the coarse type for them.
    """
    raw_type = _require(record, "Account", "type")
    try:
        account_type = domain.AccountType(raw_type)
    except ValueError as e:
        raise ValidationError(invalid_account_type(str(raw_type))) from e

    raw_detail = _require(record, "Account", "detail_type", "detailType")
    try:
        detail_type: domain.DetailType | str = domain.DetailType(raw_detail)
    except ValueError:
        detail_type = str(raw_detail)

    return domain.Account(
        number=str(_require(record, "Account", "number")),
        name=str(_require(record, "Account", "name")),
        type=account_type,
        detail_type=detail_type,
        description=str(_get(record, "description") or ""),
        is_custom=bool(_get(record, "is_custom", "isCustom") or False),
        parent_account_number=_optional_str(
            _get(record, "parent_account_number", "parentAccountNumber")
        ),
        id=_optional_str(_get(record, "id")),
    )


def transaction_from_dict(record: Mapping[str, Any]) -> domain.Transaction:
    """Convert a transaction record to a domain Transaction entity.

    Raises:
        ValidationError: On a missing field, malformed date, unknown type,
            non-numeric confidence, or an amount that is negative, not finite
            or too large to render
    """
    transaction_id = str(_require(record, "Transaction", "id"))

    txn_date = _require(record, "Transaction", "date")
    parse_iso_date(txn_date)

    raw_type = _require(record, "Transaction", "type")
    try:
        txn_type = domain.TransactionType(raw_type)
    except ValueError as e:
        raise ValidationError(invalid_transaction_type(str(raw_type))) from e

    try:
        amount = parse_amount(_require(record, "Transaction", "amount"))
    except ValidationError:
        raise
    except ValueError as e:
        raise ValidationError(str(e)) from e
    if amount < 0:
        raise ValidationError(negative_amount(transaction_id))
    try:
        format_amount(amount)
    except InvalidOperation as e:
        raise ValidationError(amount_out_of_range(transaction_id)) from e

    raw_confidence = _get(record, "confidence")
    try:
        confidence = float(raw_confidence or 0.0)
    except (TypeError, ValueError) as e:
        raise ValidationError(invalid_confidence(transaction_id, raw_confidence)) from e

    return domain.Transaction(
        id=transaction_id,
        date=txn_date,
        description=str(_get(record, "description") or ""),
        amount=amount,
        type=txn_type,
        vendor=_optional_str(_get(record, "vendor")),
        suggested_account_number=_optional_str(
            _get(record, "suggested_account_number", "suggestedAccountNumber")
        ),
        suggested_account_name=_optional_str(
            _get(record, "suggested_account_name", "suggestedAccountName")
        ),
        reviewed_account_number=_optional_str(
            _get(record, "reviewed_account_number", "reviewedAccountNumber")
        ),
        reviewed_account_name=_optional_str(
            _get(record, "reviewed_account_name", "reviewedAccountName")
        ),
        confidence=confidence,
        is_reviewed=bool(_get(record, "is_reviewed", "isReviewed") or False),
        document_id=_optional_str(_get(record, "document_id", "documentId")),
        document_name=_optional_str(_get(record, "document_name", "documentName")),
        category=_optional_str(_get(record, "category")),
    )
