"""Field escaping for delimited export formats."""

from typing import Optional

_CSV_SPECIAL_CHARS = (",", '"', "\r", "\n")


def escape_delimited(value: Optional[str]) -> str:
    """Escape a value for a comma-delimited file.

    Values containing a comma, double quote, carriage return or newline are
    wrapped in double quotes with internal quotes doubled. Anything else is
    returned unchanged.

    Args:
        value: Raw field value (None is treated as empty)

    Returns:
        Escaped field text
    """
    if not value:
        return ""
    if any(char in value for char in _CSV_SPECIAL_CHARS):
        return '"' + value.replace('"', '""') + '"'
    return value


def escape_tabbed(value: Optional[str]) -> str:
    """Escape a value for a tab-delimited IIF file.

    Tabs, carriage returns and newlines become single spaces and the result
    is stripped. No quoting is applied.

    Args:
        value: Raw field value (None is treated as empty)

    Returns:
        Escaped field text
    """
    if not value:
        return ""
    for char in ("\t", "\r", "\n"):
        value = value.replace(char, " ")
    return value.strip()
