"""Table naming convention: ``<prefix>_<AGENCY_CODE>``."""

import re

from app.models.registry import ParsedName

# Agency code: two letters followed by three digits, e.g. TT001
_AGENCY_SUFFIX = re.compile(r"^(.+)_([a-z]{2}\d{3})$", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s+")


def normalize_table_name(name: str) -> str:
    return _WHITESPACE.sub("_", name.lower())


def parse_table_name(name: str) -> ParsedName:
    """Split a table name into its kind and agency code.

    >>> parse_table_name("clients_welcome_tt001")
    ParsedName(prefix='clients_welcome', agency_code='TT001')
    >>> parse_table_name("Leads Board")
    ParsedName(prefix='leads_board', agency_code=None)
    """
    normalized = normalize_table_name(name)

    match = _AGENCY_SUFFIX.match(normalized)
    if match:
        return ParsedName(prefix=match.group(1), agency_code=match.group(2).upper())

    # Shared across agencies
    if normalized == "users":
        return ParsedName(prefix="users")

    return ParsedName(prefix=normalized)
