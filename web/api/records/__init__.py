"""Record API."""

from web.api.records.views import (
    create_record,
    get_record,
    list_records,
    log_email,
    update_record,
)

__all__ = [
    "list_records",
    "get_record",
    "create_record",
    "update_record",
    "log_email",
]
