"""Repositories package - per-agency access to Baserow tables."""

from app.repositories.appointments import APPOINTMENTS, AppointmentRepository
from app.repositories.base import BaseRepository, TableNotFoundError
from app.repositories.clients import (
    FOLLOWUP,
    RETARGETING,
    WELCOME,
    FollowupClientRepository,
    RetargetingClientRepository,
    WelcomeClientRepository,
)
from app.repositories.email_logs import EmailLogRepository
from app.repositories.registry import TableRegistry, parse_table_name
from app.repositories.users import USERS, UserRepository

__all__ = [
    # Registry
    "TableRegistry",
    "parse_table_name",
    # Base
    "BaseRepository",
    "TableNotFoundError",
    # Table kinds
    "APPOINTMENTS",
    "WELCOME",
    "RETARGETING",
    "FOLLOWUP",
    "USERS",
    # Repositories
    "AppointmentRepository",
    "WelcomeClientRepository",
    "RetargetingClientRepository",
    "FollowupClientRepository",
    "EmailLogRepository",
    "UserRepository",
]
