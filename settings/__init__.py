"""Application settings."""

import os
from pathlib import Path

# Baserow
BASEROW_URL = os.getenv("BASEROW_URL", "https://baserow.becoming-more.com")
BASEROW_TOKEN = os.getenv("BASEROW_TOKEN", "")
BASEROW_AUTH_SCHEME = os.getenv("BASEROW_AUTH_SCHEME", "Token")

# Logging
LOG_DIR = Path(os.getenv("DASHBOARD_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("DASHBOARD_LOG_LEVEL", "INFO")

# API
API_TIMEOUT = float(os.getenv("BASEROW_TIMEOUT", "30"))
MAX_CONCURRENT = int(os.getenv("BASEROW_MAX_CONCURRENT", "10"))
PAGE_SIZE = 200

# Table registry
TABLE_CACHE_TTL = float(os.getenv("TABLE_CACHE_TTL", "300"))
TABLES_RETRY_ATTEMPTS = int(os.getenv("TABLES_RETRY_ATTEMPTS", "3"))
