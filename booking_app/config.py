import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./booking.db")

# Business timezone used to interpret appointment dates and report ranges
APP_TIMEZONE = os.getenv("APP_TIMEZONE", "Europe/Istanbul")

# "tr" (default) or "en" - language of the JSON error messages
MESSAGE_LOCALE = os.getenv("MESSAGE_LOCALE", "tr").lower()

# Frontend origins allowed by CORS
ALLOWED_ORIGINS = os.getenv(
    "ALLOWED_ORIGINS",
    "http://localhost:5000,http://localhost:5173,http://localhost:3000",
).split(",")

SECURITY_HEADERS_ENABLED = os.getenv("SECURITY_HEADERS_ENABLED", "true").lower() == "true"

# bcrypt cost factor for admin passwords
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

# Working hours grid: 09:00 - 18:00 in half-hour steps (last slot 17:30)
SLOT_START_HOUR = 9
SLOT_END_HOUR = 18
SLOT_MINUTES = 30

DEFAULT_PAGE_LIMIT = 50
