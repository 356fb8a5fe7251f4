import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_db"),
}

# Google service account used to read the roster sheet
JWT_TOKEN_PATH = os.getenv("JWT_TOKEN_PATH", "var/jwt")
JWT_CREDENTIALS_KEY = os.getenv("JWT_CREDENTIALS_KEY")
JWT_CREDENTIALS_EMAIL = os.getenv("JWT_CREDENTIALS_EMAIL")

ROSTER_SHEET_ID = os.getenv("ROSTER_SHEET_ID", os.getenv("YOUTH_SHEET_ID"))
ROSTER_RANGE_NAME = os.getenv("ROSTER_RANGE_NAME", os.getenv("YOUTH_RANGE_NAME"))

CACHE_FILE_PATH = os.getenv("CACHE_FILE_PATH", "var/cache")
CACHE_EXPIRE_TIME = os.getenv("CACHE_EXPIRE_TIME", "1")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
PORT = int(os.getenv("PORT", "5000"))

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
