import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_test"),
}

JWT_TOKEN_PATH = os.getenv("JWT_TOKEN_PATH", "var/test/jwt")
JWT_CREDENTIALS_KEY = os.getenv("JWT_CREDENTIALS_KEY", "test-key")
JWT_CREDENTIALS_EMAIL = os.getenv("JWT_CREDENTIALS_EMAIL", "roster@test.iam.gserviceaccount.com")

ROSTER_SHEET_ID = os.getenv("ROSTER_SHEET_ID", "test-sheet")
ROSTER_RANGE_NAME = os.getenv("ROSTER_RANGE_NAME", "Members!A2:A")

CACHE_FILE_PATH = os.getenv("CACHE_FILE_PATH", "var/test/cache")
CACHE_EXPIRE_TIME = os.getenv("CACHE_EXPIRE_TIME", "1")

LOG_LEVEL = "DEBUG"

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
