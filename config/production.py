import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_db"),
}

# No defaults here: a missing value stops the app at startup.
JWT_TOKEN_PATH = os.getenv("JWT_TOKEN_PATH")
JWT_CREDENTIALS_KEY = os.getenv("JWT_CREDENTIALS_KEY")
JWT_CREDENTIALS_EMAIL = os.getenv("JWT_CREDENTIALS_EMAIL")

ROSTER_SHEET_ID = os.getenv("ROSTER_SHEET_ID", os.getenv("YOUTH_SHEET_ID"))
ROSTER_RANGE_NAME = os.getenv("ROSTER_RANGE_NAME", os.getenv("YOUTH_RANGE_NAME"))

CACHE_FILE_PATH = os.getenv("CACHE_FILE_PATH")
CACHE_EXPIRE_TIME = os.getenv("CACHE_EXPIRE_TIME", "1")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5000"))

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
