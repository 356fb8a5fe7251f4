"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Read-only is enough, the service never writes to the sheet.
SHEETS_SCOPES = ("https://www.googleapis.com/auth/spreadsheets.readonly",)
GOOGLE_TOKEN_URI = "https://oauth2.googleapis.com/token"

DEFAULT_CACHE_TTL_HOURS = 1

TOKEN_FILE_NAME = "token.json"
CACHE_FILE_NAME = "cache.json"
CACHE_EXPIRY_SUFFIX = ".expiry"

# Dates accepted on the attendance query string (e.g. 2024-3-7).
DATE_QUERY_PATTERN = r"[0-9]{4}-[0-9]{1,2}-[0-9]{1,2}"
HTML_DATE_FORMAT = "%Y-%m-%d"
