import os

# ✅ Database
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./placement_hub.db")
RUN_MIGRATIONS = os.getenv("RUN_MIGRATIONS", "0") == "1"

# ✅ Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("LOG_DIR", "logs")

# ✅ Security
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

# ✅ CORS
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000"
    ).split(",")
    if origin.strip()
]

# ✅ Search
SEARCH_DEFAULT_LIMIT = int(os.getenv("SEARCH_DEFAULT_LIMIT", "20"))
# Unset means no upper bound on page size
SEARCH_MAX_LIMIT = int(os.getenv("SEARCH_MAX_LIMIT")) if os.getenv("SEARCH_MAX_LIMIT") else None
