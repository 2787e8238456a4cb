import os
from dotenv import load_dotenv

load_dotenv()

# --- Database ---
# Explicit DATABASE_URL wins; otherwise assemble a Postgres URL from DB_* parts,
# falling back to a local SQLite file.
DB_HOST = os.getenv("DB_HOST", "")
DB_PORT = int(os.getenv("DB_PORT", "5432"))
DB_USER = os.getenv("DB_USER", "admin")
DB_PASSWORD = os.getenv("DB_PASSWORD", "admin")
DB_NAME = os.getenv("DB_NAME", "goproject")

if DB_HOST:
    _default_url = f"postgresql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
else:
    _default_url = "sqlite:///./data/budgetbook.db"

DATABASE_URL = os.getenv("DATABASE_URL", _default_url)

# Fix for common SQLAlchemy issues with postgres:// vs postgresql://
if DATABASE_URL.startswith("postgres://"):
    DATABASE_URL = DATABASE_URL.replace("postgres://", "postgresql://", 1)

# --- Logging ---
LOG_FILE = os.getenv("LOG_FILE", "logs.txt")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# --- Listener ---
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "9000"))
