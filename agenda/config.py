from pathlib import Path
import os

from dotenv import load_dotenv

# Load environment variables from repo root and working directory .env (if present).
REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(REPO_ROOT / ".env")
load_dotenv(Path.cwd() / ".env")

PORT = int(os.getenv("PORT", "3000"))
STATIC_DIR = Path(os.getenv("STATIC_DIR", str(REPO_ROOT / "public")))
AGENDA_FILE = Path(os.getenv("AGENDA_FILE", str(STATIC_DIR / "agenda.json")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("LOG_FILE") or None

AGENDA_API_URL = os.getenv("AGENDA_API_URL", f"http://localhost:{PORT}/api/tasks")
POLL_INTERVAL_SECONDS = float(os.getenv("POLL_INTERVAL_SECONDS", "30"))

_cors_origins = os.getenv("CORS_ORIGINS", "*")
CORS_ORIGINS = [origin.strip() for origin in _cors_origins.split(",") if origin.strip()]
