import os
from pathlib import Path

from dotenv import load_dotenv

# Load project-level .env automatically so runtime behavior matches configured values.
_repo_root = Path(__file__).resolve().parents[2]
load_dotenv(_repo_root / ".env", override=False)


# Runtime event log (JSON lines). Off unless APPLAUNCHER_RUNTIME_LOG=1.
runtime_log_enabled = os.getenv("APPLAUNCHER_RUNTIME_LOG", "0")
runtime_log_path = os.getenv(
    "APPLAUNCHER_RUNTIME_LOG_PATH",
    os.path.join(os.path.expanduser("~"), ".app-launcher", "runtime_events.jsonl"),
)
