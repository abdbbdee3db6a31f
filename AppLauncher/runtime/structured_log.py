import datetime
import json
import os
import uuid

from AppLauncher.config import config

_RUN = {"id": ""}


def set_run_id(run_id=None):
    _RUN["id"] = str(run_id or uuid.uuid4())
    return _RUN["id"]


def get_run_id():
    return str(_RUN.get("id") or "")


def _enabled():
    value = str(getattr(config, "runtime_log_enabled", "0") or "").strip().lower()
    return value not in ("0", "false", "no", "off")


def _path():
    p = getattr(config, "runtime_log_path", "runtime_events.jsonl")
    return os.path.abspath(os.path.expanduser(str(p)))


def log_event(event, **fields):
    if not _enabled():
        return False
    row = {
        "ts": datetime.datetime.now().isoformat(timespec="seconds"),
        "event": str(event or ""),
        "run_id": get_run_id(),
    }
    row.update(fields or {})
    path = _path()
    folder = os.path.dirname(path)
    try:
        if folder and not os.path.isdir(folder):
            os.makedirs(folder, exist_ok=True)
        with open(path, "a", encoding="utf-8") as f:
            f.write(json.dumps(row, ensure_ascii=False) + "\n")
    except OSError:
        return False
    return True
