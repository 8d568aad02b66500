# HISTORY_HELPER_V2
import json
from datetime import datetime, timezone

from .settings import history_file

def log_event(event: dict) -> None:
    """Append a JSON line with a UTC timestamp."""
    path = history_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    item = {"ts": datetime.now(timezone.utc).isoformat(), **event}
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(item, ensure_ascii=False) + "\n")
