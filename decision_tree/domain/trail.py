"""Action log trail — timestamped lines written to stdout as actions run."""

import json
from datetime import datetime
from typing import Any, Dict, Optional


def format_event(message: str, data: Optional[Dict[str, Any]] = None) -> str:
    line = f"[{datetime.now().isoformat()}] {message}"
    if data is not None:
        line += " " + json.dumps(data, ensure_ascii=False, default=str)
    return line


def log_event(message: str, data: Optional[Dict[str, Any]] = None):
    """Print one trail line: ``[timestamp] message {json data}``."""
    print(format_event(message, data))
