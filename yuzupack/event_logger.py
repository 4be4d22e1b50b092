"""
Event logging for yuzupack - persistent record of pack builds.
Thread-safe append of build results to build_events.json in the config directory.
"""
import json
import threading
import time
import uuid
from pathlib import Path
from typing import Optional, Dict, Any, List

from .utils.settings import get_config_dir

MAX_EVENTS = 100
_events_lock = threading.Lock()


def get_events_file() -> Path:
    return Path(get_config_dir()) / "build_events.json"


def _generate_event_id() -> str:
    """Generate unique event ID: evt_{timestamp_ms}_{uuid_short}"""
    timestamp_ms = int(time.time() * 1000)
    uuid_short = str(uuid.uuid4())[:8]
    return f"evt_{timestamp_ms}_{uuid_short}"


def _load_events() -> List[Dict[str, Any]]:
    """Load events from JSON file. Returns empty list if file doesn't exist or is empty."""
    events_file = get_events_file()
    try:
        if events_file.exists():
            content = events_file.read_text(encoding='utf-8').strip()
            if content:
                return json.loads(content)
    except (OSError, ValueError) as e:
        print(f"[EventLogger] Error loading events: {e}")
    return []


def _save_events(events: List[Dict[str, Any]], max_events: int = MAX_EVENTS) -> None:
    """Save events to JSON file with auto-trim to max_events."""
    events_file = get_events_file()
    try:
        events = events[-max_events:] if max_events > 0 else []
        events_file.parent.mkdir(parents=True, exist_ok=True)
        with open(events_file, 'w', encoding='utf-8') as f:
            json.dump(events, f, indent=2, ensure_ascii=False)
    except OSError as e:
        print(f"[EventLogger] Error saving events: {e}")


def log_event(event_type: str, status: str = "success", data: Optional[Dict[str, Any]] = None,
              error: Optional[str] = None, max_events: int = MAX_EVENTS) -> str:
    """
    Log a system event.

    Args:
        event_type: "build"
        status: "success" | "warning" | "error"
        data: Type-specific event data
        error: Error message if status="error"
        max_events: Number of most recent events to keep

    Returns:
        Event ID
    """
    event_id = _generate_event_id()
    event = {
        "id": event_id,
        "timestamp": time.time(),
        "type": event_type,
        "status": status,
        "data": data or {},
        "error": error
    }

    with _events_lock:
        events = _load_events()
        events.append(event)
        _save_events(events, max_events)

    return event_id


def get_recent_events(limit: int = 100) -> List[Dict[str, Any]]:
    """Get most recent events (reverse chronological order)."""
    with _events_lock:
        events = _load_events()

    return list(reversed(events[-limit:]))


def clear_events() -> None:
    """Clear all events."""
    with _events_lock:
        _save_events([])


def log_build_event(
    output_name: str,
    locale: str,
    characters: List[str],
    replace: bool,
    written: int = 0,
    skipped: Optional[List[str]] = None,
    status: str = "success",
    error: Optional[str] = None,
    max_events: int = MAX_EVENTS
) -> str:
    """
    Log a pack build.

    Args:
        output_name: Archive file name
        locale: Archive texture locale (e.g., "en-US")
        characters: Character folders included
        replace: Whether the pack replaces the default title sounds
        written: Number of archive entries written
        skipped: Source keys that were missing from the asset store
        status: "success" | "warning" | "error"
        error: Error message if failed

    Returns:
        Event ID
    """
    skipped = skipped or []
    return log_event(
        event_type="build",
        status=status,
        data={
            "output_name": output_name,
            "locale": locale,
            "characters": list(characters),
            "replace": replace,
            "written": written,
            "skipped_count": len(skipped),
            "skipped": skipped[:20]  # Keep the log small
        },
        error=error,
        max_events=max_events
    )
