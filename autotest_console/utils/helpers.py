"""
Utility helper functions
"""
from datetime import datetime
from typing import Optional


PLACEHOLDER = "—"


def format_duration(ms: int) -> str:
    """
    Format duration in milliseconds to human-readable string.
    
    Args:
        ms: Duration in milliseconds
        
    Returns:
        Formatted duration string
    """
    if ms < 1000:
        return f"{ms}ms"
    elif ms < 60000:
        return f"{ms / 1000:.1f}s"
    else:
        minutes = ms // 60000
        seconds = (ms % 60000) / 1000
        return f"{minutes}m {seconds:.0f}s"


def truncate_text(text: Optional[str], max_length: int = 100, suffix: str = "...") -> str:
    """
    Truncate text to a maximum length.
    
    Args:
        text: Text to truncate
        max_length: Maximum length
        suffix: Suffix to add when truncated
        
    Returns:
        Truncated text
    """
    if not text:
        return ""
    if len(text) <= max_length:
        return text
    return text[:max_length - len(suffix)] + suffix


def parse_timestamp(ts: Optional[str]) -> Optional[datetime]:
    """Parse an ISO format timestamp string (a trailing Z is accepted)."""
    if not ts:
        return None
    if ts.endswith("Z"):
        ts = ts[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(ts)
    except ValueError:
        return None


def format_timestamp(ts: Optional[str]) -> str:
    """Display form of a server timestamp; unparseable values are shown verbatim."""
    if not ts:
        return PLACEHOLDER
    parsed = parse_timestamp(ts)
    if parsed is None:
        return ts
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    return parsed.strftime("%Y-%m-%d %H:%M:%S")


def duration_between(started: Optional[str], ended: Optional[str]) -> str:
    """Elapsed time between two server timestamps, or a placeholder."""
    start = parse_timestamp(started)
    end = parse_timestamp(ended)
    if start is None or end is None:
        return PLACEHOLDER
    try:
        elapsed = end - start
    except TypeError:
        # naive vs aware
        return PLACEHOLDER
    ms = int(elapsed.total_seconds() * 1000)
    if ms < 0:
        return PLACEHOLDER
    return format_duration(ms)


def badge_class(status: Optional[str]) -> str:
    """CSS class of a status badge; missing statuses render as unknown."""
    return f"badge-{(status or 'unknown').lower()}"
