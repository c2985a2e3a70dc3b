"""Utilities package"""
from .helpers import (
    PLACEHOLDER,
    badge_class,
    duration_between,
    format_duration,
    format_timestamp,
    parse_timestamp,
    truncate_text,
)

__all__ = [
    "PLACEHOLDER",
    "badge_class",
    "duration_between",
    "format_duration",
    "format_timestamp",
    "parse_timestamp",
    "truncate_text",
]
