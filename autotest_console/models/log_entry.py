"""
Log Entry Data Model
"""
from typing import Iterable, List, Optional
from pydantic import BaseModel, Field


SENTINEL_LOG_NO = 0


class LogEntry(BaseModel):
    """One executed test step of a session."""
    
    id: Optional[str] = None
    no: Optional[int] = Field(default=None, description="Server-assigned step number")
    action: Optional[str] = None
    element: Optional[str] = Field(default=None, description="Target element locator")
    value: Optional[str] = None
    message: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    url: Optional[str] = Field(default=None, description="Screenshot path or file:// URL")
    
    class Config:
        extra = "allow"
        populate_by_name = True
        coerce_numbers_to_str = True
    
    @property
    def is_sentinel(self) -> bool:
        """Step 0 is a header row, not an executed step."""
        return self.no == SENTINEL_LOG_NO


def visible_log_entries(entries: Iterable[LogEntry]) -> List[LogEntry]:
    """Drop sentinel rows, keeping server order."""
    return [entry for entry in entries if not entry.is_sentinel]
