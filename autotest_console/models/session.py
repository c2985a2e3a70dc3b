"""
Session Data Models
"""
from typing import List, Optional
from pydantic import BaseModel, Field


class SessionSummary(BaseModel):
    """Row of the session history list."""
    
    id: str
    status: Optional[str] = Field(default=None, description="SUCCESS, FAILED, RUNNING, ...")
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    started_at: Optional[str] = Field(default=None, alias="startedAt")
    ended_at: Optional[str] = Field(default=None, alias="endedAt")
    scenario_name: Optional[str] = Field(default=None, alias="scenarioName")
    profile_name: Optional[str] = Field(default=None, alias="profileName")
    
    class Config:
        extra = "allow"
        populate_by_name = True
        coerce_numbers_to_str = True
    
    @property
    def effective_started_at(self) -> Optional[str]:
        """Start time, falling back to creation time for sessions that never started."""
        return self.started_at or self.created_at


class SessionDetail(SessionSummary):
    """Single session with its scenario/profile/data references."""
    
    profile_id: Optional[str] = Field(default=None, alias="profileId")
    scenario_id: Optional[str] = Field(default=None, alias="scenarioId")
    data_id: Optional[str] = Field(default=None, alias="dataId")
    url: Optional[str] = None
    name: Optional[str] = None


class SessionPage(BaseModel):
    """One page of sessions plus the server-side total."""
    
    items: List[SessionSummary] = Field(default_factory=list)
    total: int = 0
