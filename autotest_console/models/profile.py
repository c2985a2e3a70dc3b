"""
Execution Profile Data Model
"""
from typing import Optional
from pydantic import BaseModel, Field


class ExecutionProfile(BaseModel):
    """Browser and viewport settings a run executes under."""
    
    id: str = Field(..., description="Profile ID")
    name: Optional[str] = Field(default=None, description="Display name")
    browser: str = Field(..., description="Browser identifier, e.g. chromium")
    viewport_width: int = Field(..., alias="viewportWidth")
    viewport_height: int = Field(..., alias="viewportHeight")
    network_latency_ms: Optional[int] = Field(default=None, alias="networkLatencyMs")
    
    class Config:
        extra = "allow"
        populate_by_name = True
        frozen = True
    
    @property
    def label(self) -> str:
        return f"{self.browser} – {self.viewport_width} × {self.viewport_height}"
