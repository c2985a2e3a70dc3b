"""
Response Envelope Data Model
"""
from typing import Any, Optional
from pydantic import BaseModel, Field


STATUS_SUCCESS = "SUCCESS"
STATUS_FAILED = "FAILED"


class ResponseMetadata(BaseModel):
    """Paging and tracing metadata attached to every backend response."""
    
    code: Optional[int] = None
    request_id: Optional[str] = Field(default=None, alias="requestId")
    timestamp: Optional[str] = None
    page: Optional[int] = None
    size: Optional[int] = None
    total: Optional[int] = None
    
    class Config:
        extra = "allow"
        populate_by_name = True


class BaseResponse(BaseModel):
    """Uniform {status, message, data, metadata} wrapper."""
    
    status: Optional[str] = Field(default=None, description="SUCCESS, FAILED or a server-defined value")
    message: Optional[str] = None
    data: Optional[Any] = None
    metadata: Optional[ResponseMetadata] = None
    
    class Config:
        extra = "allow"
    
    @property
    def is_success(self) -> bool:
        return self.status == STATUS_SUCCESS
    
    @property
    def has_payload(self) -> bool:
        return self.data is not None
    
    @property
    def total(self) -> int:
        if self.metadata and self.metadata.total is not None:
            return self.metadata.total
        return 0
    
    @classmethod
    def failed(cls, message: str) -> "BaseResponse":
        """Synthesize a failure envelope for bodies that are not JSON."""
        return cls(status=STATUS_FAILED, message=message)
    
    def to_json_dict(self) -> dict:
        """Wire-shaped dict (camelCase keys, absent fields omitted)."""
        return self.model_dump(by_alias=True, exclude_none=True)
