"""
Run Result Data Models

The run endpoint answers with one of two shapes: the batch shape created
by spreadsheet runs, or the older single-session shape. ``resolve_run_result``
decides which one a payload is by the fields it carries.
"""
from typing import Any, List, Literal, Optional, Union
from pydantic import BaseModel, Field, ValidationError


class BatchRunResult(BaseModel):
    """Sessions created for every data row of a scenario."""
    
    kind: Literal["batch"] = "batch"
    scenario_id: Optional[str] = Field(default=None, alias="scenarioId")
    data_id: Optional[str] = Field(default=None, alias="dataId")
    created_sessions: Optional[int] = Field(default=None, alias="createdSessions")
    session_ids: List[str] = Field(default_factory=list, alias="sessionIds")
    
    class Config:
        extra = "allow"
        populate_by_name = True
        coerce_numbers_to_str = True


class SingleRunResult(BaseModel):
    """Legacy single-session response."""
    
    kind: Literal["single"] = "single"
    id: str
    url: Optional[str] = None
    name: Optional[str] = None
    
    class Config:
        extra = "allow"
        populate_by_name = True
        coerce_numbers_to_str = True


RunSessionResult = Union[BatchRunResult, SingleRunResult]

_BATCH_FIELDS = ("sessionIds", "scenarioId", "dataId", "createdSessions")


def resolve_run_result(data: Any) -> Optional[RunSessionResult]:
    """
    Resolve a run payload into its result variant.
    
    A non-empty ``sessionIds`` list wins; otherwise a legacy ``id`` makes it a
    single result; otherwise any batch field makes it an (id-less) batch.
    
    Args:
        data: The ``data`` member of the run envelope
        
    Returns:
        The resolved variant, or None when the payload matches neither shape
    """
    if not isinstance(data, dict):
        return None
    
    try:
        if data.get("sessionIds"):
            return BatchRunResult.model_validate(data)
        if data.get("id"):
            return SingleRunResult.model_validate(data)
        if any(data.get(field) is not None for field in _BATCH_FIELDS):
            return BatchRunResult.model_validate(data)
    except ValidationError:
        return None
    return None
