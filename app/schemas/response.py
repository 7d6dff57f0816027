from pydantic import BaseModel, Field
from typing import Generic, TypeVar, Optional, Any, Dict

DataType = TypeVar("DataType")

class APIResponse(BaseModel, Generic[DataType]):
    """Envelope for every successful response."""
    message: str = Field(..., description="What the call did, e.g. 'Test session started successfully'.")
    data: Optional[DataType] = Field(None, description="The test, session, attempt or eligibility payload.")

class ErrorDetail(BaseModel):
    code: str = Field(..., description="Stable error code such as NOT_ELIGIBLE or ALREADY_COMPLETED")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[Dict[str, Any]] = Field(
        None, description="Extra context; for NOT_ELIGIBLE this is the eligibility result"
    )

class ErrorResponse(BaseModel):
    """Body returned for every handled error."""
    error: ErrorDetail
    timestamp: str = Field(..., description="ISO 8601 UTC timestamp of the error")
    path: str = Field(..., description="Request URL that failed")
    request_id: Optional[str] = Field(None, description="Matches the X-Request-ID response header")
