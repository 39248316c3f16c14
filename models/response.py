from datetime import datetime

from pydantic import BaseModel

class ErrorResponse(BaseModel):
    detail: str

class PersistenceErrorResponse(ErrorResponse):
    error_id: str

class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
