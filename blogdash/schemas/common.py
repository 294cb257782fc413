from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Plain acknowledgement, e.g. after a delete."""

    message: str = Field(..., examples=["Blog deleted"])


class HealthCheckResponse(BaseModel):
    version: str
    status: str
    timestamp: str
    database: str
