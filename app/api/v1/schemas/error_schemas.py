"""Error body returned for domain failures."""
from pydantic import BaseModel


class ErrorResponseSchema(BaseModel):
    title: str
    detail: str
    error_code: str
    timestamp: str
