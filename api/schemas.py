from typing import Dict, Optional

from pydantic import BaseModel


class QueryPreview(BaseModel):
    """What would be sent, without sending it. The API key is never included."""
    family: str
    endpoint: str
    query: str


class ErrorOut(BaseModel):
    detail: str
    error: str
    values: Optional[Dict[str, str]] = None
