"""
Base schemas with common functionality.
"""
from pydantic import BaseModel, ConfigDict


class QueryResult(BaseModel):
    """Read-only result returned by a query handler"""

    model_config = ConfigDict(frozen=True)
