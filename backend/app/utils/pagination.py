"""
Pagination Utility Module

Simple offset/limit windows for list endpoints. Lists are returned as
plain JSON arrays; the window only trims the query.
"""
from fastapi import Query
from pydantic import BaseModel
from sqlalchemy.sql import Select

DEFAULT_LIMIT = 100
MAX_LIMIT = 500


class PaginationParams(BaseModel):
    """Standard pagination parameters"""
    offset: int = 0
    limit: int = DEFAULT_LIMIT

    def apply(self, query: Select) -> Select:
        return query.offset(self.offset).limit(self.limit)


def pagination_params(
    offset: int = Query(0, ge=0, description="Rows to skip"),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT, description="Maximum rows to return"),
) -> PaginationParams:
    """FastAPI dependency reading ?offset=&limit="""
    return PaginationParams(offset=offset, limit=limit)
