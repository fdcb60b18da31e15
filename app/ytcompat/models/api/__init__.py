from .errors import ErrorCode
from .query import InfoQueryParams, InfoQuerySchema

__all__ = ["ErrorCode", "InfoQueryParams", "InfoQuerySchema"]
