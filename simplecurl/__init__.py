"""
simplecurl - Response Transformation

Turns raw JSON response bodies into documents, models, collections, pages
and DataFrames. Performs no network I/O.
"""

from simplecurl.models.base import ApiModel
from simplecurl.models.registry import (
    ModelDescriptor,
    ModelRegistry,
    default_registry,
    register_model,
)
from simplecurl.transformation.errors import (
    InvalidRelationSpecError,
    MissingPaginationFieldsError,
    ModelNotFoundError,
    TransformerError,
)
from simplecurl.transformation.pagination import (
    LengthAwarePage,
    PaginationResolver,
    StaticPaginationResolver,
    UrlPaginationResolver,
)
from simplecurl.transformation.transformer import ResponseState, ResponseTransformer

__version__ = "1.0.0"
