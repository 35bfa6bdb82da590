"""
Transformer Errors

Failures raised while mapping responses. Upstream API error envelopes are
not represented here: they are handed back to the caller untouched.
"""

from typing import Iterable


class TransformerError(Exception):
    """Base class for all transformation failures"""


class ModelNotFoundError(TransformerError):
    """Requested model type is not registered"""

    def __init__(self, model_type):
        self.model_type = model_type
        super().__init__(f"Model {model_type} not found")


class MissingPaginationFieldsError(TransformerError):
    """Response lacks the fields needed to build a page"""

    def __init__(self, missing_fields: Iterable[str]):
        self.missing_fields = list(missing_fields)
        super().__init__(
            "Missing Required Fields for Pagination: "
            + ", ".join(self.missing_fields)
        )


class InvalidRelationSpecError(TransformerError, ValueError):
    """Relation declaration cannot be applied"""
