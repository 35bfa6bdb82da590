"""
Response Transformer

Converts a raw response body into documents, collections, pages or models.
Each set_response() call returns a new transformer, so a configured instance
never changes under a running conversion.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union
import logging

import polars as pl
import requests

from simplecurl.coreutils.env import TransformerSettings, load_settings
from simplecurl.models.base import TIMESTAMP_FIELDS, ApiModel
from simplecurl.models.registry import ModelRegistry, ModelType, default_registry
from simplecurl.transformation.documents import (
    as_list,
    decode,
    has_errors,
    is_blank,
    missing_fields,
    unwrap,
    value_present,
)
from simplecurl.transformation.errors import (
    InvalidRelationSpecError,
    MissingPaginationFieldsError,
)
from simplecurl.transformation.frames import collection_to_frame
from simplecurl.transformation.pagination import (
    LengthAwarePage,
    PaginationResolver,
    StaticPaginationResolver,
)

logger = logging.getLogger(__name__)

PAGINATION_FIELDS = ("total", "per_page", "current_page", "data")

Materialized = Union[ApiModel, List[ApiModel]]
RelationSpec = Mapping


@dataclass(frozen=True)
class ResponseState:
    """Response body and the options it is read with"""

    payload: Any = None
    data_key: str = ""
    parse_errors: bool = True


class ResponseTransformer:
    """Transforms API responses into application objects"""

    def __init__(
        self,
        registry: Optional[ModelRegistry] = None,
        paginator: Optional[PaginationResolver] = None,
        settings: Optional[TransformerSettings] = None,
        state: Optional[ResponseState] = None,
    ):
        self.registry = registry if registry is not None else default_registry
        self.paginator = paginator or StaticPaginationResolver()
        self.settings = settings or load_settings()
        self.state = state or ResponseState(
            data_key=self.settings.data_key, parse_errors=self.settings.parse_errors
        )

    def set_response(
        self,
        payload: Any,
        data_key: Optional[str] = None,
        parse_errors: Optional[bool] = None,
    ) -> "ResponseTransformer":
        """
        Configure a response to transform

        Args:
            payload: Raw response body (only strings are parsed)
            data_key: Envelope key to unwrap, settings default when None
            parse_errors: Pass `errors` payloads through, settings default when None

        Returns:
            ResponseTransformer: New transformer sharing this one's collaborators
        """
        state = ResponseState(
            payload=payload,
            data_key=(self.settings.data_key if data_key is None else data_key) or "",
            parse_errors=(
                self.settings.parse_errors if parse_errors is None else parse_errors
            ),
        )
        return ResponseTransformer(
            registry=self.registry,
            paginator=self.paginator,
            settings=self.settings,
            state=state,
        )

    def set_http_response(
        self,
        response: requests.Response,
        data_key: Optional[str] = None,
        parse_errors: Optional[bool] = None,
    ) -> "ResponseTransformer":
        """Configure the body of an already received requests.Response"""
        return self.set_response(response.text, data_key, parse_errors)

    # Documents

    def to_json(self) -> Any:
        """Decoded document with JSON objects as attribute-accessible mappings"""
        return self._document(as_object=True)

    def to_array(self) -> Any:
        """Decoded document with JSON objects as plain dicts"""
        return self._document(as_object=False)

    def _document(self, as_object: bool) -> Any:
        document = decode(self.state.payload, as_object=as_object)

        if self._is_error_payload(document):
            logger.info("Response carries errors, returning it untouched")
            return document

        return unwrap(document, self.state.data_key)

    def _is_error_payload(self, document: Any) -> bool:
        return self.state.parse_errors and has_errors(document)

    # Collections and pages

    def to_collection(self, model_type: Optional[ModelType] = None) -> Any:
        """
        Transform the response into a list

        Args:
            model_type: Registered model type to map every element to

        Returns:
            list: Models when model_type is given, decoded values otherwise;
            the error document when the response carries errors
        """
        document = self.to_json()

        if self._is_error_payload(document):
            return document

        if is_blank(document):
            return []

        if model_type is not None:
            return self._map_collection(model_type, as_list(document))

        if isinstance(document, list) and (
            self.state.data_key or all(isinstance(v, Mapping) for v in document)
        ):
            return list(document)

        return [document]

    def to_paginated(self, per_page: Optional[int] = None) -> Any:
        """
        Transform a paginated response into a LengthAwarePage

        Args:
            per_page: Page size the caller asked for; the response value wins

        Returns:
            LengthAwarePage, or the error document when the response carries errors

        Raises:
            MissingPaginationFieldsError: If total, per_page, current_page or data is absent
        """
        document = self.to_json()

        if self._is_error_payload(document):
            return document

        missing = missing_fields(document, *PAGINATION_FIELDS)
        if missing:
            logger.error(f"❌ Missing pagination fields: {missing}")
            raise MissingPaginationFieldsError(missing)

        if per_page is not None and str(per_page) != str(document["per_page"]):
            logger.warning(
                f"Requested per_page={per_page} but response reports {document['per_page']}"
            )

        return LengthAwarePage(
            items=as_list(document["data"]),
            total=document["total"],
            per_page=document["per_page"],
            current_page=self.paginator.resolve_current_page(),
            path=self.paginator.resolve_current_path(),
        )

    def to_dataframe(
        self, model_type: Optional[ModelType] = None, schema: Optional[pl.Schema] = None
    ) -> Any:
        """Transform the response into a polars DataFrame, one row per element"""
        collection = self.to_collection(model_type)

        if self._is_error_payload(collection):
            return collection

        return collection_to_frame(collection, schema=schema)

    # Models

    def to_model(
        self, model_type: ModelType, relations: Optional[RelationSpec] = None
    ) -> Any:
        """
        Transform the response into a model with its relations

        Args:
            model_type: Registered model type
            relations: RelationSpec of nested fields to materialize. Each value
                is a model type or a chain such as {"post": "Post", "comments":
                "Comment"}, where every key nests inside the previous one. Chain
                values must be model types; a later chain through the same
                relation name reuses the model already attached there.

        Returns:
            Model (list of models for list responses; a model without
            attributes for scalar responses), None when there is no document,
            or the error document when the response carries errors

        Raises:
            ModelNotFoundError: If a referenced model type is not registered
        """
        document = self.to_json()

        if self._is_error_payload(document):
            return document

        if document is None:
            return None

        model = self._map_document(model_type, document)

        if relations:
            self._resolve_relations(relations, document, model)

        return model

    def _map_document(self, model_type: ModelType, document: Any) -> Materialized:
        descriptor = self.registry.resolve(model_type)

        if isinstance(document, list):
            return self._map_collection(model_type, document)

        model = descriptor.factory()
        if not isinstance(document, Mapping):
            logger.debug(f"Response for {model_type} is not an object, no attributes set")
            return model

        for key in self._candidate_keys(descriptor.permitted_attributes()):
            if key in document:
                model.set_attribute(key, document[key])
        return model

    def _map_collection(self, model_type: ModelType, documents: list) -> List[ApiModel]:
        self.registry.resolve(model_type)

        models = []
        for document in documents:
            if not isinstance(document, Mapping):
                logger.debug(f"Skipping non-object element while mapping {model_type}")
                continue
            models.append(self._map_document(model_type, document))
        return models

    @staticmethod
    def _candidate_keys(attributes) -> List[str]:
        keys = []
        for key in list(attributes) + list(TIMESTAMP_FIELDS):
            if key not in keys:
                keys.append(key)
        return keys

    # Relations

    def _resolve_relations(
        self, relations: RelationSpec, document: Any, model: Materialized
    ) -> None:
        if isinstance(model, list):
            elements = [d for d in document if isinstance(d, Mapping)]
            for element_model, element_document in zip(model, elements):
                self._resolve_relations(relations, element_document, element_model)
            return

        for name, spec in relations.items():
            chain = spec if isinstance(spec, Mapping) else {name: spec}
            if not chain:
                raise InvalidRelationSpecError(f"Relation '{name}' declares nothing")
            self._apply_chain(dict(chain), document, model)

    def _apply_chain(
        self, chain: Dict[str, Any], document: Any, model: Materialized
    ) -> Materialized:
        if isinstance(model, list):
            elements = [d for d in document if isinstance(d, Mapping)]
            for element_model, element_document in zip(model, elements):
                self._apply_chain(chain, element_document, element_model)
            return model

        key, model_type = next(iter(chain.items()))

        if isinstance(model_type, Mapping):
            raise InvalidRelationSpecError(
                f"Relation '{key}' must name a model type, got a mapping"
            )

        if not value_present(document, key):
            return model

        sub_document = document[key]
        if not isinstance(sub_document, (Mapping, list)):
            logger.debug(f"Relation '{key}' holds a scalar, skipping")
            return model

        if len(chain) == 1:
            return model.set_relation(key, self._map_document(model_type, sub_document))

        existing = model.get_relation(key)
        if isinstance(existing, (ApiModel, list)) and existing:
            child = existing
        else:
            child = self._map_document(model_type, sub_document)

        rest = dict(chain)
        del rest[key]

        return model.set_relation(key, self._apply_chain(rest, sub_document, child))
