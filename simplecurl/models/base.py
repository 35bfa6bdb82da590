"""
API Model Base

Attribute and relation container every materialized model is built on.
Subclasses declare the attributes they accept through `fillable`, or through
`api_attributes` when the API exposes a different set than the application
fills.
"""

from typing import Any, Dict, List, Optional, Union

TIMESTAMP_FIELDS = ("created_at", "updated_at")


class ApiModel:
    """Model populated from API responses"""

    fillable: List[str] = []
    api_attributes: Optional[List[str]] = None

    def __init__(self, **attributes: Any):
        object.__setattr__(self, "_attributes", {})
        object.__setattr__(self, "_relations", {})
        for key, value in attributes.items():
            self.set_attribute(key, value)

    def get_api_attributes(self) -> List[str]:
        """Attribute names this model accepts from responses"""
        if self.api_attributes is not None:
            return list(self.api_attributes)
        return list(self.fillable)

    # Attributes

    def set_attribute(self, key: str, value: Any) -> "ApiModel":
        self._attributes[key] = value
        return self

    def get_attribute(self, key: str, default: Any = None) -> Any:
        return self._attributes.get(key, default)

    def has_attribute(self, key: str) -> bool:
        return key in self._attributes

    @property
    def attributes(self) -> Dict[str, Any]:
        return dict(self._attributes)

    # Relations

    def set_relation(
        self, name: str, value: Union["ApiModel", List["ApiModel"], None]
    ) -> "ApiModel":
        self._relations[name] = value
        return self

    def get_relation(self, name: str) -> Any:
        return self._relations.get(name)

    def relation_loaded(self, name: str) -> bool:
        return name in self._relations

    def get_relations(self) -> Dict[str, Any]:
        return dict(self._relations)

    def to_dict(self) -> Dict[str, Any]:
        """Attributes plus relations, serialized recursively"""
        data = dict(self._attributes)
        for name, related in self._relations.items():
            if isinstance(related, ApiModel):
                data[name] = related.to_dict()
            elif isinstance(related, list):
                data[name] = [
                    item.to_dict() if isinstance(item, ApiModel) else item
                    for item in related
                ]
            else:
                data[name] = related
        return data

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails
        attributes = self.__dict__.get("_attributes", {})
        if name in attributes:
            return attributes[name]
        relations = self.__dict__.get("_relations", {})
        if name in relations:
            return relations[name]
        raise AttributeError(
            f"{type(self).__name__} has no attribute or relation '{name}'"
        )

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_") or hasattr(type(self), name):
            object.__setattr__(self, name, value)
        else:
            self.set_attribute(name, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApiModel):
            return NotImplemented
        return (
            type(self) is type(other)
            and self._attributes == other._attributes
            and self._relations == other._relations
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._attributes!r})"
