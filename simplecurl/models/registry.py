"""
Model Registry

Maps model type identifiers to a factory and the attribute whitelist.
Register models at start-up; the transformer only ever resolves them.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional, Tuple, Type, Union
import logging

from simplecurl.models.base import ApiModel
from simplecurl.transformation.errors import ModelNotFoundError

logger = logging.getLogger(__name__)

ModelType = Union[str, Type[ApiModel]]


@dataclass(frozen=True)
class ModelDescriptor:
    """Factory and permitted attributes of one model type"""

    name: str
    factory: Callable[[], ApiModel]
    attributes: Tuple[str, ...]

    def permitted_attributes(self) -> Tuple[str, ...]:
        return self.attributes


class ModelRegistry:
    """Registry of model types the transformer can materialize"""

    def __init__(self):
        self._descriptors: Dict[str, ModelDescriptor] = {}

    def register(
        self,
        model: ModelType,
        factory: Optional[Callable[[], ApiModel]] = None,
        attributes: Optional[Iterable[str]] = None,
        name: Optional[str] = None,
    ) -> ModelDescriptor:
        """
        Register a model type

        Args:
            model: ApiModel subclass, or a bare type name when a factory is given
            factory: Callable producing a fresh instance (defaults to the class)
            attributes: Permitted attributes (defaults to the class whitelist)
            name: Identifier to register under (defaults to the class name)

        Returns:
            ModelDescriptor: The stored descriptor
        """
        if isinstance(model, str):
            if factory is None:
                raise ValueError(f"Model '{model}' registered by name needs a factory")
            name = name or model
        else:
            name = name or model.__name__
            factory = factory or model

        if name in self._descriptors:
            raise ValueError(f"Model '{name}' already registered")

        if attributes is None:
            attributes = factory().get_api_attributes()

        descriptor = ModelDescriptor(
            name=name, factory=factory, attributes=tuple(attributes)
        )
        self._descriptors[name] = descriptor
        logger.debug(f"Registered model {name} with attributes {descriptor.attributes}")
        return descriptor

    def register_model(self, model: Type[ApiModel]) -> Type[ApiModel]:
        """Class decorator form of register()"""
        self.register(model)
        return model

    def resolve(self, model_type: ModelType) -> ModelDescriptor:
        """
        Look up a model type by name or class

        Raises:
            ModelNotFoundError: If the type was never registered
        """
        name = model_type if isinstance(model_type, str) else getattr(
            model_type, "__name__", None
        )
        descriptor = self._descriptors.get(name) if name else None

        if descriptor is None:
            logger.error(f"❌ Unknown model type: {model_type}")
            raise ModelNotFoundError(model_type)

        return descriptor

    def create(self, model_type: ModelType) -> ApiModel:
        return self.resolve(model_type).factory()

    def names(self) -> list[str]:
        return list(self._descriptors.keys())

    def __contains__(self, model_type: object) -> bool:
        name = model_type if isinstance(model_type, str) else getattr(
            model_type, "__name__", None
        )
        return name in self._descriptors


default_registry = ModelRegistry()


def register_model(model: Type[ApiModel]) -> Type[ApiModel]:
    """Register a model class with the default registry"""
    return default_registry.register_model(model)
