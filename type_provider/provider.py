"""The `type` provider: metadata and data source registry."""
from typing import Any, Callable, Dict, List

from .attributes import AttributeSchema
from .data_source import ValidateJsonDataSource
from .errors import ConfigurationError

DATA_SOURCE_FACTORIES = [ValidateJsonDataSource]


class TypeProvider:
    type_name = "type"

    def __init__(self, version: str = "dev"):
        # "dev" for local builds, "test" under the test suite
        self.version = version
        self.schema = AttributeSchema([])
        self._data_sources = {}
        for factory in DATA_SOURCE_FACTORIES:
            data_source = factory()
            self._data_sources[data_source.type_name(self.type_name)] = data_source

    def metadata(self) -> Dict[str, Any]:
        return {
            "type_name": self.type_name,
            "version": self.version,
            "data_sources": self.data_source_names(),
            "resources": [],
            "functions": [],
        }

    def data_source_names(self) -> List[str]:
        return sorted(self._data_sources)

    def data_source(self, type_name: str):
        try:
            return self._data_sources[type_name]
        except KeyError:
            raise ConfigurationError(f"unknown data source {type_name!r}") from None

    def get_schema(self) -> Dict[str, Any]:
        return {
            "provider": self.schema.to_dict(),
            "data_sources": {name: ds.schema.to_dict() for name, ds in sorted(self._data_sources.items())},
        }


def new(version: str) -> Callable[[], TypeProvider]:
    def factory() -> TypeProvider:
        return TypeProvider(version=version)
    return factory
