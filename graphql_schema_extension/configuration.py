import logging
import threading
from types import MappingProxyType
from typing import Any, Mapping

from graphql_schema_extension.data_loader import BatchLoader
from graphql_schema_extension.resolver import Resolver
from graphql_schema_extension.resources import ResourceAnchor, read_resource
from graphql_schema_extension.schema_builder import SchemaParserBuilder
from graphql_schema_extension.utilities.predicates import require_not_none

logger = logging.getLogger(__name__)


class SchemaExtensionConfiguration:
    """Collects the schema definitions and loaders contributed by one
    schema extension.

    Schema related calls are forwarded to the wrapped schema builder, loaders
    are kept here until the wiring code reads them back. Loader registration
    is thread-safe, calls forwarded to the schema builder are not
    synchronised.
    """

    schema_builder: SchemaParserBuilder

    def __init__(self, schema_builder: SchemaParserBuilder):
        self.schema_builder = require_not_none(schema_builder, 'schema_builder')
        self._data_loaders: dict[str, Any] = {}
        self._batch_loaders: dict[str, BatchLoader] = {}
        self._lock = threading.Lock()

    def get_data_loaders(self) -> Mapping[str, Any]:
        with self._lock:
            return MappingProxyType(dict(self._data_loaders))

    def get_batch_loaders(self) -> Mapping[str, BatchLoader]:
        with self._lock:
            return MappingProxyType(dict(self._batch_loaders))

    def dictionary(self, name: str, type_: type) -> 'SchemaExtensionConfiguration':
        require_not_none(name, 'name')
        require_not_none(type_, 'type_')
        self.schema_builder.dictionary(name, type_)
        logger.debug('Added dictionary entry %s -> %r', name, type_)
        return self

    def schema_string(self, text: str) -> 'SchemaExtensionConfiguration':
        require_not_none(text, 'text')
        self.schema_builder.schema_string(text)
        return self

    def schema_resource(self, anchor: ResourceAnchor, name: str) -> 'SchemaExtensionConfiguration':
        require_not_none(anchor, 'anchor')
        require_not_none(name, 'name')
        return self.schema_string(read_resource(anchor, name))

    def resolvers(self, *resolvers: Resolver) -> 'SchemaExtensionConfiguration':
        for resolver in resolvers:
            require_not_none(resolver, 'resolver in resolvers')
        self.schema_builder.resolvers(*resolvers)
        logger.debug('Added resolvers %s', resolvers)
        return self

    def data_loader(self, key: str, loader: Any) -> 'SchemaExtensionConfiguration':
        require_not_none(key, 'key')
        require_not_none(loader, 'loader')
        with self._lock:
            self._data_loaders[key] = loader
        logger.debug('Registered data loader %s', key)
        return self

    def batch_loader(self, key: str, loader: BatchLoader) -> 'SchemaExtensionConfiguration':
        require_not_none(key, 'key')
        require_not_none(loader, 'loader')
        with self._lock:
            self._batch_loaders[key] = loader
        logger.debug('Registered batch loader %s', key)
        return self

    def get_schema_builder(self) -> SchemaParserBuilder:
        return self.schema_builder
