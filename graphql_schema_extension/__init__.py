from graphql_schema_extension.configuration import SchemaExtensionConfiguration
from graphql_schema_extension.data_loader import (
    BatchLoader,
    ContextBatchLoaderBuilder,
    DataLoaderBuilder,
    DataLoaderOptions,
    build_data_loaders,
)
from graphql_schema_extension.resolver import Resolver
from graphql_schema_extension.resources import SchemaResourceError
from graphql_schema_extension.schema_builder import SchemaBuilder, SchemaParserBuilder

__all__ = [
    'BatchLoader',
    'ContextBatchLoaderBuilder',
    'DataLoaderBuilder',
    'DataLoaderOptions',
    'Resolver',
    'SchemaBuilder',
    'SchemaExtensionConfiguration',
    'SchemaParserBuilder',
    'SchemaResourceError',
    'build_data_loaders',
]
