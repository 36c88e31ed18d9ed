import logging
from typing import Any, Protocol, cast

from graphql import (
    GraphQLError,
    GraphQLObjectType,
    GraphQLResolveInfo,
    GraphQLSchema,
    build_schema,
    is_input_object_type,
    is_object_type,
)

from graphql_schema_extension.resolver import Resolver
from graphql_schema_extension.utilities.graphql_ import get_named_type
from graphql_schema_extension.utilities.multi_map import MultiMap

logger = logging.getLogger(__name__)


class SchemaParserBuilder(Protocol):
    """What the configuration facade needs from a schema builder."""

    def dictionary(self, name: str, type_: type) -> Any:
        ...

    def schema_string(self, text: str) -> Any:
        ...

    def resolvers(self, *resolvers: Resolver) -> Any:
        ...


class SchemaBuilder:
    """Accumulates schema text, dictionary entries and resolvers, then
    builds an executable ``GraphQLSchema`` with graphql-core.

    Not thread-safe.
    """

    schema_strings: list[str]
    dictionary_entries: dict[str, type]
    resolvers_by_type: MultiMap[str, Resolver]

    def __init__(self):
        self.schema_strings = []
        self.dictionary_entries = {}
        self.resolvers_by_type = MultiMap()

    def dictionary(self, name: str, type_: type) -> 'SchemaBuilder':
        self.dictionary_entries[name] = type_
        return self

    def schema_string(self, text: str) -> 'SchemaBuilder':
        self.schema_strings.append(text)
        return self

    def resolvers(self, *resolvers: Resolver) -> 'SchemaBuilder':
        for resolver in resolvers:
            self.resolvers_by_type.add(resolver.type_name, resolver)
        return self

    def build(self) -> GraphQLSchema:
        if not self.schema_strings:
            raise GraphQLError('No schema definition was provided.')

        schema = build_schema('\n'.join(self.schema_strings))

        for name, type_ in self.dictionary_entries.items():
            bind_dictionary_entry(schema, name, type_)

        for type_name in self.resolvers_by_type:
            bind_resolvers(schema, type_name, self.resolvers_by_type.get_all(type_name))

        logger.debug(
            'Built schema from %d definition(s), %d dictionary entries, resolvers for %s',
            len(self.schema_strings),
            len(self.dictionary_entries),
            sorted(self.resolvers_by_type),
        )
        return schema


def bind_dictionary_entry(schema: GraphQLSchema, name: str, type_: type) -> None:
    graphql_type = get_named_type(schema, name)

    if is_object_type(graphql_type):
        # Used by graphql-core to pick the concrete type behind unions and
        # interfaces, and to check values returned for object fields.
        def is_type_of(value: Any, _info: GraphQLResolveInfo) -> bool:
            return isinstance(value, type_)

        graphql_type.is_type_of = is_type_of
    elif is_input_object_type(graphql_type):
        def out_type(values: dict[str, Any]) -> Any:
            return type_(**values)

        graphql_type.out_type = out_type
    else:
        raise GraphQLError(
            f"Dictionary entry '{name}' must name an object or input object type,"
            f' not {graphql_type}.'
        )


def bind_resolvers(schema: GraphQLSchema, type_name: str, resolvers: list[Resolver]) -> None:
    graphql_type = get_named_type(schema, type_name)
    if not is_object_type(graphql_type):
        raise GraphQLError(f"Resolvers can only be bound to object types, '{type_name}' is not one.")

    for field_name, field in cast(GraphQLObjectType, graphql_type).fields.items():
        for resolver in resolvers:
            if (resolve := resolver.resolver_for(field_name)) is not None:
                field.resolve = resolve
