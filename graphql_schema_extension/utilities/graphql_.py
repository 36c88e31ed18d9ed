from typing import Optional

from graphql import GraphQLError, GraphQLNamedType, GraphQLSchema
from graphql.pyutils import camel_to_snake


def get_named_type(schema: GraphQLSchema, type_name: str) -> GraphQLNamedType:
    type_: Optional[GraphQLNamedType] = schema.get_type(type_name)
    if type_ is None:
        raise GraphQLError(f"Unknown type '{type_name}'.")
    return type_


# GraphQL field names are usually camelCase while Python methods are
# snake_case, so both spellings are accepted, the exact name first.
def attribute_names_for_field(field_name: str) -> list[str]:
    snake_name = camel_to_snake(field_name)
    if snake_name == field_name:
        return [field_name]
    return [field_name, snake_name]
