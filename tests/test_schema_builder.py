"""Tests for the graphql-core backed SchemaBuilder"""

from dataclasses import dataclass

import pytest
from graphql import GraphQLError, GraphQLSchema, graphql_sync

from graphql_schema_extension import Resolver, SchemaBuilder, SchemaExtensionConfiguration

LIBRARY_SCHEMA = """
type Query {
  book(id: ID!): Book
  search(term: String!): [SearchResult!]!
  addBook(input: BookInput!): Book
}

type Book {
  id: ID!
  title: String!
  authorName: String
}

type Author {
  name: String!
}

union SearchResult = Book | Author

input BookInput {
  title: String!
}
"""


@dataclass
class Book:
    id: str
    title: str
    author: str = 'unknown'


@dataclass
class Author:
    name: str


@dataclass
class BookInput:
    title: str


BOOKS = {'1': Book('1', 'Dune', 'Frank Herbert'), '2': Book('2', 'Emma', 'Jane Austen')}


class QueryResolver(Resolver):
    type_name = 'Query'

    def book(self, _root, _info, id):  # pylint: disable=[redefined-builtin]
        return BOOKS.get(id)

    def search(self, _root, _info, term):
        return [book for book in BOOKS.values() if term in book.title] + [Author(term)]

    def add_book(self, _root, _info, input):  # pylint: disable=[redefined-builtin]
        assert isinstance(input, BookInput)
        return Book('3', input.title)


class BookResolver(Resolver):
    type_name = 'Book'

    def author_name(self, book, _info):
        return book.author.upper()


def build_library_schema() -> GraphQLSchema:
    builder = SchemaBuilder()
    (
        SchemaExtensionConfiguration(builder)
        .schema_string(LIBRARY_SCHEMA)
        .dictionary('Book', Book)
        .dictionary('Author', Author)
        .dictionary('BookInput', BookInput)
        .resolvers(QueryResolver(), BookResolver())
    )
    return builder.build()


class TestBuild:
    def test_resolvers_are_bound_to_fields(self):
        """Test that methods are bound by exact and snake_case field names"""
        result = graphql_sync(build_library_schema(), '{ book(id: "1") { title authorName } }')

        assert result.errors is None
        assert result.data == {'book': {'title': 'Dune', 'authorName': 'FRANK HERBERT'}}

    def test_dictionary_resolves_union_members(self):
        result = graphql_sync(
            build_library_schema(),
            '{ search(term: "Dune") { __typename ... on Book { title } ... on Author { name } } }',
        )

        assert result.errors is None
        assert result.data == {
            'search': [
                {'__typename': 'Book', 'title': 'Dune'},
                {'__typename': 'Author', 'name': 'Dune'},
            ]
        }

    def test_dictionary_instantiates_input_types(self):
        result = graphql_sync(
            build_library_schema(), '{ addBook(input: {title: "Persuasion"}) { id title } }'
        )

        assert result.errors is None
        assert result.data == {'addBook': {'id': '3', 'title': 'Persuasion'}}

    def test_schema_strings_are_concatenated(self):
        schema = (
            SchemaBuilder()
            .schema_string('type Query { greeting: String }')
            .schema_string('extend type Query { farewell: String }')
            .build()
        )

        assert set(schema.query_type.fields) == {'greeting', 'farewell'}

    def test_later_resolver_overrides_earlier_one(self):
        class Hello(Resolver):
            type_name = 'Query'

            def greeting(self, _root, _info):
                return 'hello'

        class Hi(Resolver):
            type_name = 'Query'

            def greeting(self, _root, _info):
                return 'hi'

        schema = SchemaBuilder().schema_string('type Query { greeting: String }').resolvers(Hello(), Hi()).build()

        assert graphql_sync(schema, '{ greeting }').data == {'greeting': 'hi'}


class TestBuildErrors:
    def test_requires_schema_text(self):
        with pytest.raises(GraphQLError, match='No schema definition'):
            SchemaBuilder().build()

    def test_unknown_dictionary_type(self):
        builder = SchemaBuilder().schema_string('type Query { a: String }').dictionary('Missing', Book)

        with pytest.raises(GraphQLError, match="Unknown type 'Missing'"):
            builder.build()

    def test_dictionary_on_scalar_type(self):
        builder = SchemaBuilder().schema_string('type Query { a: String }').dictionary('String', str)

        with pytest.raises(GraphQLError, match='object or input object type'):
            builder.build()

    def test_resolver_for_non_object_type(self):
        class SearchResolver(Resolver):
            type_name = 'SearchResult'

        builder = SchemaBuilder().schema_string(LIBRARY_SCHEMA).resolvers(SearchResolver())

        with pytest.raises(GraphQLError, match='object types'):
            builder.build()

    def test_invalid_schema_text_propagates(self):
        with pytest.raises(GraphQLError):
            SchemaBuilder().schema_string('type Query {').build()


class TestResolver:
    def test_requires_type_name(self):
        class Nameless(Resolver):
            pass

        with pytest.raises(TypeError, match='type_name'):
            Nameless()

    def test_resolver_for(self):
        resolver = BookResolver()

        assert resolver.resolver_for('authorName') == resolver.author_name
        assert resolver.resolver_for('title') is None
        assert resolver.resolver_for('type_name') is None
        assert resolver.resolver_for('__typename') is None
