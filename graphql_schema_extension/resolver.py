from typing import Any, Callable, ClassVar, Optional

from graphql_schema_extension.utilities.graphql_ import attribute_names_for_field

ResolverFunction = Callable[..., Any]


class Resolver:
    """Resolves the fields of one GraphQL object type.

    Subclasses set ``type_name`` and define one method per field they
    resolve, named after the field (``authorName`` or ``author_name``).
    Methods receive graphql-core's ``(parent, info, **arguments)``.
    """

    type_name: ClassVar[str]

    def __new__(cls, *args, **kwargs):
        if not getattr(cls, 'type_name', None):
            raise TypeError(f'{cls.__name__} does not define type_name')
        return super().__new__(cls)

    def resolver_for(self, field_name: str) -> Optional[ResolverFunction]:
        for attribute_name in attribute_names_for_field(field_name):
            if attribute_name.startswith('_') or attribute_name in _RESERVED_NAMES:
                continue
            method = getattr(self, attribute_name, None)
            if callable(method):
                return method
        return None

    def __repr__(self) -> str:
        return f'<{type(self).__name__} for {self.type_name}>'


_RESERVED_NAMES = frozenset({'type_name', 'resolver_for'})
