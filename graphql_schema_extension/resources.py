import importlib
import inspect
import logging
from importlib.resources import files
from types import ModuleType
from typing import Union

logger = logging.getLogger(__name__)

ResourceAnchor = Union[ModuleType, type, str]


class SchemaResourceError(RuntimeError):
    """A schema resource could not be found, read or decoded.

    The underlying error is available as ``__cause__``.
    """

    def __init__(self, resource_name: str, message: str):
        super().__init__(f'resource {resource_name} {message}')
        self.resource_name = resource_name


def anchor_package(anchor: ResourceAnchor) -> str:
    if inspect.isclass(anchor):
        anchor = anchor.__module__
    if isinstance(anchor, str):
        anchor = importlib.import_module(anchor)

    if hasattr(anchor, '__path__'):
        return anchor.__name__
    package = anchor.__spec__.parent if anchor.__spec__ is not None else anchor.__package__
    if not package:
        raise ModuleNotFoundError(f'{anchor.__name__} is not part of a package', name=anchor.__name__)
    return package


# Names starting with '/' are looked up from the top-level package of the
# anchor, everything else next to the anchor.
def read_resource(anchor: ResourceAnchor, name: str) -> str:
    try:
        package = anchor_package(anchor)
        if name.startswith('/'):
            package = package.partition('.')[0]
        resource = files(package).joinpath(name.lstrip('/'))
        with resource.open('rb') as stream:
            data = stream.read()
    except FileNotFoundError as e:
        raise SchemaResourceError(name, 'not found') from e
    except (OSError, ImportError) as e:
        raise SchemaResourceError(name, f'could not be read: {e}') from e

    try:
        text = data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise SchemaResourceError(name, 'is not valid UTF-8') from e

    logger.debug('Read schema resource %s from package %s (%d bytes)', name, package, len(data))
    return text
