import logging
from dataclasses import dataclass
from typing import (
    TYPE_CHECKING,
    Any,
    Awaitable,
    Callable,
    Generic,
    Hashable,
    Optional,
    Protocol,
    Sequence,
    TypeVar,
)

from strawberry.dataloader import DataLoader

if TYPE_CHECKING:
    from graphql_schema_extension.configuration import SchemaExtensionConfiguration

logger = logging.getLogger(__name__)

K = TypeVar('K')
V = TypeVar('V')

# Loads a batch of keys given the request context, values in key order.
BatchLoader = Callable[[list[K], Any], Awaitable[Sequence[V]]]


@dataclass
class DataLoaderOptions:
    max_batch_size: Optional[int] = None
    cache: bool = True
    cache_key_fn: Optional[Callable[[Any], Hashable]] = None


class DataLoaderBuilder(Protocol):
    def build_data_loader(self, options: DataLoaderOptions) -> DataLoader:
        ...


class ContextBatchLoaderBuilder(Generic[K, V]):
    """Builds data loaders that call a batch loader with a fixed context."""

    batch_loader: BatchLoader
    context: Any

    def __init__(self, batch_loader: BatchLoader, context: Any):
        self.batch_loader = batch_loader
        self.context = context

    async def load(self, keys: list[K]) -> Sequence[V]:
        return await self.batch_loader(keys, self.context)

    def build_data_loader(self, options: DataLoaderOptions) -> DataLoader:
        return DataLoader(
            load_fn=self.load,
            max_batch_size=options.max_batch_size,
            cache=options.cache,
            cache_key_fn=options.cache_key_fn,
        )


def build_data_loaders(
    configuration: 'SchemaExtensionConfiguration',
    context: Any,
    options: Optional[DataLoaderOptions] = None,
) -> dict[str, DataLoader]:
    """Assemble the loaders for one request.

    Registered data loaders are passed through as they are. Every batch
    loader gets a fresh ``DataLoader`` bound to ``context``, which replaces a
    data loader registered under the same key. Call once per request, so
    loader caches never outlive it.
    """
    if options is None:
        options = DataLoaderOptions()

    loaders: dict[str, Any] = dict(configuration.get_data_loaders())
    for key, batch_loader in configuration.get_batch_loaders().items():
        if key in loaders:
            logger.warning("Batch loader '%s' replaces the data loader registered under that key", key)
        loaders[key] = ContextBatchLoaderBuilder(batch_loader, context).build_data_loader(options)

    return loaders
