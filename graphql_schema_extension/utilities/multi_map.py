from typing import Generic, TypeVar

K = TypeVar('K')
V = TypeVar('V')


class MultiMap(Generic[K, V], dict[K, list[V]]):
    """Dict of lists, values kept in insertion order per key."""

    def add(self, key: K, value: V):
        if (values := self.get(key)) is not None:
            values.append(value)
        else:
            self[key] = [value]

    def get_all(self, key: K) -> list[V]:
        return list(self.get(key, ()))
