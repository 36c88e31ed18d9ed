from typing import Optional, TypeVar

T = TypeVar('T')


def require_not_none(value: Optional[T], name: str) -> T:
    if value is None:
        raise ValueError(f'{name} is None')
    return value
