from __future__ import annotations

from typing import Any, Iterable, Iterator, TypeVar

from typing_extensions import Protocol

T = TypeVar("T")


class ProgressbarType(Protocol):
    def __call__(
        self, iterable: Iterable[T], *args: Any, **kwargs: Any
    ) -> Iterator[T]: ...
