from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, Iterator, List, Optional, TypeVar

from statclassify.contracts.errors import UnsupportedValueError

V = TypeVar("V")


@dataclass
class Registry(Generic[V]):
    """Name -> value table with case-insensitive keys.

    Typical usage:
        FITTERS = Registry[Callable[..., Any]](name="classifiers")

        @FITTERS.register("svm")
        def fitcsvm(X, Y, *args, **kwargs):
            ...

        fit = FITTERS.get("SVM")
    """

    name: str = "registry"
    _items: Dict[str, V] = field(default_factory=dict)

    @staticmethod
    def _key(key: str) -> str:
        return str(key).strip().lower()

    def register(self, key: str) -> Callable[[V], V]:
        k = self._key(key)

        def deco(value: V) -> V:
            current = self._items.get(k)
            if current is not None and current is not value:
                raise ValueError(f"{self.name}: {key!r} is already registered")
            self._items[k] = value
            return value

        return deco

    def get(self, key: str) -> V:
        k = self._key(key)
        if k not in self._items:
            raise UnsupportedValueError(
                self.name, f"unknown key {key!r}; expected one of {self.keys()}."
            )
        return self._items[k]

    def try_get(self, key: str, default: Optional[V] = None) -> Optional[V]:
        return self._items.get(self._key(key), default)

    def keys(self) -> List[str]:
        return sorted(self._items)

    def __contains__(self, key: str) -> bool:
        return self._key(key) in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())
