from __future__ import annotations

from typing import Any, List, Optional

import numpy as np


def owned_copy(a: Any) -> np.ndarray:
    """Private, read-only copy of an array-like."""
    arr = np.array(a, copy=True)
    arr.flags.writeable = False
    return arr


def default_predictor_names(n_features: int) -> List[str]:
    return [f"x{i + 1}" for i in range(n_features)]


class ReadOnlyModel:
    """Trained models are populated once in ``__init__`` and frozen afterwards."""

    _frozen: bool = False

    def __setattr__(self, name: str, value: Any) -> None:
        if self._frozen:
            raise AttributeError(f"{type(self).__name__} is read-only; cannot set {name!r}")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if self._frozen:
            raise AttributeError(f"{type(self).__name__} is read-only; cannot delete {name!r}")
        super().__delattr__(name)

    def _freeze(self) -> None:
        object.__setattr__(self, "_frozen", True)

    @staticmethod
    def _names(names: Optional[List[str]], n_features: int) -> List[str]:
        if names is None:
            return default_predictor_names(n_features)
        names = [str(n) for n in names]
        if len(names) != n_features:
            raise ValueError(f"expected {n_features} predictor names, got {len(names)}")
        return names
