from __future__ import annotations

import hashlib

from statclassify.runtime.settings import get_settings


class RngManager:
    """
    Single source of truth for randomness.
    Creates named, order-independent child seeds by hashing:
      child_seed(name) -> stable int seed
    so identical inputs always produce identical folds and network weights.
    """

    def __init__(self, seed: int | None = None):
        if seed is None:
            seed = get_settings().seed
        self._root = int(seed) & 0xFFFFFFFF

    def _mix(self, name: str) -> int:
        # Stable across runs and Python versions
        h = hashlib.sha256(f"{self._root}:{name}".encode("utf-8")).digest()
        # Use 32 bits for compatibility with libraries expecting uint32 seeds
        return int.from_bytes(h[:4], "little", signed=False)

    def child_seed(self, name: str) -> int:
        return self._mix(name)
