"""Process-wide runtime settings read from the environment.

STATCLASSIFY_SEED   root seed for cross-validation folds and network init (default 0)
"""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict


class RuntimeSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    seed: int = 0


@lru_cache(maxsize=1)
def get_settings() -> RuntimeSettings:
    raw = os.getenv("STATCLASSIFY_SEED", "").strip()
    if not raw:
        return RuntimeSettings()
    return RuntimeSettings(seed=int(raw))
