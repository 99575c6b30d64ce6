"""Stable contract namespace: choice types, configs, results and errors."""

from .errors import *  # noqa: F401,F403
from .errors import __all__ as _errors_all
from .model_families import *  # noqa: F401,F403
from .model_families import __all__ as _families_all
from .results import *  # noqa: F401,F403
from .results import __all__ as _results_all

__all__ = [*_errors_all, *_families_all, *_results_all]
