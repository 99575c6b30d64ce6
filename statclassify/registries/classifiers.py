from __future__ import annotations

from typing import Any, Callable, List

from statclassify.registries.base import Registry

# Fitting functions take (X, Y, *name_value_pairs, **options) and return a trained model.
ClassifierFactory = Callable[..., Any]

_CLASSIFIERS: Registry[ClassifierFactory] = Registry(name="fit_classifier")

_BUILTINS_LOADED = False


def register_classifier(family: str) -> Callable[[ClassifierFactory], ClassifierFactory]:
    """Decorator registering a fitting function under a family key ("svm", "net")."""
    return _CLASSIFIERS.register(family)


def _ensure_builtins() -> None:
    global _BUILTINS_LOADED
    if _BUILTINS_LOADED:
        return
    # Import triggers registration side-effects.
    from statclassify.use_cases import fitting as _  # noqa: F401

    _BUILTINS_LOADED = True


def fit_classifier(family: str, X, Y, *args: Any, **kwargs: Any) -> Any:
    """Fit the classifier registered under ``family`` (case-insensitive)."""

    _ensure_builtins()
    return _CLASSIFIERS.get(family)(X, Y, *args, **kwargs)


def list_classifiers() -> List[str]:
    _ensure_builtins()
    return _CLASSIFIERS.keys()
