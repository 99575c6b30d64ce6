from __future__ import annotations

"""Public shape/orientation utilities.

Conventions
-----------
- X is 2D: (n_samples, n_features)
- Y is 1D: (n_samples,); an (n_samples, 1) column is flattened.

Every helper takes the ``component`` name of the caller so errors carry the
right message prefix.
"""

from typing import Tuple

import numpy as np
import pandas as pd

from statclassify.contracts.errors import (
    DomainError,
    MissingValueError,
    OptionTypeError,
    ShapeError,
)

_NUMERIC_KINDS = "biuf"


def is_numeric_array(a: np.ndarray) -> bool:
    return a.dtype.kind in _NUMERIC_KINDS


def n_rows(a) -> int:
    """Row count of an array-like (a 1D input counts one row per element)."""
    arr = np.asarray(a)
    if arr.ndim == 0:
        return 1
    return int(arr.shape[0])


def coerce_predictors(X, *, component: str, name: str = "X") -> np.ndarray:
    """Return X as a non-empty, finite 2D float array.

    - Accepts 1D and reshapes to (n_samples, 1)
    - Enforces 2D, numeric and non-empty.
    - NaN is a missing value; +/-inf is out of domain.
    """

    X = np.asarray(X)
    if not is_numeric_array(X):
        raise OptionTypeError(component, f"{name} must be a numeric matrix.")
    if X.ndim == 1:
        X = X[:, None]
    if X.ndim != 2:
        raise ShapeError(component, f"{name} must be a 2D matrix; got shape {X.shape}.")
    if X.shape[0] < 1 or X.shape[1] < 1:
        raise ShapeError(component, f"{name} must have at least 1 observation and 1 predictor.")

    X = X.astype(float, copy=False)
    if np.isnan(X).any():
        raise MissingValueError(component, f"{name} must not contain missing values.")
    if not np.isfinite(X).all():
        raise DomainError(component, f"{name} must contain finite values.")
    return X


def _label_vector(Y, component: str, name: str) -> np.ndarray:
    Y = np.asarray(Y)
    if Y.ndim == 2 and 1 in Y.shape:
        Y = Y.ravel()
    elif Y.ndim == 0:
        Y = Y.reshape(1)
    if Y.ndim != 1:
        raise ShapeError(component, f"{name} must be a vector; got shape {Y.shape}.")
    return Y


def coerce_labels(Y, *, component: str, name: str = "Y") -> np.ndarray:
    """Return Y as a 1D numeric label vector, finite and without NaN."""

    Y = np.asarray(Y)
    if not is_numeric_array(Y):
        raise OptionTypeError(component, f"{name} must be a numeric array.")
    Y = _label_vector(Y, component, name).astype(float, copy=False)
    if np.isnan(Y).any():
        raise MissingValueError(component, f"{name} must not contain missing values.")
    if not np.isfinite(Y).all():
        raise DomainError(component, f"{name} must contain finite values.")
    return Y


def coerce_class_labels(Y, *, component: str, name: str = "Y") -> np.ndarray:
    """Return Y as a 1D label vector; numeric or categorical (strings or pandas Categorical)."""

    if is_numeric_array(np.asarray(Y)):
        return coerce_labels(Y, component=component, name=name)
    Y = _label_vector(np.asarray(Y, dtype=object), component, name)
    if pd.isna(Y).any():
        raise MissingValueError(component, f"{name} must not contain missing values.")
    return Y


def encode_labels(Y: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Map labels to codes 0..K-1; returns ``(codes, class_names)`` with classes sorted."""
    codes, uniques = pd.factorize(Y, sort=True)
    return np.asarray(codes, dtype=int), np.asarray(uniques)


def ensure_same_rows(X, Y, *, component: str) -> None:
    """Strict row-count check; runs before any other validation."""
    if n_rows(X) != n_rows(Y):
        raise ShapeError(component, "number of rows in X and Y must be equal.")


def coerce_training_data(X, Y, *, component: str) -> Tuple[np.ndarray, np.ndarray]:
    """Row check, then label and predictor coercion (no transposition, no truncation)."""

    ensure_same_rows(X, Y, component=component)
    Y = coerce_labels(Y, component=component)
    X = coerce_predictors(X, component=component)
    return X, Y


def coerce_prediction_data(XC, *, n_features: int, component: str) -> np.ndarray:
    """Validate XC against the predictor count the model was trained on.

    A 1D XC is read as a single observation, unless the model has a single
    predictor, in which case it is a column of observations.
    """

    XC = np.asarray(XC)
    if XC.size == 0:
        raise ShapeError(component, "XC must not be empty.")
    if XC.ndim == 1:
        XC = XC[:, None] if n_features == 1 else XC[None, :]
    XC = coerce_predictors(XC, component=component, name="XC")
    if XC.shape[1] != int(n_features):
        raise ShapeError(
            component,
            f"XC must have the same number of features ({int(n_features)}) as the "
            f"training data; got {XC.shape[1]}.",
        )
    return XC
