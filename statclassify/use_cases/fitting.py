from __future__ import annotations

"""Fitting functions: ``fitcsvm`` and ``fitcnet``.

Both accept X as a numeric matrix or a pandas DataFrame. With a DataFrame, Y
may be the response column name, a ``"y ~ x1 + x2"`` formula, or a label
vector.
"""

from typing import Any

import numpy as np
import pandas as pd

from statclassify.contracts.errors import ArityError, DomainError, MissingValueError, OptionTypeError
from statclassify.core.formula import resolve_table_inputs
from statclassify.core.shapes import ensure_same_rows, is_numeric_array
from statclassify.registries.classifiers import register_classifier
from statclassify.use_cases.classification_svm import ClassificationSVM
from statclassify.use_cases.neural_network import ClassificationNeuralNetwork


def _table_inputs(X, Y, component: str):
    if isinstance(X, pd.DataFrame):
        return resolve_table_inputs(X, Y, component=component)
    return X, Y, None, None


@register_classifier("svm")
def fitcsvm(X, Y, *args: Any, **kwargs: Any) -> ClassificationSVM:
    """Fit a Support Vector Machine classification model.

    All name/value options of :class:`ClassificationSVM` are accepted.
    """
    X, Y, predictor_names, response_name = _table_inputs(X, Y, "fitcsvm")
    return ClassificationSVM(
        X, Y, *args, predictor_names=predictor_names, response_name=response_name, **kwargs
    )


@register_classifier("net")
def fitcnet(X, Y, *args: Any, **kwargs: Any) -> ClassificationNeuralNetwork:
    """Fit a Neural Network classification model.

    Options: ``NumLayers`` (1), ``NumNeurons`` ([10]), ``ActivationFunction``
    ("ReLU" | "Sigmoid" | "Tanh" | "Softmax"), ``LearningRate`` (0.01),
    ``Epochs`` (100), ``BatchSize`` (32), ``ValidationData``
    (``{"XVal": ..., "YVal": ...}``) and ``Verbose`` (1).

    Y may hold numeric or categorical labels.
    """
    if len(args) % 2 != 0:
        raise ArityError("fitcnet", "Name-Value arguments must be in pairs.")

    X, Y, predictor_names, response_name = _table_inputs(X, Y, "fitcnet")

    ensure_same_rows(X, Y, component="fitcnet")

    X_arr = np.asarray(X)
    if not is_numeric_array(X_arr):
        raise OptionTypeError("fitcnet", "X must be a numeric matrix.")

    Y_arr = np.asarray(Y)
    if np.isnan(X_arr.astype(float)).any() or pd.isna(Y_arr).any():
        raise MissingValueError("fitcnet", "X and Y must not contain missing values.")
    if not np.isfinite(X_arr.astype(float)).all():
        raise DomainError("fitcnet", "X must contain finite values.")

    return ClassificationNeuralNetwork(
        X, Y, *args, predictor_names=predictor_names, response_name=response_name, **kwargs
    )
