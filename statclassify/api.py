"""Public statclassify API.

This module is the **stable public surface**. Prefer importing from here
instead of reaching into internal subpackages:

    from statclassify.api import ClassificationSVM, fitcsvm

The underlying implementations live under :mod:`statclassify.use_cases`.
"""

from __future__ import annotations

from statclassify.use_cases import (
    ClassificationNeuralNetwork,
    ClassificationSVM,
    fitcnet,
    fitcsvm,
)

# Non-use-case helpers that are still part of the stable public surface.
from statclassify.components.solvers import LibsvmModel, LibsvmRequest, svmpredict, svmtrain
from statclassify.contracts.model_families import NeuralNetworkConfig, SVMConfig
from statclassify.core.formula import parse_formula
from statclassify.registries import fit_classifier, list_classifiers

__all__ = [
    "ClassificationSVM",
    "ClassificationNeuralNetwork",
    "fitcsvm",
    "fitcnet",
    "fit_classifier",
    "list_classifiers",
    "svmtrain",
    "svmpredict",
    "LibsvmModel",
    "LibsvmRequest",
    "SVMConfig",
    "NeuralNetworkConfig",
    "parse_formula",
]
