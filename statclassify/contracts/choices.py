from __future__ import annotations

"""Literal-based "choice" types used across the config contracts.

This module centralizes the small enumerations (TypeAlias + Literal) shared by
the model families, the option parser and the solver adapters.

Design intent:
- Keep this file dependency-free (stdlib + typing only).
- Canonical spellings live here; case-insensitive matching happens in the
  option parser.
"""

from typing import Dict, Literal, TypeAlias


# -----------------------------
# SVM
# -----------------------------

SVMType: TypeAlias = Literal["C_SVC", "nu_SVC", "one_class_SVM"]
SVMKernel: TypeAlias = Literal["linear", "polynomial", "rbf", "sigmoid", "precomputed"]
SVMSolver: TypeAlias = Literal["SMO", "ISDA"]

# Integer codes understood by the libsvm option grammar (-s / -t).
SVM_TYPE_CODES: Dict[str, int] = {
    "C_SVC": 0,
    "nu_SVC": 1,
    "one_class_SVM": 2,
}

KERNEL_CODES: Dict[str, int] = {
    "linear": 0,
    "polynomial": 1,
    "rbf": 2,
    "sigmoid": 3,
    "precomputed": 4,
}


# -----------------------------
# Neural networks
# -----------------------------

ActivationName: TypeAlias = Literal["ReLU", "Sigmoid", "Tanh", "Softmax"]

# Hidden-layer activation used by sklearn's MLPClassifier. The output layer is
# always softmax/logistic, so "Softmax" hidden units become identity units.
ACTIVATION_TO_SKLEARN: Dict[str, str] = {
    "ReLU": "relu",
    "Sigmoid": "logistic",
    "Tanh": "tanh",
    "Softmax": "identity",
}


def canonical_choice(value: str, choices: Dict[str, int] | tuple[str, ...]) -> str | None:
    """Return the canonical spelling of ``value`` among ``choices`` (case-insensitive)."""
    lowered = value.lower()
    for name in choices:
        if name.lower() == lowered:
            return name
    return None
