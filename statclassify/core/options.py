from __future__ import annotations

"""Name/value option parsing for the classifier constructors.

Options arrive as ``name, value`` pairs (positional, after X and Y) followed
by keyword arguments, in call order. Names are matched case-insensitively
against a closed enumeration per model family; each kind has exactly one
validator, checked at import time.

Pairs are folded left to right into a plain dict of config fields, so the
last occurrence of a repeated option wins. The dict is then handed to the
family's frozen pydantic config.
"""

from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Type, TypeVar

import numpy as np

from statclassify.contracts.choices import (
    ACTIVATION_TO_SKLEARN,
    KERNEL_CODES,
    SVM_TYPE_CODES,
    canonical_choice,
)
from statclassify.contracts.errors import (
    ArityError,
    DomainError,
    OptionTypeError,
    UnknownOptionError,
    UnsupportedValueError,
)
from statclassify.contracts.model_families import NeuralNetworkConfig, SVMConfig, ValidationData
from statclassify.core.shapes import coerce_class_labels, coerce_predictors, ensure_same_rows

OptionPair = Tuple[str, Any]
Validator = Callable[[Any, str], Any]
E = TypeVar("E", bound=Enum)

# Smallest non-zero value printed by the option string: "%f" floats and "%.2f" weights.
FIXED_RESOLUTION = 1e-6
WEIGHT_RESOLUTION = 0.01


class SVMOption(str, Enum):
    """Options recognised by ClassificationSVM; values are config field names."""

    SVM_TYPE = "svm_type"
    KERNEL_FUNCTION = "kernel_function"
    POLYNOMIAL_ORDER = "polynomial_order"
    GAMMA = "gamma"
    KERNEL_OFFSET = "kernel_offset"
    BOX_CONSTRAINT = "box_constraint"
    NU = "nu"
    CACHE_SIZE = "cache_size"
    TOLERANCE = "tolerance"
    KKT_TOLERANCE = "kkt_tolerance"
    SHRINKING = "shrinking"
    PROBABILITY_ESTIMATES = "probability_estimates"
    WEIGHT = "weight"
    KFOLD = "kfold"
    SOLVER = "solver"

    @property
    def label(self) -> str:
        return _SVM_LABELS[self]


class NetOption(str, Enum):
    """Options recognised by ClassificationNeuralNetwork."""

    NUM_LAYERS = "num_layers"
    NUM_NEURONS = "num_neurons"
    ACTIVATION_FUNCTION = "activation_function"
    LEARNING_RATE = "learning_rate"
    EPOCHS = "epochs"
    BATCH_SIZE = "batch_size"
    VALIDATION_DATA = "validation_data"
    VERBOSE = "verbose"

    @property
    def label(self) -> str:
        return _NET_LABELS[self]


class PredictOption(str, Enum):
    """Options recognised by the ``predict`` methods."""

    PROBABILITY_ESTIMATES = "probability_estimates"

    @property
    def label(self) -> str:
        return "ProbabilityEstimates"


_SVM_LABELS: Dict[SVMOption, str] = {
    SVMOption.SVM_TYPE: "SVMType",
    SVMOption.KERNEL_FUNCTION: "KernelFunction",
    SVMOption.POLYNOMIAL_ORDER: "PolynomialOrder",
    SVMOption.GAMMA: "Gamma",
    SVMOption.KERNEL_OFFSET: "KernelOffset",
    SVMOption.BOX_CONSTRAINT: "BoxConstraint",
    SVMOption.NU: "Nu",
    SVMOption.CACHE_SIZE: "CacheSize",
    SVMOption.TOLERANCE: "Tolerance",
    SVMOption.KKT_TOLERANCE: "KKTTolerance",
    SVMOption.SHRINKING: "Shrinking",
    SVMOption.PROBABILITY_ESTIMATES: "ProbabilityEstimates",
    SVMOption.WEIGHT: "Weight",
    SVMOption.KFOLD: "KFold",
    SVMOption.SOLVER: "Solver",
}

_NET_LABELS: Dict[NetOption, str] = {
    NetOption.NUM_LAYERS: "NumLayers",
    NetOption.NUM_NEURONS: "NumNeurons",
    NetOption.ACTIVATION_FUNCTION: "ActivationFunction",
    NetOption.LEARNING_RATE: "LearningRate",
    NetOption.EPOCHS: "Epochs",
    NetOption.BATCH_SIZE: "BatchSize",
    NetOption.VALIDATION_DATA: "ValidationData",
    NetOption.VERBOSE: "Verbose",
}


# -----------------------------
# Pair handling
# -----------------------------


def split_name_value_pairs(
    args: Sequence[Any],
    kwargs: Optional[Mapping[str, Any]] = None,
    *,
    component: str,
) -> List[OptionPair]:
    """Turn ``(name, value, ...)`` plus keyword options into an ordered pair list."""

    if len(args) % 2 != 0:
        raise ArityError(component, "Name-Value arguments must be in pairs.")
    pairs: List[OptionPair] = list(zip(args[0::2], args[1::2]))
    pairs.extend((kwargs or {}).items())
    for name, _ in pairs:
        if not isinstance(name, str):
            raise OptionTypeError(component, "option names must be strings.")
    return pairs


def lookup_option(kinds: Type[E], name: str, *, component: str) -> E:
    """Match an option name against ``kinds`` (case-insensitive)."""

    key = name.strip().lower()
    for kind in kinds:
        if key in (kind.label.lower(), kind.value):
            return kind
    raise UnknownOptionError(
        component, f"invalid parameter name '{name}' in optional pair arguments."
    )


def fold_options(
    pairs: Iterable[OptionPair],
    kinds: Type[E],
    validators: Mapping[E, Validator],
    *,
    component: str,
) -> Dict[str, Any]:
    """Validate each pair in order; later occurrences overwrite earlier ones."""

    resolved: Dict[str, Any] = {}
    for name, value in pairs:
        kind = lookup_option(kinds, name, component=component)
        resolved[kind.value] = validators[kind](value, component)
    return resolved


def _check_complete(kinds: Type[E], validators: Mapping[E, Validator]) -> None:
    missing = set(kinds) - set(validators)
    if missing:
        raise RuntimeError(f"no validator registered for {sorted(k.name for k in missing)}")


# -----------------------------
# Scalar checks
# -----------------------------


def _real_scalar(value: Any) -> Optional[float]:
    """Return value as float if it is a finite real numeric scalar, else None."""
    if isinstance(value, (bool, np.bool_, str, bytes)):
        return None
    arr = np.asarray(value)
    if arr.size != 1 or arr.dtype.kind not in "iuf":
        return None
    x = float(arr.reshape(-1)[0])
    return x if np.isfinite(x) else None


def _is_integral(x: float) -> bool:
    return float(x).is_integer()


def _string_choice(value: Any, choices, label: str, component: str) -> str:
    if not isinstance(value, str):
        raise OptionTypeError(component, f"{label} must be a string.")
    name = canonical_choice(value, choices)
    if name is None:
        raise UnsupportedValueError(component, f"unsupported {label} '{value}'.")
    return name


def _positive(label: str, resolution: Optional[float] = None) -> Validator:
    """Positive scalar; with ``resolution``, values the option string would print as 0 are rejected."""

    def check(value: Any, component: str) -> float:
        x = _real_scalar(value)
        if x is None or not x > 0:
            raise DomainError(component, f"{label} must be a positive scalar.")
        if resolution is not None and x < resolution:
            raise DomainError(component, f"{label} must be a positive scalar of at least {resolution:g}.")
        return x

    return check


def _non_negative(label: str, resolution: Optional[float] = None) -> Validator:
    def check(value: Any, component: str) -> float:
        x = _real_scalar(value)
        if x is None or not x >= 0:
            raise DomainError(component, f"{label} must be a non-negative scalar.")
        if resolution is not None and 0 < x < resolution:
            raise DomainError(component, f"{label} must be either 0 or at least {resolution:g}.")
        return x

    return check


def _positive_integer(label: str) -> Validator:
    def check(value: Any, component: str) -> int:
        x = _real_scalar(value)
        if x is None or not (x > 0 and _is_integral(x)):
            raise DomainError(component, f"{label} must be a positive integer.")
        return int(x)

    return check


def _flag(label: str) -> Validator:
    def check(value: Any, component: str) -> bool:
        if isinstance(value, (bool, np.bool_)):
            return bool(value)
        x = _real_scalar(value)
        if x is None or x not in (0.0, 1.0):
            raise DomainError(component, f"{label} must be either 0 or 1.")
        return bool(x)

    return check


# -----------------------------
# SVM validators
# -----------------------------


def _svm_type(value: Any, component: str) -> str:
    return _string_choice(value, SVM_TYPE_CODES, "SVMType", component)


def _kernel_function(value: Any, component: str) -> str:
    return _string_choice(value, KERNEL_CODES, "KernelFunction", component)


def _solver(value: Any, component: str) -> str:
    return _string_choice(value, ("SMO", "ISDA"), "Solver", component)


def _nu(value: Any, component: str) -> float:
    x = _real_scalar(value)
    if x is None or not (0 < x <= 1):
        raise DomainError(component, "Nu must be a positive scalar in the range 0 < Nu <= 1.")
    if x < FIXED_RESOLUTION:
        raise DomainError(component, f"Nu must be at least {FIXED_RESOLUTION:g}.")
    return x


def _kfold(value: Any, component: str) -> int:
    x = _real_scalar(value)
    if x is None or not (x > 1 and _is_integral(x)):
        raise DomainError(component, "KFold must be a positive integer greater than 1.")
    return int(x)


def _parse_label(key: Any) -> Optional[float]:
    if isinstance(key, (bool, np.bool_)):
        return None
    if isinstance(key, str):
        try:
            x = float(key.strip())
        except ValueError:
            return None
        return x if np.isfinite(x) else None
    return _real_scalar(key)


def _weight(value: Any, component: str) -> Dict[float, float]:
    """Per-class weights: numeric class label -> positive numeric weight."""
    if not isinstance(value, Mapping):
        raise OptionTypeError(component, "Weight must be provided as a mapping of class label to weight.")
    weights: Dict[float, float] = {}
    for key, w in value.items():
        label = _parse_label(key)
        if label is None:
            raise OptionTypeError(component, "Class labels in the weight mapping must be numeric.")
        x = _real_scalar(w)
        if x is None:
            raise OptionTypeError(component, "Weights in the weight mapping must be numeric scalars.")
        if not x > 0:
            raise DomainError(component, "Weights in the weight mapping must be positive.")
        if x < WEIGHT_RESOLUTION:
            raise DomainError(
                component, f"Weights in the weight mapping must be at least {WEIGHT_RESOLUTION:g}."
            )
        weights[label] = x
    return weights


SVM_VALIDATORS: Dict[SVMOption, Validator] = {
    SVMOption.SVM_TYPE: _svm_type,
    SVMOption.KERNEL_FUNCTION: _kernel_function,
    SVMOption.POLYNOMIAL_ORDER: _positive_integer("PolynomialOrder"),
    SVMOption.GAMMA: _positive("Gamma", FIXED_RESOLUTION),
    SVMOption.KERNEL_OFFSET: _non_negative("KernelOffset"),
    SVMOption.BOX_CONSTRAINT: _positive("BoxConstraint", FIXED_RESOLUTION),
    SVMOption.NU: _nu,
    SVMOption.CACHE_SIZE: _positive("CacheSize", FIXED_RESOLUTION),
    SVMOption.TOLERANCE: _non_negative("Tolerance", FIXED_RESOLUTION),
    SVMOption.KKT_TOLERANCE: _non_negative("KKTTolerance", FIXED_RESOLUTION),
    SVMOption.SHRINKING: _flag("Shrinking"),
    SVMOption.PROBABILITY_ESTIMATES: _flag("ProbabilityEstimates"),
    SVMOption.WEIGHT: _weight,
    SVMOption.KFOLD: _kfold,
    SVMOption.SOLVER: _solver,
}
_check_complete(SVMOption, SVM_VALIDATORS)


def build_svm_config(pairs: Iterable[OptionPair], *, n_features: int, component: str) -> SVMConfig:
    """Fold validated pairs into an SVMConfig with gamma resolved against n_features."""
    resolved = fold_options(pairs, SVMOption, SVM_VALIDATORS, component=component)
    return SVMConfig(**resolved).resolved(n_features)


# -----------------------------
# Neural network validators
# -----------------------------


def _num_neurons(value: Any, component: str) -> Tuple[int, ...]:
    if isinstance(value, (bool, np.bool_, str, bytes)):
        raise DomainError(component, "NumNeurons must be a positive integer or a vector of positive integers.")
    arr = np.asarray(value)
    if arr.size == 0 or arr.dtype.kind not in "iuf":
        raise DomainError(component, "NumNeurons must be a positive integer or a vector of positive integers.")
    flat = arr.astype(float).ravel()
    if not all(x > 0 and _is_integral(x) for x in flat):
        raise DomainError(component, "NumNeurons must be a positive integer or a vector of positive integers.")
    return tuple(int(x) for x in flat)


def _activation(value: Any, component: str) -> str:
    return _string_choice(value, tuple(ACTIVATION_TO_SKLEARN), "ActivationFunction", component)


def _validation_data(value: Any, component: str) -> ValidationData:
    if not isinstance(value, Mapping):
        raise OptionTypeError(component, "ValidationData must be a mapping with fields 'XVal' and 'YVal'.")
    fields = {str(k).lower(): v for k, v in value.items()}
    if set(fields) != {"xval", "yval"}:
        raise OptionTypeError(component, "ValidationData must be a mapping with fields 'XVal' and 'YVal'.")
    x_val, y_val = fields["xval"], fields["yval"]
    ensure_same_rows(x_val, y_val, component=component)
    return ValidationData(
        x_val=coerce_predictors(x_val, component=component, name="XVal"),
        y_val=coerce_class_labels(y_val, component=component, name="YVal"),
    )


NET_VALIDATORS: Dict[NetOption, Validator] = {
    NetOption.NUM_LAYERS: _positive_integer("NumLayers"),
    NetOption.NUM_NEURONS: _num_neurons,
    NetOption.ACTIVATION_FUNCTION: _activation,
    NetOption.LEARNING_RATE: _positive("LearningRate"),
    NetOption.EPOCHS: _positive_integer("Epochs"),
    NetOption.BATCH_SIZE: _positive_integer("BatchSize"),
    NetOption.VALIDATION_DATA: _validation_data,
    NetOption.VERBOSE: _flag("Verbose"),
}
_check_complete(NetOption, NET_VALIDATORS)


def build_net_config(pairs: Iterable[OptionPair], *, component: str) -> NeuralNetworkConfig:
    resolved = fold_options(pairs, NetOption, NET_VALIDATORS, component=component)
    n_layers = resolved.get("num_layers", 1)
    neurons = resolved.get("num_neurons", (10,))
    if len(neurons) not in (1, n_layers):
        raise DomainError(
            component,
            f"NumNeurons must have one entry per hidden layer (NumLayers = {n_layers}).",
        )
    resolved["num_neurons"] = neurons
    return NeuralNetworkConfig(**resolved)


# -----------------------------
# Prediction options
# -----------------------------

PREDICT_VALIDATORS: Dict[PredictOption, Validator] = {
    PredictOption.PROBABILITY_ESTIMATES: _flag("ProbabilityEstimates"),
}
_check_complete(PredictOption, PREDICT_VALIDATORS)


def parse_predict_options(pairs: Iterable[OptionPair], *, component: str) -> Dict[str, Any]:
    return fold_options(pairs, PredictOption, PREDICT_VALIDATORS, component=component)
