from __future__ import annotations

"""Typed request for the libsvm training routine.

The request is marshalled to libsvm's flag-letter option string, which is a
compatibility surface and must stay byte-for-byte stable:

    -s %d -t %d -d %d -g %f -r %f -c %f -n %f -m %f -e %f -h %d -b %d[ -w<label> %.2f ...] -v %d

``%f`` is six-decimal fixed point; per-class weights sit between ``-b`` and
``-v``, one ``-w<label> <weight>`` token pair per class.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from statclassify.contracts.choices import KERNEL_CODES, SVM_TYPE_CODES
from statclassify.contracts.model_families import SVMConfig

# Flags in emission order, with the Python type used to parse them back.
_FLAGS: Tuple[Tuple[str, str, type], ...] = (
    ("s", "svm_type", int),
    ("t", "kernel_type", int),
    ("d", "degree", int),
    ("g", "gamma", float),
    ("r", "coef0", float),
    ("c", "cost", float),
    ("n", "nu", float),
    ("m", "cache_size", float),
    ("e", "eps", float),
    ("h", "shrinking", int),
    ("b", "probability", int),
    ("v", "nr_fold", int),
)


def format_label(label: float) -> str:
    """Class labels print as integers when integral (``-w1``), else compactly."""
    if float(label).is_integer():
        return "%d" % int(label)
    return "%g" % label


@dataclass(frozen=True)
class LibsvmRequest:
    svm_type: int = 0
    kernel_type: int = 2
    degree: int = 3
    gamma: float = 0.0
    coef0: float = 0.0
    cost: float = 1.0
    nu: float = 0.5
    cache_size: float = 100.0
    eps: float = 1e-3
    shrinking: int = 1
    probability: int = 0
    weights: Tuple[Tuple[float, float], ...] = ()
    nr_fold: Optional[int] = None

    @classmethod
    def from_config(cls, cfg: SVMConfig) -> "LibsvmRequest":
        if cfg.gamma is None:
            raise ValueError("SVMConfig.gamma must be resolved before building a solver request")
        weights = tuple((float(k), float(v)) for k, v in (cfg.weight or {}).items())
        return cls(
            svm_type=SVM_TYPE_CODES[cfg.svm_type],
            kernel_type=KERNEL_CODES[cfg.kernel_function],
            degree=int(cfg.polynomial_order),
            gamma=float(cfg.gamma),
            coef0=float(cfg.kernel_offset),
            cost=float(cfg.box_constraint),
            nu=float(cfg.nu),
            cache_size=float(cfg.cache_size),
            eps=float(cfg.solver_tolerance),
            shrinking=int(cfg.shrinking),
            probability=int(cfg.probability_estimates),
            weights=weights,
            nr_fold=int(cfg.kfold),
        )

    def to_option_string(self) -> str:
        head = "-s %d -t %d -d %d -g %f -r %f -c %f -n %f -m %f -e %f -h %d -b %d" % (
            self.svm_type,
            self.kernel_type,
            self.degree,
            self.gamma,
            self.coef0,
            self.cost,
            self.nu,
            self.cache_size,
            self.eps,
            self.shrinking,
            self.probability,
        )
        tokens = [head]
        tokens.extend("-w%s %.2f" % (format_label(label), w) for label, w in self.weights)
        if self.nr_fold is not None:
            tokens.append("-v %d" % self.nr_fold)
        return " ".join(tokens)

    @classmethod
    def from_option_string(cls, options: str) -> "LibsvmRequest":
        """Parse an option string; unknown flags or malformed values raise ValueError."""

        by_flag = {flag: (field, kind) for flag, field, kind in _FLAGS}
        values: Dict[str, object] = {}
        weights: List[Tuple[float, float]] = []

        tokens = options.split()
        if len(tokens) % 2 != 0:
            raise ValueError(f"libsvm options must come in flag/value pairs: {options!r}")

        for flag_tok, value_tok in zip(tokens[0::2], tokens[1::2]):
            if not flag_tok.startswith("-") or len(flag_tok) < 2:
                raise ValueError(f"expected a flag, got {flag_tok!r}")
            flag = flag_tok[1:]
            if flag.startswith("w") and len(flag) > 1:
                weights.append((float(flag[1:]), float(value_tok)))
                continue
            if flag not in by_flag:
                raise ValueError(f"unknown libsvm option -{flag}")
            field, kind = by_flag[flag]
            values[field] = kind(float(value_tok)) if kind is int else kind(value_tok)

        return cls(weights=tuple(weights), **values)  # type: ignore[arg-type]

    @property
    def weight_map(self) -> Dict[float, float]:
        return dict(self.weights)
