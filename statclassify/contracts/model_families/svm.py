from __future__ import annotations

from typing import Any, ClassVar, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..choices import SVMKernel, SVMSolver, SVMType


# libsvm's own -e default, used when both tolerances are 0.
DEFAULT_SOLVER_TOLERANCE = 1e-3

# Defaults that depend on the solver choice. They only fill options the caller
# left unset.
SOLVER_DEFAULTS: Dict[str, Dict[str, float]] = {
    "SMO": {"kernel_offset": 0.0, "tolerance": 1e-3, "kkt_tolerance": 0.0},
    "ISDA": {"kernel_offset": 0.1, "tolerance": 0.0, "kkt_tolerance": 1e-3},
}


class SVMConfig(BaseModel):
    """Validated hyperparameters of a ClassificationSVM.

    ``gamma=None`` means "1 / number of predictors"; the trained model stores
    the resolved value.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    algo: ClassVar[str] = "svm"
    family: ClassVar[str] = "svm"

    svm_type: SVMType = "C_SVC"
    kernel_function: SVMKernel = "rbf"
    polynomial_order: int = Field(3, gt=0)
    gamma: Optional[float] = Field(None, gt=0)
    kernel_offset: float = Field(0.0, ge=0)
    box_constraint: float = Field(1.0, gt=0)
    nu: float = Field(0.5, gt=0, le=1)
    cache_size: float = Field(100.0, gt=0)
    tolerance: float = Field(1e-3, ge=0)
    kkt_tolerance: float = Field(0.0, ge=0)
    shrinking: bool = True
    probability_estimates: bool = False
    weight: Optional[Dict[float, float]] = None
    kfold: int = Field(10, gt=1)
    solver: SVMSolver = "SMO"

    @model_validator(mode="before")
    @classmethod
    def _fill_solver_defaults(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        defaults = SOLVER_DEFAULTS.get(str(data.get("solver", "SMO")), SOLVER_DEFAULTS["SMO"])
        filled = dict(data)
        for key, value in defaults.items():
            if filled.get(key) is None:
                filled[key] = value
        return filled

    @property
    def solver_tolerance(self) -> float:
        """Stopping tolerance handed to the solver (``-e``).

        ``Tolerance`` when set, else ``KKTTolerance``; libsvm needs a positive
        ``-e``, so with both at 0 its default applies.
        """
        if self.tolerance > 0:
            return self.tolerance
        if self.kkt_tolerance > 0:
            return self.kkt_tolerance
        return DEFAULT_SOLVER_TOLERANCE

    def resolved(self, n_features: int) -> "SVMConfig":
        """Return a copy with ``gamma`` resolved against the predictor count."""
        if self.gamma is not None:
            return self
        return self.model_copy(update={"gamma": 1.0 / max(int(n_features), 1)})
