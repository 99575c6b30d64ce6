from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import Field

from .common import Label, ResultModel


class SVMModelSummary(ResultModel):
    """JSON-friendly snapshot of a trained ClassificationSVM."""

    n_samples: int
    n_features: int

    svm_type: str
    kernel_function: str
    solver: str
    option_string: str

    num_classes: int
    class_names: List[Label] = Field(default_factory=list)

    support_vector_count: int
    support_vector_per_class: List[int] = Field(default_factory=list)
    rho: List[float] = Field(default_factory=list)

    has_probability: bool = False
    cross_validation_accuracy: Optional[float] = None

    config: Dict[str, Any] = Field(default_factory=dict)


class NeuralNetworkSummary(ResultModel):
    """JSON-friendly snapshot of a trained ClassificationNeuralNetwork."""

    n_samples: int
    n_features: int

    num_classes: int
    class_names: List[Label] = Field(default_factory=list)

    layer_sizes: List[int] = Field(default_factory=list)
    activation_function: str
    n_epochs_run: int
    final_loss: Optional[float] = None
    validation_accuracy: Optional[float] = None

    config: Dict[str, Any] = Field(default_factory=dict)
