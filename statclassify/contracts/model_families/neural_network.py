from __future__ import annotations

from typing import Any, ClassVar, Optional, Tuple

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..choices import ActivationName


class ValidationData(BaseModel):
    """Held-out data scored after training (``XVal`` / ``YVal``)."""

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    x_val: np.ndarray
    y_val: np.ndarray


class NeuralNetworkConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    algo: ClassVar[str] = "net"
    family: ClassVar[str] = "net"

    num_layers: int = Field(1, gt=0)
    num_neurons: Tuple[int, ...] = (10,)
    activation_function: ActivationName = "ReLU"
    learning_rate: float = Field(0.01, gt=0)
    epochs: int = Field(100, gt=0)
    batch_size: int = Field(32, gt=0)
    validation_data: Optional[ValidationData] = None
    verbose: bool = True

    @model_validator(mode="before")
    @classmethod
    def _broadcast_neurons(cls, data: Any) -> Any:
        """A single neuron count applies to every hidden layer."""
        if not isinstance(data, dict) or "num_neurons" not in data:
            return data
        neurons = data["num_neurons"]
        if isinstance(neurons, (int, np.integer)):
            neurons = (int(neurons),)
        neurons = tuple(int(n) for n in np.asarray(neurons).ravel())
        n_layers = int(data.get("num_layers", 1))
        if len(neurons) == 1 and n_layers > 1:
            neurons = neurons * n_layers
        return {**data, "num_neurons": neurons}

    @model_validator(mode="after")
    def _layers_match_neurons(self) -> "NeuralNetworkConfig":
        if any(n <= 0 for n in self.num_neurons):
            raise ValueError("num_neurons must contain positive integers")
        if len(self.num_neurons) != self.num_layers:
            raise ValueError(
                f"num_neurons has {len(self.num_neurons)} entries but num_layers is {self.num_layers}"
            )
        return self

    @property
    def hidden_layer_sizes(self) -> Tuple[int, ...]:
        return tuple(self.num_neurons)
