from .neural_network import NeuralNetworkConfig, ValidationData
from .svm import DEFAULT_SOLVER_TOLERANCE, SOLVER_DEFAULTS, SVMConfig

__all__ = [
    "DEFAULT_SOLVER_TOLERANCE",
    "NeuralNetworkConfig",
    "SOLVER_DEFAULTS",
    "SVMConfig",
    "ValidationData",
]
