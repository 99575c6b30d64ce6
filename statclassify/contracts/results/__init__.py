from .common import Label, ResultModel, as_json_list
from .summary import NeuralNetworkSummary, SVMModelSummary

__all__ = [
    "Label",
    "ResultModel",
    "as_json_list",
    "NeuralNetworkSummary",
    "SVMModelSummary",
]
