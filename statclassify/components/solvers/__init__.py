from .libsvm import LibsvmModel, svmpredict, svmtrain
from .libsvm_options import LibsvmRequest
from .mlp import make_mlp, train_mlp

__all__ = [
    "LibsvmModel",
    "LibsvmRequest",
    "make_mlp",
    "svmpredict",
    "svmtrain",
    "train_mlp",
]
