from .classification_svm import ClassificationSVM
from .fitting import fitcnet, fitcsvm
from .neural_network import ClassificationNeuralNetwork

__all__ = ["ClassificationSVM", "ClassificationNeuralNetwork", "fitcnet", "fitcsvm"]
