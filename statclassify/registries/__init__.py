from .base import Registry
from .classifiers import fit_classifier, list_classifiers, register_classifier

__all__ = ["Registry", "fit_classifier", "list_classifiers", "register_classifier"]
