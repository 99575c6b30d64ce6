from .cv_split import Fold, generate_folds

__all__ = ["Fold", "generate_folds"]
