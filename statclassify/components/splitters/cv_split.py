from __future__ import annotations

"""k-fold partitions for libsvm-style cross-validation (``-v``)."""

from dataclasses import dataclass
from typing import Iterator, Optional

import numpy as np
from sklearn.model_selection import KFold


@dataclass(frozen=True)
class Fold:
    """One held-out fold; ``train`` / ``test`` index rows of the full data."""

    index: int
    train: np.ndarray
    test: np.ndarray
    X_train: np.ndarray
    X_test: np.ndarray
    y_train: np.ndarray
    y_test: np.ndarray


def generate_folds(
    X: np.ndarray,
    y: np.ndarray,
    n_splits: int = 10,
    *,
    seed: Optional[int] = None,
    precomputed: bool = False,
) -> Iterator[Fold]:
    """Yield shuffled k folds, ``n_splits`` capped at the number of rows.

    With ``precomputed=True`` X is an (n, n) Gram matrix: training blocks keep
    the training columns only, and so do the test rows.
    """
    X = np.asarray(X)
    y = np.asarray(y).ravel()
    if X.shape[0] != y.shape[0]:
        raise ValueError(f"X and y length mismatch: {X.shape[0]} vs {y.shape[0]}")

    splitter = KFold(n_splits=min(int(n_splits), X.shape[0]), shuffle=True, random_state=seed)

    for i, (train, test) in enumerate(splitter.split(X)):
        cols = train if precomputed else slice(None)
        yield Fold(
            index=i,
            train=train,
            test=test,
            X_train=X[train][:, cols],
            X_test=X[test][:, cols],
            y_train=y[train],
            y_test=y[test],
        )
