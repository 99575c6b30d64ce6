from __future__ import annotations

import logging
import warnings
from typing import Optional

import numpy as np
from sklearn.exceptions import ConvergenceWarning
from sklearn.neural_network import MLPClassifier

from statclassify.contracts.choices import ACTIVATION_TO_SKLEARN
from statclassify.contracts.model_families import NeuralNetworkConfig

logger = logging.getLogger(__name__)


def make_mlp(cfg: NeuralNetworkConfig, *, n_samples: int, seed: Optional[int] = None) -> MLPClassifier:
    """Return an unfitted MLPClassifier for ``cfg``.

    ``Epochs`` is a fixed training budget, so early stopping on the loss is
    disabled (``n_iter_no_change`` equals the epoch count).
    """
    return MLPClassifier(
        hidden_layer_sizes=cfg.hidden_layer_sizes,
        activation=ACTIVATION_TO_SKLEARN[cfg.activation_function],
        solver="adam",
        learning_rate_init=float(cfg.learning_rate),
        max_iter=int(cfg.epochs),
        n_iter_no_change=int(cfg.epochs),
        batch_size=min(int(cfg.batch_size), int(n_samples)),
        shuffle=True,
        random_state=seed,
        verbose=False,
    )


def train_mlp(X: np.ndarray, y: np.ndarray, cfg: NeuralNetworkConfig, *, seed: Optional[int] = None) -> MLPClassifier:
    est = make_mlp(cfg, n_samples=X.shape[0], seed=seed)

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", ConvergenceWarning)
        est.fit(X, y)
    for w in caught:
        if issubclass(w.category, ConvergenceWarning):
            logger.debug("training stopped at the epoch budget: %s", w.message)
        else:
            warnings.warn_explicit(w.message, w.category, w.filename, w.lineno)

    if cfg.verbose:
        for epoch, loss in enumerate(est.loss_curve_, start=1):
            logger.info("epoch %d/%d loss=%.6f", epoch, cfg.epochs, loss)
    return est
