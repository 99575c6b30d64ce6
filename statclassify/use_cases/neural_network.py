from __future__ import annotations

"""Neural network classification model (multilayer perceptron)."""

import logging
from typing import Any, List, Optional, Tuple

import numpy as np
import pandas as pd

from statclassify.components.solvers import train_mlp
from statclassify.contracts.errors import ShapeError, SolverError
from statclassify.contracts.model_families import NeuralNetworkConfig
from statclassify.contracts.results import NeuralNetworkSummary, as_json_list
from statclassify.core.formula import select_predictors
from statclassify.core.options import build_net_config, split_name_value_pairs
from statclassify.core.shapes import (
    coerce_class_labels,
    coerce_prediction_data,
    coerce_predictors,
    encode_labels,
    ensure_same_rows,
)
from statclassify.runtime import RngManager
from statclassify.use_cases.base import ReadOnlyModel, owned_copy

logger = logging.getLogger(__name__)

COMPONENT = "ClassificationNeuralNetwork"
PREDICT_COMPONENT = "ClassificationNeuralNetwork.predict"


class ClassificationNeuralNetwork(ReadOnlyModel):
    """Fully connected feed-forward classifier.

    Y may be numeric or categorical (strings or pandas Categorical);
    ``class_names`` keeps the original labels in sorted order and
    ``predict`` returns labels of that kind.

    Attributes: ``X``, ``Y``, ``class_names``, ``num_classes``,
    ``layer_sizes`` (input, hidden..., output), ``layer_weights`` and
    ``layer_biases`` (one entry per layer transition), ``training_history``
    (loss per epoch), ``validation_accuracy`` (when ``ValidationData`` is
    given), ``config`` and the fitted ``model``.
    """

    config: NeuralNetworkConfig

    def __init__(
        self,
        X,
        Y,
        *args: Any,
        predictor_names: Optional[List[str]] = None,
        response_name: Optional[str] = None,
        **kwargs: Any,
    ):
        ensure_same_rows(X, Y, component=COMPONENT)
        Y = coerce_class_labels(Y, component=COMPONENT)
        X = coerce_predictors(X, component=COMPONENT)
        codes, classes = encode_labels(Y)
        pairs = split_name_value_pairs(args, kwargs, component=COMPONENT)
        cfg = build_net_config(pairs, component=COMPONENT)

        val = cfg.validation_data
        if val is not None and val.x_val.shape[1] != X.shape[1]:
            raise ShapeError(COMPONENT, "XVal must have the same number of predictors as X.")

        logger.info(
            "training network %s (%s) for %d epochs on %d observations",
            list(cfg.hidden_layer_sizes),
            cfg.activation_function,
            cfg.epochs,
            X.shape[0],
        )
        try:
            est = train_mlp(X, codes, cfg, seed=RngManager().child_seed("mlp"))
        except ValueError as exc:
            raise SolverError(COMPONENT, f"training failed: {exc}") from exc

        self.X = owned_copy(X)
        self.Y = owned_copy(Y)
        self.predictor_names = self._names(predictor_names, X.shape[1])
        self.response_name = response_name or "Y"

        self.config = cfg
        self.model = est
        self.class_names = owned_copy(classes)
        self.num_classes = int(self.class_names.size)
        self.layer_sizes = (X.shape[1], *cfg.hidden_layer_sizes, int(est.n_outputs_))
        self.layer_weights = tuple(owned_copy(w) for w in est.coefs_)
        self.layer_biases = tuple(owned_copy(b) for b in est.intercepts_)
        self.training_history = owned_copy(est.loss_curve_)

        self.validation_accuracy: Optional[float] = None
        if val is not None:
            val_labels, _ = self._predict_rows(val.x_val)
            self.validation_accuracy = float(np.mean(val_labels == val.y_val))
            logger.info("validation accuracy %.4f", self.validation_accuracy)

        self._freeze()

    def predict(self, XC) -> Tuple[np.ndarray, np.ndarray]:
        """Return ``(labels, scores)``; scores are class probabilities in ``class_names`` order."""

        if isinstance(XC, pd.DataFrame):
            XC = select_predictors(XC, self.predictor_names, component=PREDICT_COMPONENT)
        XC = coerce_prediction_data(XC, n_features=self.X.shape[1], component=PREDICT_COMPONENT)

        return self._predict_rows(XC)

    def _predict_rows(self, XC: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        n = XC.shape[0]
        if self.num_classes == 1:
            # a single-class network has nothing to choose between
            return np.repeat(self.class_names, n), np.ones((n, 1))
        scores = np.asarray(self.model.predict_proba(XC), dtype=float)
        return self.class_names[np.argmax(scores, axis=1)], scores

    def summary(self) -> NeuralNetworkSummary:
        history = self.training_history
        return NeuralNetworkSummary(
            n_samples=int(self.X.shape[0]),
            n_features=int(self.X.shape[1]),
            num_classes=self.num_classes,
            class_names=as_json_list(self.class_names),
            layer_sizes=list(self.layer_sizes),
            activation_function=self.config.activation_function,
            n_epochs_run=int(history.size),
            final_loss=float(history[-1]) if history.size else None,
            validation_accuracy=self.validation_accuracy,
            config=self.config.model_dump(mode="json", exclude={"validation_data"}),
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(layer_sizes={self.layer_sizes}, "
            f"activation_function={self.config.activation_function!r}, num_classes={self.num_classes})"
        )
