from __future__ import annotations

"""Support Vector Machine classification model.

``ClassificationSVM(X, Y, name, value, ...)`` validates the options, trains
libsvm through :func:`svmtrain` and copies the solver output into read-only
attributes:

================================  ==============================================
``X`` / ``Y``                     training predictors and numeric class labels
``model_parameters``              ``[svm_type, kernel_type, degree, gamma, coef0]``
``num_classes``                   number of classes (2 for one-class models)
``class_names``                   class labels (empty for one-class models)
``rho``                           bias of each pairwise decision function
``support_vectors``               the support vectors
``support_vector_indices``        0-based rows of the support vectors in X
``support_vector_count``          total number of support vectors
``support_vector_per_class``      support vectors per class
``support_vector_coef``           dual coefficients, (count, num_classes - 1)
``prob_a`` / ``prob_b``           pairwise probability calibration terms
``solver``                        ``"SMO"`` or ``"ISDA"``
``config``                        resolved :class:`SVMConfig`
``option_string``                 option string handed to the solver
``cross_validation_accuracy``     k-fold accuracy in percent (``KFold`` folds)
================================  ==============================================

Example::

    obj = ClassificationSVM(X, Y, "KernelFunction", "linear", BoxConstraint=10)
    labels, scores, cost = obj.predict(XC)
"""

import logging
from typing import Any, List, Optional, Tuple

import numpy as np
import pandas as pd

from statclassify.components.solvers import LibsvmModel, LibsvmRequest, svmpredict, svmtrain
from statclassify.contracts.errors import DomainError, ShapeError, SolverError
from statclassify.contracts.model_families import SVMConfig
from statclassify.contracts.results import SVMModelSummary, as_json_list
from statclassify.core.formula import select_predictors
from statclassify.core.options import build_svm_config, parse_predict_options, split_name_value_pairs
from statclassify.core.shapes import coerce_prediction_data, coerce_training_data
from statclassify.runtime import RngManager
from statclassify.use_cases.base import ReadOnlyModel, owned_copy

logger = logging.getLogger(__name__)

COMPONENT = "ClassificationSVM"
PREDICT_COMPONENT = "ClassificationSVM.predict"


class ClassificationSVM(ReadOnlyModel):
    X: np.ndarray
    Y: np.ndarray
    config: SVMConfig
    model: LibsvmModel

    def __init__(
        self,
        X,
        Y,
        *args: Any,
        predictor_names: Optional[List[str]] = None,
        response_name: Optional[str] = None,
        **kwargs: Any,
    ):
        X, Y = coerce_training_data(X, Y, component=COMPONENT)
        pairs = split_name_value_pairs(args, kwargs, component=COMPONENT)
        cfg = build_svm_config(pairs, n_features=X.shape[1], component=COMPONENT)

        if cfg.kernel_function == "precomputed" and X.shape[0] != X.shape[1]:
            raise ShapeError(
                COMPONENT, "a precomputed kernel requires X to be a square (N x N) Gram matrix."
            )

        options = LibsvmRequest.from_config(cfg).to_option_string()
        logger.debug("svmtrain options: %s", options)
        logger.info(
            "training %s %s-kernel SVM on %d observations x %d predictors",
            cfg.svm_type,
            cfg.kernel_function,
            X.shape[0],
            X.shape[1],
        )

        try:
            model = svmtrain(Y, X, options, seed=RngManager().child_seed("svmtrain"))
        except ValueError as exc:
            raise SolverError(COMPONENT, f"solver failed: {exc}") from exc

        self.X = owned_copy(X)
        self.Y = owned_copy(Y)
        self.predictor_names = self._names(predictor_names, X.shape[1])
        self.response_name = response_name or "Y"

        self.config = cfg
        self.option_string = options
        self.model = model
        self.solver = cfg.solver

        self.model_parameters = owned_copy(model.parameters)
        self.num_classes = model.nr_class
        self.class_names = owned_copy(model.label)
        self.rho = owned_copy(model.rho)
        self.support_vectors = owned_copy(model.svs)
        self.support_vector_indices = owned_copy(model.sv_indices)
        self.support_vector_count = model.total_sv
        self.support_vector_per_class = owned_copy(model.n_sv)
        self.support_vector_coef = owned_copy(model.sv_coef)
        self.prob_a = owned_copy(model.prob_a)
        self.prob_b = owned_copy(model.prob_b)
        self.cross_validation_accuracy = model.cross_validation_accuracy

        self._freeze()

    def predict(self, XC, *args: Any, **kwargs: Any) -> Tuple[np.ndarray, np.ndarray, Optional[np.ndarray]]:
        """Predict labels for the rows of XC.

        Returns ``(labels, scores, cost)``. With probability estimates on
        (default: as trained; override with ``ProbabilityEstimates``) the scores
        are class probabilities in ``class_names`` order and ``cost`` is the
        expected 0/1 misclassification cost ``1 - probability``. Otherwise the
        scores are libsvm decision values and ``cost`` is None.
        """

        if isinstance(XC, pd.DataFrame):
            XC = select_predictors(XC, self.predictor_names, component=PREDICT_COMPONENT)
        XC = coerce_prediction_data(XC, n_features=self.model.n_features, component=PREDICT_COMPONENT)

        pairs = split_name_value_pairs(args, kwargs, component=PREDICT_COMPONENT)
        opts = parse_predict_options(pairs, component=PREDICT_COMPONENT)
        probability = opts.get("probability_estimates", self.model.has_probability)
        if probability and not self.model.has_probability:
            raise DomainError(
                PREDICT_COMPONENT,
                "ProbabilityEstimates requires a model trained with ProbabilityEstimates = 1.",
            )

        try:
            labels, scores = svmpredict(self.model, XC, probability=probability)
        except ValueError as exc:
            raise SolverError(PREDICT_COMPONENT, f"solver failed: {exc}") from exc

        cost = 1.0 - scores if probability else None
        return labels, scores, cost

    def summary(self) -> SVMModelSummary:
        return SVMModelSummary(
            n_samples=int(self.X.shape[0]),
            n_features=int(self.X.shape[1]),
            svm_type=self.config.svm_type,
            kernel_function=self.config.kernel_function,
            solver=self.solver,
            option_string=self.option_string,
            num_classes=int(self.num_classes),
            class_names=as_json_list(self.class_names),
            support_vector_count=int(self.support_vector_count),
            support_vector_per_class=as_json_list(self.support_vector_per_class),
            rho=as_json_list(self.rho),
            has_probability=self.model.has_probability,
            cross_validation_accuracy=self.cross_validation_accuracy,
            config=self.config.model_dump(mode="json"),
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(svm_type={self.config.svm_type!r}, "
            f"kernel_function={self.config.kernel_function!r}, num_classes={self.num_classes}, "
            f"support_vector_count={self.support_vector_count})"
        )
