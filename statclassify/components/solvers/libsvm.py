from __future__ import annotations

"""libsvm-style training and prediction routines.

``svmtrain(labels, features, options)`` and ``svmpredict(model, features)``
follow the calling convention of libsvm's own bindings: training takes the
flag-letter option string, and the result is a struct-like model whose
fields mirror libsvm's ``{Parameters, nr_class, totalSV, rho, Label,
sv_indices, ProbA, ProbB, nSV, sv_coef, SVs}``.

The optimisation itself runs in scikit-learn's bundled libsvm (``SVC``,
``NuSVC``, ``OneClassSVM``). Coefficients and biases are reported in
libsvm's sign convention: the decision value of each class pair is
``sum(sv_coef * K) - rho`` and a positive value votes for the first class
of the pair.

Implementation notes
--------------------
* A C/nu classification problem with a single class never reaches the
  solver: like libsvm, the model has no support vectors and always predicts
  that class.
* ``-v`` runs k-fold cross-validation in addition to fitting the full model;
  the accuracy (percent) is stored on the model.
* ``sv_indices`` are 0-based row indices into the training data.
"""

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

import numpy as np
from sklearn.svm import SVC, NuSVC, OneClassSVM

from statclassify.components.solvers.libsvm_options import LibsvmRequest, format_label
from statclassify.components.splitters import generate_folds

logger = logging.getLogger(__name__)

C_SVC, NU_SVC, ONE_CLASS = 0, 1, 2
PRECOMPUTED = 4

_SKLEARN_KERNELS: Dict[int, str] = {
    0: "linear",
    1: "poly",
    2: "rbf",
    3: "sigmoid",
    PRECOMPUTED: "precomputed",
}


# ndarray fields: models compare by identity.
@dataclass(frozen=True, eq=False)
class LibsvmModel:
    parameters: np.ndarray
    nr_class: int
    total_sv: int
    rho: np.ndarray
    label: np.ndarray
    sv_indices: np.ndarray
    prob_a: np.ndarray
    prob_b: np.ndarray
    n_sv: np.ndarray
    sv_coef: np.ndarray
    svs: np.ndarray

    request: LibsvmRequest
    n_features: int
    estimator: Optional[Any] = field(default=None, repr=False)
    cross_validation_accuracy: Optional[float] = None

    @property
    def is_one_class(self) -> bool:
        return self.request.svm_type == ONE_CLASS

    @property
    def has_probability(self) -> bool:
        return bool(self.request.probability) and not self.is_one_class

    def as_struct(self) -> Dict[str, Any]:
        """Fields under libsvm's own key names."""
        return {
            "Parameters": self.parameters,
            "nr_class": self.nr_class,
            "totalSV": self.total_sv,
            "rho": self.rho,
            "Label": self.label,
            "sv_indices": self.sv_indices,
            "ProbA": self.prob_a,
            "ProbB": self.prob_b,
            "nSV": self.n_sv,
            "sv_coef": self.sv_coef,
            "SVs": self.svs,
        }


def _max_iter(n_samples: int) -> int:
    # libsvm's own iteration cap
    return max(10_000_000, 100 * int(n_samples))


def _parameters(request: LibsvmRequest) -> np.ndarray:
    return np.array(
        [request.svm_type, request.kernel_type, request.degree, request.gamma, request.coef0],
        dtype=float,
    )


def _check_request(request: LibsvmRequest) -> None:
    if request.svm_type not in (C_SVC, NU_SVC, ONE_CLASS):
        raise ValueError(f"unsupported svm_type {request.svm_type}")
    if request.kernel_type not in _SKLEARN_KERNELS:
        raise ValueError(f"unsupported kernel_type {request.kernel_type}")


def _class_weight(request: LibsvmRequest, classes: np.ndarray) -> Optional[Dict[float, float]]:
    """Map -w<label> entries onto the training classes; unknown labels are ignored."""
    if not request.weights:
        return None
    weights: Dict[float, float] = {}
    for label, w in request.weights:
        hit = classes[np.isclose(classes, label)]
        if hit.size == 0:
            logger.warning("class label %s specified in weight is not found", format_label(label))
            continue
        weights[hit[0].item()] = float(w)
    return weights or None


def _make_estimator(request: LibsvmRequest, classes: np.ndarray, n_samples: int, seed: Optional[int]) -> Any:
    common = dict(
        kernel=_SKLEARN_KERNELS[request.kernel_type],
        degree=int(request.degree),
        gamma=float(request.gamma),
        coef0=float(request.coef0),
        tol=float(request.eps),
        cache_size=float(request.cache_size),
        shrinking=bool(request.shrinking),
        max_iter=_max_iter(n_samples),
    )
    if request.svm_type == ONE_CLASS:
        return OneClassSVM(nu=float(request.nu), **common)

    classifier = dict(
        class_weight=_class_weight(request, classes),
        decision_function_shape="ovo",
        random_state=seed,
        **common,
    )
    # probability, probA_ and probB_ are only used when -b 1 asks for them.
    if request.probability:
        classifier["probability"] = True
    if request.svm_type == NU_SVC:
        return NuSVC(nu=float(request.nu), **classifier)
    return SVC(C=float(request.cost), **classifier)


def _single_class_model(request: LibsvmRequest, classes: np.ndarray, n_features: int) -> LibsvmModel:
    return LibsvmModel(
        parameters=_parameters(request),
        nr_class=1,
        total_sv=0,
        rho=np.empty(0),
        label=np.asarray(classes, dtype=float),
        sv_indices=np.empty(0, dtype=int),
        prob_a=np.empty(0),
        prob_b=np.empty(0),
        n_sv=np.zeros(1, dtype=int),
        sv_coef=np.empty((0, 0)),
        svs=np.empty((0, n_features)),
        request=request,
        n_features=n_features,
    )


def _from_one_class(est: OneClassSVM, request: LibsvmRequest, n_features: int) -> LibsvmModel:
    return LibsvmModel(
        parameters=_parameters(request),
        nr_class=2,
        total_sv=int(est.support_.shape[0]),
        rho=-np.asarray(est.intercept_, dtype=float),
        label=np.empty(0),
        sv_indices=np.asarray(est.support_, dtype=int),
        prob_a=np.empty(0),
        prob_b=np.empty(0),
        n_sv=np.empty(0, dtype=int),
        sv_coef=np.asarray(est.dual_coef_, dtype=float).T,
        svs=np.asarray(est.support_vectors_, dtype=float),
        request=request,
        n_features=n_features,
        estimator=est,
    )


def _from_classifier(est: Any, request: LibsvmRequest, n_features: int) -> LibsvmModel:
    classes = np.asarray(est.classes_, dtype=float)
    dual = np.asarray(est.dual_coef_, dtype=float)
    intercept = np.asarray(est.intercept_, dtype=float)

    # sklearn flips the binary decision function so positive means classes_[1];
    # undo that to report libsvm's convention.
    if classes.size == 2:
        sv_coef, rho = -dual.T, intercept.copy()
    else:
        sv_coef, rho = dual.T, -intercept

    return LibsvmModel(
        parameters=_parameters(request),
        nr_class=int(classes.size),
        total_sv=int(est.support_.shape[0]),
        rho=rho,
        label=classes,
        sv_indices=np.asarray(est.support_, dtype=int),
        prob_a=np.asarray(est.probA_, dtype=float) if request.probability else np.empty(0),
        prob_b=np.asarray(est.probB_, dtype=float) if request.probability else np.empty(0),
        n_sv=np.asarray(est.n_support_, dtype=int),
        sv_coef=sv_coef,
        svs=np.asarray(est.support_vectors_, dtype=float),
        request=request,
        n_features=n_features,
        estimator=est,
    )


def _fit(request: LibsvmRequest, X: np.ndarray, y: np.ndarray, seed: Optional[int]) -> LibsvmModel:
    n_features = int(X.shape[1])
    if request.svm_type == ONE_CLASS:
        est = _make_estimator(request, np.empty(0), X.shape[0], seed).fit(X)
        return _from_one_class(est, request, n_features)

    classes = np.unique(y)
    if classes.size == 1:
        return _single_class_model(request, classes, n_features)

    est = _make_estimator(request, classes, X.shape[0], seed).fit(X, y)
    return _from_classifier(est, request, n_features)


def _cross_validate(request: LibsvmRequest, X: np.ndarray, y: np.ndarray, seed: Optional[int]) -> float:
    """k-fold accuracy in percent, libsvm style (pooled over all folds)."""
    correct = 0
    folds = generate_folds(
        X,
        y,
        n_splits=int(request.nr_fold),
        seed=seed,
        precomputed=request.kernel_type == PRECOMPUTED,
    )
    for fold in folds:
        fold_model = _fit(request, fold.X_train, fold.y_train, seed)
        y_pred, _ = svmpredict(fold_model, fold.X_test)
        hits = int(np.sum(y_pred == fold.y_test))
        logger.debug("fold %d: %d/%d correct", fold.index, hits, fold.test.size)
        correct += hits
    return 100.0 * correct / y.shape[0]


def svmtrain(labels, features, options: str, *, seed: Optional[int] = None) -> LibsvmModel:
    """Train a model from ``(labels, features, option_string)``."""

    request = LibsvmRequest.from_option_string(options)
    _check_request(request)

    y = np.asarray(labels, dtype=float).ravel()
    X = np.asarray(features, dtype=float)
    if X.ndim != 2 or X.shape[0] != y.shape[0]:
        raise ValueError(f"labels and features do not align: {y.shape} vs {X.shape}")

    if request.svm_type != ONE_CLASS and np.unique(y).size == 1:
        logger.warning("training data in only one class; the model always predicts %s", format_label(y[0]))

    model = _fit(request, X, y, seed)

    if request.nr_fold is not None and X.shape[0] >= 2:
        accuracy = _cross_validate(request, X, y, seed)
        logger.info("Cross Validation Accuracy = %g%%", accuracy)
        model = dataclasses.replace(model, cross_validation_accuracy=accuracy)

    return model


def svmpredict(model: LibsvmModel, features, *, probability: bool = False) -> Tuple[np.ndarray, np.ndarray]:
    """Predict labels plus decision values (or class probabilities).

    Decision values have one column per class pair (one column for one-class
    models, none for single-class models). Probabilities follow ``model.label``.
    """

    X = np.asarray(features, dtype=float)
    n = X.shape[0]

    if model.is_one_class:
        if probability:
            raise ValueError("probability estimates are not supported for one-class models")
        labels = np.asarray(model.estimator.predict(X), dtype=float)
        return labels, np.asarray(model.estimator.decision_function(X), dtype=float).reshape(n, 1)

    if probability and not model.has_probability:
        raise ValueError("model does not support probability estimates")

    if model.estimator is None:
        labels = np.full(n, model.label[0], dtype=float)
        values = np.ones((n, 1)) if probability else np.empty((n, 0))
        return labels, values

    est = model.estimator
    if probability:
        proba = np.asarray(est.predict_proba(X), dtype=float)
        return model.label[np.argmax(proba, axis=1)], proba

    labels = np.asarray(est.predict(X), dtype=float)
    dec = np.asarray(est.decision_function(X), dtype=float)
    if model.nr_class == 2:
        dec = -dec.reshape(n, 1)
    return labels, dec
