# scripts/run_svm_local.py
from __future__ import annotations

import json
import logging

import numpy as np

from statclassify import fit_classifier

# ==== EDIT THESE VALUES AS YOU LIKE ==========================================
# Example A: NPZ bundle with X / y arrays
# NPZ_PATH = r"./data/example/features.npz"
# X_KEY, Y_KEY = "X", "y"

# Example B: synthetic blobs (leave NPZ_PATH as None)
NPZ_PATH = None
X_KEY, Y_KEY = "X", "y"

FAMILY = "svm"   # "svm" | "net"

SVM_OPTIONS = dict(
    KernelFunction="rbf",      # "linear","polynomial","rbf","sigmoid","precomputed"
    BoxConstraint=1.0,
    ProbabilityEstimates=1,
    KFold=5,
)

NET_OPTIONS = dict(
    NumLayers=2,
    NumNeurons=[16, 8],
    ActivationFunction="ReLU",  # "ReLU","Sigmoid","Tanh","Softmax"
    Epochs=200,
    Verbose=0,
)
# ============================================================================


def load_data():
    if NPZ_PATH is not None:
        bundle = np.load(NPZ_PATH)
        return np.asarray(bundle[X_KEY], dtype=float), np.asarray(bundle[Y_KEY], dtype=float)
    rng = np.random.default_rng(0)
    X = np.vstack([rng.normal(-2.0, 1.0, (50, 4)), rng.normal(2.0, 1.0, (50, 4))])
    y = np.repeat([1.0, 2.0], 50)
    return X, y


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    X, y = load_data()
    options = SVM_OPTIONS if FAMILY == "svm" else NET_OPTIONS
    model = fit_classifier(FAMILY, X, y, **options)

    print("\n=== SUMMARY ===")
    print(json.dumps(model.summary().model_dump(), indent=2))

    labels = model.predict(X)[0]
    print(f"\ntraining accuracy: {np.mean(labels == y):.4f}")


if __name__ == "__main__":
    main()
