"""
Tests for the classifier registry and runtime settings

Run with: pytest tests/test_registry.py
"""

import numpy as np
import pytest

from statclassify import ClassificationNeuralNetwork, ClassificationSVM, fit_classifier, list_classifiers
from statclassify.contracts.errors import UnsupportedValueError
from statclassify.registries import Registry
from statclassify.runtime import RngManager, get_settings


class TestRegistry:
    def test_builtin_families(self):
        assert list_classifiers() == ["net", "svm"]

    def test_fit_by_family(self, two_blobs):
        X, Y = two_blobs
        assert isinstance(fit_classifier("svm", X, Y, "KFold", 2), ClassificationSVM)
        net = fit_classifier("net", X, Y, Epochs=3, Verbose=0)
        assert isinstance(net, ClassificationNeuralNetwork)

    def test_unknown_family(self, two_blobs):
        X, Y = two_blobs
        with pytest.raises(UnsupportedValueError, match="^fit_classifier: unknown key 'tree'"):
            fit_classifier("tree", X, Y)

    def test_family_is_case_insensitive(self, two_blobs):
        X, Y = two_blobs
        assert isinstance(fit_classifier("SVM", X, Y, "KFold", 2), ClassificationSVM)

    def test_registry_get(self):
        reg = Registry[int](name="numbers")
        reg.register("One")(1)
        assert reg.get("one") == 1
        assert "ONE" in reg
        assert reg.try_get("two") is None
        with pytest.raises(UnsupportedValueError, match="^numbers: "):
            reg.get("two")

    def test_duplicate_registration(self):
        reg = Registry[int](name="numbers")
        reg.register("one")(1)
        with pytest.raises(ValueError, match="already registered"):
            reg.register("one")(2)

    def test_config_exports(self):
        from statclassify.contracts import choices, model_families

        assert sorted(model_families.__all__) == [
            "DEFAULT_SOLVER_TOLERANCE", "NeuralNetworkConfig", "SOLVER_DEFAULTS", "SVMConfig", "ValidationData",
        ]
        assert not hasattr(model_families, "get_config_type")
        assert not hasattr(choices, "ClassifierFamily")


class TestRuntime:
    def test_child_seeds_are_stable(self):
        assert RngManager(7).child_seed("svmtrain") == RngManager(7).child_seed("svmtrain")
        assert RngManager(7).child_seed("svmtrain") != RngManager(7).child_seed("mlp")
        assert RngManager(7).child_seed("mlp") != RngManager(8).child_seed("mlp")

    def test_seed_from_environment(self, monkeypatch):
        get_settings.cache_clear()
        monkeypatch.setenv("STATCLASSIFY_SEED", "42")
        try:
            assert get_settings().seed == 42
            assert RngManager().child_seed("x") == RngManager(42).child_seed("x")
        finally:
            get_settings.cache_clear()

    def test_seed_default(self, monkeypatch):
        get_settings.cache_clear()
        monkeypatch.delenv("STATCLASSIFY_SEED", raising=False)
        try:
            assert get_settings().seed == 0
        finally:
            get_settings.cache_clear()
