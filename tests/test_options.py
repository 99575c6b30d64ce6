"""
Tests for name/value option parsing

Run with: pytest tests/test_options.py
"""

import numpy as np
import pytest

from statclassify.contracts.errors import (
    ArityError,
    DomainError,
    OptionTypeError,
    UnknownOptionError,
    UnsupportedValueError,
)
from statclassify.core.options import (
    SVMOption,
    build_net_config,
    build_svm_config,
    lookup_option,
    split_name_value_pairs,
)

C = "ClassificationSVM"


def svm_config(*args, n_features=2, **kwargs):
    pairs = split_name_value_pairs(args, kwargs, component=C)
    return build_svm_config(pairs, n_features=n_features, component=C)


class TestPairs:
    def test_positional_then_keyword_order(self):
        pairs = split_name_value_pairs(("Nu", 0.3), {"KFold": 5}, component=C)
        assert pairs == [("Nu", 0.3), ("KFold", 5)]

    def test_odd_argument_count(self):
        with pytest.raises(ArityError, match="must be in pairs"):
            split_name_value_pairs(("Nu",), component=C)

    def test_non_string_name(self):
        with pytest.raises(OptionTypeError):
            split_name_value_pairs((3, 4), component=C)

    def test_lookup_is_case_insensitive(self):
        assert lookup_option(SVMOption, "BOXCONSTRAINT", component=C) is SVMOption.BOX_CONSTRAINT
        assert lookup_option(SVMOption, "box_constraint", component=C) is SVMOption.BOX_CONSTRAINT

    def test_unknown_name(self):
        with pytest.raises(UnknownOptionError, match="invalid parameter name 'some'"):
            lookup_option(SVMOption, "some", component=C)


class TestSVMDefaults:
    def test_defaults(self):
        cfg = svm_config()
        assert cfg.svm_type == "C_SVC"
        assert cfg.kernel_function == "rbf"
        assert cfg.polynomial_order == 3
        assert cfg.gamma == pytest.approx(0.5)
        assert cfg.kernel_offset == 0.0
        assert cfg.box_constraint == 1.0
        assert cfg.nu == 0.5
        assert cfg.cache_size == 100.0
        assert cfg.tolerance == pytest.approx(1e-3)
        assert cfg.shrinking is True
        assert cfg.probability_estimates is False
        assert cfg.weight is None
        assert cfg.kfold == 10
        assert cfg.solver == "SMO"

    def test_gamma_follows_predictor_count(self):
        assert svm_config(n_features=4).gamma == pytest.approx(0.25)

    def test_isda_defaults(self):
        cfg = svm_config("Solver", "isda")
        assert cfg.solver == "ISDA"
        assert cfg.kernel_offset == pytest.approx(0.1)
        assert cfg.tolerance == 0.0
        assert cfg.kkt_tolerance == pytest.approx(1e-3)
        assert cfg.solver_tolerance == pytest.approx(1e-3)

    def test_zero_tolerances_fall_back_to_default(self):
        cfg = svm_config("Tolerance", 0)
        assert cfg.tolerance == 0.0
        assert cfg.kkt_tolerance == 0.0
        assert cfg.solver_tolerance == pytest.approx(1e-3)

    def test_zero_tolerance_uses_kkt_tolerance(self):
        cfg = svm_config("Tolerance", 0, "KKTTolerance", 1e-4)
        assert cfg.solver_tolerance == pytest.approx(1e-4)

    def test_smallest_printable_values_are_accepted(self):
        cfg = svm_config("Gamma", 1e-6, "Tolerance", 1e-6, "Weight", {1: 0.01})
        assert cfg.gamma == pytest.approx(1e-6)
        assert cfg.weight == {1.0: 0.01}

    def test_isda_keeps_explicit_values(self):
        cfg = svm_config("KernelOffset", 0.5, "Solver", "ISDA", "Tolerance", 1e-4)
        assert cfg.kernel_offset == 0.5
        assert cfg.tolerance == pytest.approx(1e-4)
        assert cfg.solver_tolerance == pytest.approx(1e-4)


class TestSVMValues:
    def test_last_occurrence_wins(self):
        cfg = svm_config("BoxConstraint", 2, "boxconstraint", 5, BoxConstraint=7)
        assert cfg.box_constraint == 7

    def test_choices_are_canonicalised(self):
        cfg = svm_config("SVMType", "NU_svc", "KernelFunction", "Polynomial")
        assert cfg.svm_type == "nu_SVC"
        assert cfg.kernel_function == "polynomial"

    def test_flags_accept_bool_and_numbers(self):
        cfg = svm_config("Shrinking", 0, "ProbabilityEstimates", True)
        assert cfg.shrinking is False
        assert cfg.probability_estimates is True

    def test_weight_keys_are_parsed(self):
        cfg = svm_config("Weight", {"1": 2, 2: 0.5})
        assert cfg.weight == {1.0: 2.0, 2.0: 0.5}

    def test_config_is_frozen(self):
        cfg = svm_config()
        with pytest.raises(Exception):
            cfg.box_constraint = 3.0

    @pytest.mark.parametrize(
        "name, value, error, message",
        [
            ("SVMType", 123, OptionTypeError, "SVMType must be a string"),
            ("SVMType", "unsupported_type", UnsupportedValueError, "unsupported SVMType"),
            ("KernelFunction", 123, OptionTypeError, "KernelFunction must be a string"),
            ("KernelFunction", "unsupported_function", UnsupportedValueError, "unsupported KernelFunction"),
            ("PolynomialOrder", -1, DomainError, "PolynomialOrder must be a positive integer"),
            ("PolynomialOrder", 0.5, DomainError, "PolynomialOrder must be a positive integer"),
            ("PolynomialOrder", [1, 2], DomainError, "PolynomialOrder must be a positive integer"),
            ("Gamma", -1, DomainError, "Gamma must be a positive scalar"),
            ("Gamma", 0, DomainError, "Gamma must be a positive scalar"),
            ("Gamma", [1, 2], DomainError, "Gamma must be a positive scalar"),
            ("Gamma", "invalid", DomainError, "Gamma must be a positive scalar"),
            ("KernelOffset", -1, DomainError, "KernelOffset must be a non-negative scalar"),
            ("BoxConstraint", -1, DomainError, "BoxConstraint must be a positive scalar"),
            ("BoxConstraint", [1, 2], DomainError, "BoxConstraint must be a positive scalar"),
            ("Nu", -0.5, DomainError, "Nu must be a positive scalar in the range 0 < Nu <= 1"),
            ("Nu", 1.5, DomainError, "Nu must be a positive scalar in the range 0 < Nu <= 1"),
            ("CacheSize", -1, DomainError, "CacheSize must be a positive scalar"),
            ("Tolerance", -0.1, DomainError, "Tolerance must be a non-negative scalar"),
            ("Tolerance", [0.1, 0.2], DomainError, "Tolerance must be a non-negative scalar"),
            ("KKTTolerance", -1, DomainError, "KKTTolerance must be a non-negative scalar"),
            ("Shrinking", 2, DomainError, "Shrinking must be either 0 or 1"),
            ("Shrinking", -1, DomainError, "Shrinking must be either 0 or 1"),
            ("ProbabilityEstimates", 2, DomainError, "ProbabilityEstimates must be either 0 or 1"),
            ("Weight", 1, OptionTypeError, "Weight must be provided as a mapping"),
            ("Weight", {"a": 15, "2": 7}, OptionTypeError, "Class labels in the weight mapping must be numeric"),
            ("Weight", {"1": "a", "2": 7}, OptionTypeError, "Weights in the weight mapping must be numeric scalars"),
            ("Weight", {"1": -2}, DomainError, "must be positive"),
            ("KFold", 1, DomainError, "KFold must be a positive integer greater than 1"),
            ("KFold", -1, DomainError, "KFold must be a positive integer greater than 1"),
            ("KFold", 0.5, DomainError, "KFold must be a positive integer greater than 1"),
            ("KFold", [1, 2], DomainError, "KFold must be a positive integer greater than 1"),
            ("Solver", "L1QP", UnsupportedValueError, "unsupported Solver"),
            ("Gamma", 1e-7, DomainError, "Gamma must be a positive scalar of at least 1e-06"),
            ("BoxConstraint", 1e-9, DomainError, "BoxConstraint must be a positive scalar of at least 1e-06"),
            ("CacheSize", 1e-7, DomainError, "CacheSize must be a positive scalar of at least 1e-06"),
            ("Nu", 1e-8, DomainError, "Nu must be at least 1e-06"),
            ("Tolerance", 1e-8, DomainError, "Tolerance must be either 0 or at least 1e-06"),
            ("KKTTolerance", 1e-9, DomainError, "KKTTolerance must be either 0 or at least 1e-06"),
            ("Weight", {1: 0.001}, DomainError, "Weights in the weight mapping must be at least 0.01"),
        ],
    )
    def test_invalid_values(self, name, value, error, message):
        with pytest.raises(error, match=message):
            svm_config(name, value)

    def test_messages_carry_component_prefix(self):
        with pytest.raises(DomainError) as excinfo:
            svm_config("BoxConstraint", -1)
        assert str(excinfo.value).startswith("ClassificationSVM: ")
        assert isinstance(excinfo.value, ValueError)


class TestNetOptions:
    def net_config(self, *args, **kwargs):
        pairs = split_name_value_pairs(args, kwargs, component="ClassificationNeuralNetwork")
        return build_net_config(pairs, component="ClassificationNeuralNetwork")

    def test_defaults(self):
        cfg = self.net_config()
        assert cfg.num_layers == 1
        assert cfg.num_neurons == (10,)
        assert cfg.activation_function == "ReLU"
        assert cfg.learning_rate == pytest.approx(0.01)
        assert cfg.epochs == 100
        assert cfg.batch_size == 32
        assert cfg.verbose is True

    def test_scalar_neurons_broadcast(self):
        cfg = self.net_config("NumLayers", 3, "NumNeurons", 4)
        assert cfg.num_neurons == (4, 4, 4)

    def test_neuron_vector(self):
        cfg = self.net_config("NumLayers", 2, "NumNeurons", np.array([8, 4]))
        assert cfg.hidden_layer_sizes == (8, 4)

    def test_neuron_vector_length_mismatch(self):
        with pytest.raises(DomainError, match="one entry per hidden layer"):
            self.net_config("NumLayers", 2, "NumNeurons", [4, 3, 2])

    def test_activation_choice(self):
        assert self.net_config("ActivationFunction", "tanh").activation_function == "Tanh"
        with pytest.raises(UnsupportedValueError):
            self.net_config("ActivationFunction", "gelu")

    def test_validation_data_fields(self):
        with pytest.raises(OptionTypeError, match="XVal"):
            self.net_config("ValidationData", {"X": np.ones((2, 2))})
