"""
Tests for table inputs and formulas

Run with: pytest tests/test_formula.py
"""

import numpy as np
import pandas as pd
import pytest

from statclassify import fitcsvm, parse_formula
from statclassify.contracts.errors import FormulaError, ShapeError
from statclassify.core.formula import resolve_table_inputs


@pytest.fixture
def table(two_blobs):
    X, Y = two_blobs
    return pd.DataFrame({"a": X[:, 0], "b": X[:, 1], "noise": np.zeros(len(Y)), "label": Y})


class TestParseFormula:
    def test_parse(self):
        f = parse_formula(" y ~ x1 +x2 ", component="fitcsvm")
        assert f.response == "y"
        assert f.predictors == ("x1", "x2")

    @pytest.mark.parametrize(
        "text",
        ["y x1", "~ x1", "y ~", "y ~ x1 +", "y ~ x1 + x1", "y ~ y", "a ~ b ~ c", "y ~ 1x"],
    )
    def test_malformed(self, text):
        with pytest.raises(FormulaError, match="^fitcsvm: "):
            parse_formula(text, component="fitcsvm")


class TestTableInputs:
    def test_response_name(self, table):
        X, Y, names, response = resolve_table_inputs(table, "label", component="fitcsvm")
        assert names == ["a", "b", "noise"]
        assert response == "label"
        assert X.shape == (40, 3)
        np.testing.assert_array_equal(Y, table["label"].to_numpy())

    def test_formula_selects_columns(self, table):
        X, _, names, response = resolve_table_inputs(table, "label ~ b + a", component="fitcsvm")
        assert names == ["b", "a"]
        assert response == "label"
        np.testing.assert_array_equal(X[:, 0], table["b"].to_numpy())

    def test_label_vector(self, table):
        predictors = table[["a", "b"]]
        X, Y, names, response = resolve_table_inputs(predictors, table["label"].to_numpy(), component="fitcsvm")
        assert names == ["a", "b"]
        assert response is None

    def test_unknown_column(self, table):
        with pytest.raises(FormulaError, match="missing_col"):
            resolve_table_inputs(table, "label ~ a + missing_col", component="fitcsvm")

    def test_label_vector_length(self, table):
        with pytest.raises(ShapeError):
            resolve_table_inputs(table, np.ones(3), component="fitcsvm")


class TestFitFromTable:
    def test_fitcsvm_with_formula(self, table):
        obj = fitcsvm(table, "label ~ a + b", "KernelFunction", "linear")
        assert obj.predictor_names == ["a", "b"]
        assert obj.response_name == "label"

        new = pd.DataFrame({"b": [-2.0, 2.0], "a": [-2.0, 2.0], "extra": [0.0, 0.0]})
        labels, _, _ = obj.predict(new)
        np.testing.assert_array_equal(labels, [1.0, 2.0])

    def test_predict_table_missing_column(self, table):
        obj = fitcsvm(table, "label ~ a + b")
        with pytest.raises(FormulaError):
            obj.predict(pd.DataFrame({"a": [1.0]}))
