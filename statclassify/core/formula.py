from __future__ import annotations

"""Table inputs: response names and ``"y ~ x1 + x2"`` formulas.

Grammar::

    formula  := response "~" term ("+" term)*
    response := identifier
    term     := identifier

Whitespace is ignored. With a table, Y may instead be the name of the
response column (all other columns become predictors) or a label vector
(all columns become predictors).
"""

import re
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

import numpy as np
import pandas as pd

from statclassify.contracts.errors import FormulaError, ShapeError

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@dataclass(frozen=True)
class Formula:
    response: str
    predictors: Tuple[str, ...]


def parse_formula(text: str, *, component: str) -> Formula:
    sides = text.split("~")
    if len(sides) != 2:
        raise FormulaError(component, f"formula must contain exactly one '~': {text!r}.")

    response = sides[0].strip()
    if not response:
        raise FormulaError(component, "formula has no response variable.")
    if not _IDENTIFIER.match(response):
        raise FormulaError(component, f"invalid response name {response!r}.")

    terms = [t.strip() for t in sides[1].split("+")]
    if any(not t for t in terms):
        raise FormulaError(component, f"formula has an empty predictor term: {text!r}.")
    for t in terms:
        if not _IDENTIFIER.match(t):
            raise FormulaError(component, f"invalid predictor name {t!r}.")
    if len(set(terms)) != len(terms):
        raise FormulaError(component, "formula lists a predictor more than once.")
    if response in terms:
        raise FormulaError(component, f"response {response!r} cannot also be a predictor.")

    return Formula(response=response, predictors=tuple(terms))


def _require_columns(table: pd.DataFrame, names, component: str) -> None:
    missing = [n for n in names if n not in table.columns]
    if missing:
        raise FormulaError(component, f"unknown variable(s) in table: {', '.join(missing)}.")


def resolve_table_inputs(
    table: pd.DataFrame,
    response: Any,
    *,
    component: str,
) -> Tuple[np.ndarray, np.ndarray, List[str], Optional[str]]:
    """Split a table into (X, Y, predictor_names, response_name)."""

    if isinstance(response, str):
        if "~" in response:
            formula = parse_formula(response, component=component)
            _require_columns(table, (formula.response, *formula.predictors), component)
            predictors = list(formula.predictors)
            name = formula.response
        else:
            _require_columns(table, (response,), component)
            predictors = [str(c) for c in table.columns if c != response]
            name = response
        if not predictors:
            raise FormulaError(component, "the table has no predictor columns.")
        return table[predictors].to_numpy(), table[name].to_numpy(), predictors, name

    Y = np.asarray(response)
    if Y.ndim == 0 or Y.shape[0] != len(table):
        raise ShapeError(component, "number of rows in X and Y must be equal.")
    predictors = [str(c) for c in table.columns]
    return table.to_numpy(), Y, predictors, None


def select_predictors(table: pd.DataFrame, predictor_names: List[str], *, component: str) -> np.ndarray:
    """Reduce a prediction table to the model's predictor columns, in training order."""
    _require_columns(table, predictor_names, component)
    return table[predictor_names].to_numpy()
