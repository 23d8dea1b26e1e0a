"""
Majority-vote column type inference tests.
"""
from collections import Counter

import numpy as np
import pytest

from program_review.planner.column_types import (
    custom_type_evaluator,
    infer_column_types,
    majority_type,
    tally_types,
    value_kind,
)


@pytest.mark.parametrize(
    "value,kind",
    [
        ("abc", "string"),
        ("", "string"),
        (5, "number"),
        (2.5, "number"),
        (np.int64(3), "number"),
        (np.float32(1.5), "number"),
        (True, "boolean"),
        (np.bool_(False), "boolean"),
        (None, "undefined"),
        ([1, 2], "object"),
        ({"a": 1}, "object"),
    ],
)
def test_value_kind(value, kind):
    assert value_kind(value) == kind


class TestCustomTypeEvaluator:

    def test_percentage_text_counts_as_number(self):
        assert custom_type_evaluator("50%", "Enrollment Ratio") == "number"

    def test_identifier_columns_are_strings(self):
        assert custom_type_evaluator(101, "Program ID") == "string"
        assert custom_type_evaluator("26.0101", "CIP") == "string"
        assert custom_type_evaluator("5%", "Program ID") == "string"

    def test_falls_back_to_intrinsic_kind(self):
        assert custom_type_evaluator(3, "Metrics Met") == "number"
        assert custom_type_evaluator("Annual", "Review Type") == "string"


class TestInferColumnTypes:

    def test_majority_wins(self):
        rows = [{"x": 5}, {"x": 6}, {"x": "abc"}]
        assert infer_column_types(rows) == {"x": "number"}

    def test_raw_text_is_all_string(self):
        rows = [{"x": "5"}, {"x": "5"}, {"x": "abc"}]
        assert infer_column_types(rows) == {"x": "string"}

    def test_percentage_rows_join_the_numeric_majority(self):
        rows = [{"Rate": 1}, {"Rate": 2}, {"Rate": 3}, {"Rate": "50%"}]
        assert infer_column_types(rows, custom_type_evaluator) == {"Rate": "number"}

    def test_percentage_majority_over_text(self):
        rows = [{"Rate": "10%"}, {"Rate": "n/a"}, {"Rate": "20%"}, {"Rate": "tbd"}, {"Rate": 4}]
        assert infer_column_types(rows, custom_type_evaluator) == {"Rate": "number"}

    def test_identifier_column_stays_string(self):
        rows = [{"Program ID": 101}, {"Program ID": 102}, {"Program ID": 103}]
        assert infer_column_types(rows, custom_type_evaluator) == {"Program ID": "string"}

    def test_tie_goes_to_first_seen_label(self):
        assert infer_column_types([{"x": "a"}, {"x": 1}]) == {"x": "string"}
        assert infer_column_types([{"x": 1}, {"x": "a"}]) == {"x": "number"}

    def test_columns_are_unioned_across_rows(self):
        rows = [{"a": 1}, {"b": "x"}, {"a": 2, "c": None}]
        assert infer_column_types(rows) == {"a": "number", "b": "string", "c": "undefined"}

    def test_column_order_follows_first_appearance(self):
        rows = [{"b": 1, "a": 1}, {"c": 1, "a": 2}]
        assert list(infer_column_types(rows)) == ["b", "a", "c"]

    @pytest.mark.parametrize("rows", [None, [], "rows", 3])
    def test_empty_or_invalid_input(self, rows):
        assert infer_column_types(rows) == {}

    def test_evaluator_receives_field_name(self):
        seen = []

        def evaluator(value, field):
            seen.append((value, field))
            return "string"

        infer_column_types([{"a": 1, "b": 2}], evaluator)
        assert seen == [(1, "a"), (2, "b")]


def test_tally_types_counts_per_column():
    rows = [{"x": 1}, {"x": "a"}, {"x": 2}]
    tallies = tally_types(rows)
    assert tallies == {"x": Counter({"number": 2, "string": 1})}
    assert list(tallies["x"]) == ["number", "string"]


def test_majority_type_tie_break_is_insertion_order():
    tally = Counter()
    tally["string"] += 2
    tally["number"] += 2
    assert majority_type(tally) == "string"
