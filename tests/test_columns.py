"""Tests for column references and column classification."""
import enum

import pytest
import numpy as np
import pandas as pd

from common import (
    ArgumentError,
    ColumnRef,
    col,
    column_name,
    grouping_columns,
    is_nested_column,
    nested_columns,
    object_column,
)
from toy_models import Constant


class TestColumnRef:
    """Tests for col.<name> references."""

    def test_attribute_access(self):
        assert col.mod == ColumnRef("mod")
        assert col.mod.name == "mod"

    def test_call_for_non_identifiers(self):
        assert col("my model").name == "my model"

    def test_hashable(self):
        assert {col.mod: 1}[ColumnRef("mod")] == 1

    def test_not_equal_to_string(self):
        assert col.mod != "mod"

    def test_repr(self):
        assert repr(col.mod) == "col.mod"
        assert repr(col("my model")) == "col('my model')"

    def test_empty_name_rejected(self):
        with pytest.raises(ArgumentError):
            ColumnRef("")

    def test_dunder_lookup_is_not_a_column(self):
        with pytest.raises(AttributeError):
            col.__wrapped__


class TestColumnName:
    """Tests for resolving column arguments to names."""

    def test_string(self):
        assert column_name("mod") == "mod"

    def test_reference(self):
        assert column_name(col.mod) == "mod"

    def test_reference_and_string_agree(self):
        assert column_name(col.original) == column_name("original")

    @pytest.mark.parametrize("bad", [1, None, ["mod"]])
    def test_invalid(self, bad):
        with pytest.raises(ArgumentError):
            column_name(bad)


class TestNestedColumns:
    """Tests for scalar/nested column classification."""

    def test_model_column_is_nested(self, constants):
        assert is_nested_column(constants["mod"])

    def test_string_column_is_scalar(self, constants):
        assert not is_nested_column(constants["region"])

    def test_numeric_column_is_scalar(self, constants):
        assert not is_nested_column(constants["year"])

    def test_all_missing_column_is_scalar(self):
        assert not is_nested_column(pd.Series([None, None], dtype=object))

    def test_sub_frames_and_lists_are_nested(self):
        df = pd.DataFrame({
            "k": [1, 2],
            "frames": object_column([pd.DataFrame({"a": [1]}), pd.DataFrame({"a": [2]})]),
            "lists": object_column([[1, 2], [3]]),
        })
        assert nested_columns(df) == ["frames", "lists"]

    def test_extra_nested_types(self, constants):
        assert nested_columns(constants, nested_types=[str]) == ["region", "mod"]


class TestGroupingColumns:
    """Tests for grouping column inference."""

    def test_all_scalar_columns(self, constants):
        assert grouping_columns(constants, exclude="mod") == ["region", "year"]

    def test_scalar_object_column_excluded(self, constants):
        assert grouping_columns(constants, exclude="year") == ["region"]

    def test_exclude_by_reference(self, constants):
        assert grouping_columns(constants, exclude=col.year) == ["region"]

    def test_keeps_column_order(self):
        df = pd.DataFrame({
            "b": [1],
            "mod": object_column([Constant(1)]),
            "a": ["x"],
        })
        assert grouping_columns(df, exclude="mod") == ["b", "a"]


class TestObjectColumn:
    """Tests for packing objects into an object array."""

    def test_same_shape_frames_stay_whole(self):
        frames = [pd.DataFrame({"a": [1, 2]}), pd.DataFrame({"a": [3, 4]})]
        packed = object_column(frames)
        assert packed.shape == (2,)
        assert packed.dtype == object
        assert packed[1] is frames[1]

    def test_equal_length_lists_stay_whole(self):
        packed = object_column([[1, 2], [3, 4]])
        assert packed.shape == (2,)
        assert packed[0] == [1, 2]

    def test_empty(self):
        assert object_column([]).shape == (0,)

    def test_numpy_arrays(self):
        packed = object_column([np.zeros(3), np.ones(3)])
        assert packed.shape == (2,)
        assert packed[1].sum() == 3


class TestScalarOverrides:
    """Enum members and scalar_types count as grouping keys"""

    class Color(enum.Enum):
        RED = 1
        BLUE = 2

    def test_enum_column_is_scalar(self):
        series = pd.Series(object_column([self.Color.RED, self.Color.BLUE]))
        assert not is_nested_column(series)

    def test_scalar_types(self):
        class Key:
            pass

        df = pd.DataFrame({
            "key": object_column([Key(), Key()]),
            "mod": object_column([Constant(1), Constant(2)]),
        })
        assert grouping_columns(df, exclude="mod") == []
        assert grouping_columns(df, exclude="mod", scalar_types=[Key]) == ["key"]

    def test_nested_types_checked_first(self):
        series = pd.Series(object_column([self.Color.RED]))
        assert is_nested_column(series, nested_types=(self.Color,))
