"""
Unit tests for engine/fitting/policy.py
"""

import pytest

from engine.fitting import FitMode, InvalidFitPolicy, coerce_fit_mode, resolve


class TestResolve:

    def test_inside_returns_inside_value(self):
        assert resolve(FitMode.INSIDE, 1.0, 3.0) == 1.0

    def test_outside_returns_outside_value(self):
        assert resolve(FitMode.OUTSIDE, 1.0, 3.0) == 3.0

    def test_midway_returns_mean(self):
        assert resolve(FitMode.MIDWAY, 1.0, 3.0) == 2.0

    def test_no_ordering_validation(self):
        assert resolve(FitMode.MIDWAY, 5.0, 1.0) == 3.0

    def test_unknown_mode_raises(self):
        with pytest.raises(InvalidFitPolicy):
            resolve("sideways", 1.0, 2.0)

    def test_plain_string_is_not_a_mode(self):
        with pytest.raises(InvalidFitPolicy):
            resolve("inside", 1.0, 2.0)

    def test_none_raises(self):
        with pytest.raises(InvalidFitPolicy):
            resolve(None, 1.0, 2.0)


class TestCoerceFitMode:

    def test_member_passes_through(self):
        assert coerce_fit_mode(FitMode.MIDWAY) is FitMode.MIDWAY

    @pytest.mark.parametrize("value,expected", [
        ("inside", FitMode.INSIDE),
        ("Outside", FitMode.OUTSIDE),
        ("MIDWAY", FitMode.MIDWAY),
    ])
    def test_strings_are_case_insensitive(self, value, expected):
        assert coerce_fit_mode(value) is expected

    def test_unknown_string_raises(self):
        with pytest.raises(InvalidFitPolicy):
            coerce_fit_mode("bogus")

    def test_invalid_fit_policy_is_runtime_error(self):
        with pytest.raises(RuntimeError):
            coerce_fit_mode("bogus")
