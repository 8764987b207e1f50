"""Tests for ready-made collection stages."""

from pipewise.services.pipeline import build
from pipewise.services.stages import filter_stage, map_stage


def is_even(n):
    return n % 2 == 0


def square(n):
    return n * n


class TestFilterStage:
    """Tests for filter_stage."""

    def test_keeps_matching_items(self):
        assert filter_stage(is_even)([1, 2, 3, 4]) == [2, 4]

    def test_accepts_any_iterable(self):
        assert filter_stage(is_even)(range(5)) == [0, 2, 4]

    def test_named_after_predicate(self):
        assert filter_stage(is_even).__name__ == "filter(is_even)"


class TestMapStage:
    """Tests for map_stage."""

    def test_applies_function(self):
        assert map_stage(square)((1, 2, 3)) == [1, 4, 9]

    def test_named_after_function(self):
        assert map_stage(square).__name__ == "map(square)"

    def test_chained_in_pipeline(self):
        pipe = build(filter_stage(is_even), map_stage(square))
        value, err = pipe(range(1, 7))
        assert err is None
        assert value == [4, 16, 36]

    def test_failure_inside_stage_is_returned(self):
        def invert(n):
            return 1 / n

        value, err = build(map_stage(invert))([1, 0])
        assert value is None
        assert isinstance(err, ZeroDivisionError)
