import pytest

from falling_blocks.game import LevelRules, ScoringRules


def test_score_table_strictly_increasing():
    rules = ScoringRules()
    scores = [rules.score_for_lines(n) for n in range(5)]
    assert scores[0] == 0
    assert all(a < b for a, b in zip(scores, scores[1:]))


def test_score_table_must_increase():
    with pytest.raises(ValueError):
        ScoringRules(line_clear_scores=(100, 100, 200, 300))


def test_level_every_ten_lines():
    rules = LevelRules()
    assert rules.level_for_lines(0) == 1
    assert rules.level_for_lines(9) == 1
    assert rules.level_for_lines(10) == 2
    assert rules.level_for_lines(25) == 3


def test_fall_interval_decreases_to_floor():
    rules = LevelRules()
    intervals = [rules.fall_interval(level) for level in range(1, 11)]
    assert intervals[0] == pytest.approx(0.8)
    assert all(a > b for a, b in zip(intervals, intervals[1:]))
    assert rules.fall_interval(100) == pytest.approx(rules.min_fall_interval)


@pytest.mark.parametrize("kwargs", [
    {"lines_per_level": 3},
    {"start_level": 0},
    {"min_fall_interval": 0},
    {"base_fall_interval": 0.05},
])
def test_invalid_level_rules(kwargs):
    with pytest.raises(ValueError):
        LevelRules(**kwargs)
