import pytest

from blockdrop.game.scoring import Progression, drop_interval, line_clear_score


@pytest.mark.parametrize("cleared, base", [(1, 40), (2, 100), (3, 300), (4, 1200)])
@pytest.mark.parametrize("level", [1, 2, 5])
def test_line_clear_score(cleared, base, level):
    assert line_clear_score(cleared, level) == base * level


def test_no_rows_no_points():
    assert line_clear_score(0, 7) == 0


def test_more_than_four_rows_scores_as_four():
    assert line_clear_score(6, 2) == 2400


def test_negative_rows_rejected():
    with pytest.raises(ValueError):
        line_clear_score(-1, 1)


def test_apply_clear_accumulates():
    progression = Progression()
    assert progression.apply_clear(2) == 100
    assert progression.apply_clear(1) == 40
    assert progression.score == 140
    assert progression.lines == 3
    assert progression.level == 1


def test_level_up_at_threshold():
    progression = Progression(lines=8)
    progression.apply_clear(2)
    assert progression.level == 2


def test_score_uses_level_before_level_up():
    progression = Progression(lines=9)
    assert progression.apply_clear(1) == 40
    assert progression.level == 2


def test_single_level_up_even_when_two_thresholds_crossed():
    progression = Progression(lines=18)
    progression.apply_clear(4)
    assert progression.lines == 22
    assert progression.level == 2


def test_empty_landing_does_not_level_up():
    progression = Progression(lines=22, level=2)
    progression.apply_clear(0)
    assert progression.level == 2
    progression.apply_clear(1)
    assert progression.level == 3


def test_reset():
    progression = Progression(score=500, lines=12, level=2)
    progression.reset()
    assert (progression.score, progression.lines, progression.level) == (0, 0, 1)


def test_drop_interval_shrinks_with_level():
    assert drop_interval(200, 1) == 200
    assert drop_interval(200, 4) == 50
    assert drop_interval(500, 2) == 250
