import pytest

from wordle_assist.modules.wordle.checker import filter_words, is_word_hint_match
from wordle_assist.modules.wordle.hints import (
    ExcludedHint, ExcludedPositionsHint, HintError, PositionHint,
)

WORDS = ["arise", "chose", "apple", "grape", "amber", "stone", "shire", "prize"]


def test_position_hint_keeps_letter_at_index():
    assert filter_words(["arise", "chose"], [PositionHint("i", 2)]) == ["arise"]


def test_skip_removes_every_word_with_letter():
    out = filter_words(WORDS, [ExcludedHint("a")])
    assert out == ["chose", "stone", "shire", "prize"]
    assert all("a" not in w for w in out)


def test_notpos_requires_letter_elsewhere():
    h = ExcludedPositionsHint("r", (1,))
    assert is_word_hint_match("shire", h)
    assert not is_word_hint_match("prize", h)
    assert not is_word_hint_match("stone", h)


def test_notpos_does_not_count_letters():
    # one "e" satisfies two separate yellow hints for "e"
    hints = [ExcludedPositionsHint("e", (0,)), ExcludedPositionsHint("e", (1,))]
    assert filter_words(["chose"], hints) == ["chose"]


def test_all_hints_must_hold():
    hints = [
        ExcludedHint("a"),
        ExcludedPositionsHint("r", (1,)),
        PositionHint("i", 2),
        ExcludedPositionsHint("s", (3,)),
        PositionHint("e", 4),
    ]
    assert filter_words(WORDS, hints) == ["shire"]


def test_no_hints_keeps_everything_in_order():
    assert filter_words(WORDS, []) == WORDS


def test_contradictory_hints_give_empty_list():
    assert filter_words(WORDS, [PositionHint("a", 0), ExcludedHint("a")]) == []


def test_filter_is_idempotent():
    hints = [ExcludedHint("a"), ExcludedPositionsHint("e", (2,))]
    once = filter_words(WORDS, hints)
    assert filter_words(once, hints) == once


def test_non_hint_is_rejected():
    with pytest.raises(HintError):
        is_word_hint_match("apple", {"char": "a", "skip": True})
