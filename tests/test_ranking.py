import string

from wordle_assist.modules.wordle.ranking import calc_char_freqs, calc_char_ranks


def test_frequencies_for_apple_grape_amber():
    freqs = calc_char_freqs(["apple", "grape", "amber"])
    assert list(freqs) == list(string.ascii_lowercase)
    expected = {"a": 3, "p": 3, "l": 1, "e": 3, "g": 1, "r": 2, "m": 1, "b": 1}
    for ch in string.ascii_lowercase:
        assert freqs[ch] == expected.get(ch, 0)


def test_frequency_total_is_five_per_word():
    words = ["apple", "grape", "amber", "stone", "sassy"]
    freqs = calc_char_freqs(words)
    assert len(freqs) == 26
    assert sum(freqs.values()) == 5 * len(words)


def test_empty_candidates_still_have_26_zero_entries():
    freqs = calc_char_freqs([])
    assert freqs == dict.fromkeys(string.ascii_lowercase, 0)


def test_ranks_follow_descending_frequency():
    ranks = calc_char_ranks(calc_char_freqs(["apple", "grape"]))
    assert ranks["p"] == 1
    assert (ranks["a"], ranks["e"]) == (2, 3)
    assert (ranks["g"], ranks["l"], ranks["r"]) == (4, 5, 6)


def test_three_way_tie_is_alphabetical():
    ranks = calc_char_ranks(calc_char_freqs(["apple", "grape", "amber"]))
    assert {ranks["a"], ranks["e"], ranks["p"]} == {1, 2, 3}
    assert (ranks["a"], ranks["e"], ranks["p"]) == (1, 2, 3)
    assert ranks["r"] == 4
    assert [ranks[c] for c in "bglm"] == [5, 6, 7, 8]
    assert ranks["c"] == 9 and ranks["z"] == 26


def test_ranks_are_a_bijection_onto_1_to_26():
    ranks = calc_char_ranks(calc_char_freqs(["quick", "brown", "foxes", "jumps"]))
    assert set(ranks) == set(string.ascii_lowercase)
    assert sorted(ranks.values()) == list(range(1, 27))


def test_most_frequent_letter_is_rank_one():
    freqs = calc_char_freqs(["sassy", "stone", "shore"])
    top = max(freqs, key=freqs.get)
    assert top == "s"
    assert calc_char_ranks(freqs)[top] == 1
