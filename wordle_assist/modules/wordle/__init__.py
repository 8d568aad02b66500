from .dictionary import DictionaryError, load_dictionary, valid_words
from .hints import (
    HintError, PositionHint, ExcludedPositionsHint, ExcludedHint,
    parse_hint, parse_hints, hint_to_payload,
)
from .checker import is_word_hint_match, filter_words
from .ranking import calc_char_freqs, calc_char_ranks
from .suggest import calc_word_scores, sort_word_scores, run, suggest
from .parser import hints_from_marks, hints_from_feedback
