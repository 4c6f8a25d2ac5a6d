"""
Tests for sentence generation.

Scripted random sources replay draws in the order the generator makes
them: extra words (bound 3), number position, then per slot the number
value (bound 100) when due, the word roll (bound 10), the lujvo roll
(bound 5, only with lujvo enabled) and the entry index.
"""

import pytest

from lojban_passgen.generators.sentence import (
    Sentence,
    SentenceGenerator,
    generate_sentence,
    meaning_index,
    replacement_index,
)


class TestMeaningIndex:
    """Tests for mapping token positions to gloss positions."""

    def test_before_number(self):
        assert meaning_index(0, 2) == 0
        assert meaning_index(1, 2) == 1

    def test_number_itself(self):
        assert meaning_index(2, 2) is None

    def test_after_number(self):
        assert meaning_index(3, 2) == 2
        assert meaning_index(1, 0) == 0

    def test_number_last(self):
        """With the number last, token and gloss indexes coincide."""
        assert [meaning_index(i, 3) for i in range(3)] == [0, 1, 2]


class TestReplacementIndex:
    """Tests for moving the replacement off the number token."""

    def test_word_position_kept(self):
        assert replacement_index(0, 1, 3) == 0
        assert replacement_index(2, 1, 3) == 2

    def test_number_position_advanced(self):
        assert replacement_index(1, 1, 3) == 2

    def test_number_last_wraps(self):
        assert replacement_index(2, 2, 3) == 0

    def test_single_token_kept(self):
        """A lone number token is replaced when nothing else exists."""
        assert replacement_index(0, 0, 1) == 0


class TestScriptedSentences:
    """Exact outputs for fixed draws."""

    def test_basic_assembly(self, lexicon, scripted_rng):
        rng = scripted_rng([0, 1, 2, 0, 42, 7, 0])
        sentence = SentenceGenerator(lexicon, rng).build(2)
        assert sentence.tokens == ["gismu", "42", "mi"]
        assert sentence.meanings == ["gismu: x1 is a root word", "mi: I"]
        assert sentence.number_pos == 1
        assert rng.bounds == [3, 3, 10, 4, 100, 10, 4]

    def test_word_roll_split(self, lexicon, scripted_rng):
        """Rolls 0-4 pick gismu, 5-9 pick cmavo."""
        rng = scripted_rng([2, 4, 4, 0, 5, 0, 9, 1, 0, 3, 3])
        sentence = SentenceGenerator(lexicon, rng).build(2)
        assert sentence.tokens == ["gismu", "mi", "do", "klama", "3"]

    def test_forced_apostrophe_skips_number(self, lexicon, scripted_rng):
        """A replacement drawn on the number moves to the next token."""
        rng = scripted_rng([0, 1, 2, 0, 42, 7, 0, 0, 1])
        sentence = SentenceGenerator(lexicon, rng).build(2, include_apostrophe=True)
        assert sentence.tokens == ["gismu", "42", "ta'e"]
        assert sentence.meanings == ["gismu: x1 is a root word", "ta'e: habitually"]

    def test_forced_apostrophe_before_number(self, lexicon, scripted_rng):
        rng = scripted_rng([0, 1, 2, 0, 42, 7, 0, 0, 0])
        sentence = SentenceGenerator(lexicon, rng).build(2, include_apostrophe=True)
        assert sentence.tokens == ["ta'e", "42", "mi"]
        assert sentence.meanings == ["ta'e: habitually", "mi: I"]

    def test_forced_apostrophe_wraps_past_trailing_number(self, lexicon, scripted_rng):
        rng = scripted_rng([0, 2, 0, 1, 9, 1, 7, 1, 2])
        sentence = SentenceGenerator(lexicon, rng).build(2, include_apostrophe=True)
        assert sentence.tokens == ["la'o", "do", "7"]
        assert sentence.meanings == ["la'o: the non-Lojban name", "do: you"]

    def test_forced_apostrophe_after_number(self, lexicon, scripted_rng):
        """Glosses after the number sit one place earlier than their tokens."""
        rng = scripted_rng([1, 0, 99, 0, 0, 1, 1, 6, 1, 1, 2])
        sentence = SentenceGenerator(lexicon, rng).build(2, include_apostrophe=True)
        assert sentence.tokens == ["99", "gismu", "la'o", "do"]
        assert sentence.meanings == ["gismu: x1 is a root word", "la'o: the non-Lojban name", "do: you"]

    def test_zero_length(self, lexicon, scripted_rng):
        """With no words the sentence is just the number."""
        rng = scripted_rng([0, 0, 7])
        text, meanings = SentenceGenerator(lexicon, rng).generate(0)
        assert text == "7"
        assert meanings == []

    def test_zero_length_forced_apostrophe_replaces_number(self, lexicon, scripted_rng):
        rng = scripted_rng([0, 0, 7, 0, 0])
        sentence = SentenceGenerator(lexicon, rng).build(0, include_apostrophe=True)
        assert sentence.tokens == ["ta'e"]
        assert sentence.meanings == []

    def test_existing_apostrophe_not_replaced(self, lexicon, scripted_rng):
        rng = scripted_rng([0, 0, 5, 6, 2])
        sentence = SentenceGenerator(lexicon, rng).build(1, include_apostrophe=True)
        assert sentence.tokens == ["5", "ta'e"]
        assert rng.draws == []
        assert rng.bounds == [3, 2, 100, 10, 4]

    def test_lujvo_injected(self, lexicon, scripted_rng):
        rng = scripted_rng([0, 1, 3, 0, 2, 1, 0, 12])
        sentence = SentenceGenerator(lexicon, rng, include_lujvo=True).build(1)
        assert sentence.tokens == ["pambroda", "12"]
        assert sentence.meanings == ["pambroda: lujvo(love + predicate 1)"]

    def test_lujvo_roll_missed(self, lexicon, scripted_rng):
        """A missed lujvo roll falls back to the word roll."""
        rng = scripted_rng([0, 1, 3, 4, 3, 12])
        sentence = SentenceGenerator(lexicon, rng, include_lujvo=True).build(1)
        assert sentence.tokens == ["klama", "12"]
        assert rng.bounds == [3, 2, 10, 5, 4, 100]

    def test_no_apostrophe_entries_is_noop(self, plain_lexicon, scripted_rng):
        """Forcing without candidates leaves the sentence unchanged."""
        draws = [0, 1, 2, 0, 42, 7, 0]
        forced = SentenceGenerator(plain_lexicon, scripted_rng(draws)).build(2, include_apostrophe=True)
        plain = SentenceGenerator(plain_lexicon, scripted_rng(draws)).build(2)
        assert forced.tokens == plain.tokens
        assert forced.meanings == plain.meanings


class TestSentenceProperties:
    """Properties that hold for any draw."""

    @pytest.mark.parametrize("min_size", [0, 1, 3, 5, 8])
    def test_token_count(self, lexicon, min_size):
        generator = SentenceGenerator(lexicon, include_lujvo=True)
        for _ in range(30):
            text, meanings = generator.generate(min_size)
            tokens = text.split(" ")
            assert min_size + 1 <= len(tokens) <= min_size + 3
            assert len(meanings) == len(tokens) - 1

    def test_exactly_one_number(self, lexicon):
        generator = SentenceGenerator(lexicon)
        for _ in range(30):
            sentence = generator.build(4)
            numbers = [t for t in sentence.tokens if t.isdigit()]
            assert len(numbers) == 1
            assert 0 <= int(numbers[0]) < 100
            assert sentence.tokens[sentence.number_pos] == numbers[0]

    def test_number_has_no_leading_zero(self, lexicon):
        generator = SentenceGenerator(lexicon)
        for _ in range(50):
            sentence = generator.build(1)
            number = sentence.tokens[sentence.number_pos]
            assert number == str(int(number))

    def test_dot_appended_once(self, lexicon):
        generator = SentenceGenerator(lexicon)
        for _ in range(50):
            text, _ = generator.generate(3, include_dot=True)
            assert text.endswith(".")
            assert not text.endswith("..")

    def test_no_dot_by_default(self, lexicon):
        text, _ = SentenceGenerator(lexicon).generate(3)
        assert not text.endswith(".")

    def test_apostrophe_always_present(self, lexicon):
        generator = SentenceGenerator(lexicon, include_lujvo=True)
        for _ in range(50):
            text, _ = generator.generate(5, include_apostrophe=True)
            assert "'" in text

    def test_apostrophe_and_dot(self, lexicon):
        generator = SentenceGenerator(lexicon)
        for _ in range(20):
            text, _ = generator.generate(2, include_dot=True, include_apostrophe=True)
            assert "'" in text
            assert text.endswith(".")

    def test_forcing_without_candidates_never_fails(self, plain_lexicon):
        generator = SentenceGenerator(plain_lexicon)
        for _ in range(20):
            text, _ = generator.generate(3, include_apostrophe=True)
            assert "'" not in text

    def test_meanings_follow_tokens(self, lexicon):
        """Every gloss starts with its word, in token order."""
        generator = SentenceGenerator(lexicon, include_lujvo=True)
        for _ in range(30):
            sentence = generator.build(4, include_apostrophe=True)
            words = [t for i, t in enumerate(sentence.tokens) if i != sentence.number_pos]
            if len(sentence.tokens) == 1:
                continue
            assert [m.split(": ", 1)[0] for m in sentence.meanings] == words

    def test_negative_min_size(self, lexicon):
        with pytest.raises(ValueError):
            SentenceGenerator(lexicon).build(-1)


class TestSentence:
    """Tests for the Sentence value."""

    def test_text_joins_tokens(self):
        sentence = Sentence(["mi", "42", "klama"], ["mi: I", "klama: go"], 1)
        assert sentence.text == "mi 42 klama"
        assert str(sentence) == "mi 42 klama"

    def test_text_with_dot(self):
        sentence = Sentence(["mi", "42"], ["mi: I"], 1, include_dot=True)
        assert sentence.text == "mi 42."

    def test_has_apostrophe(self):
        assert Sentence(["ta'e", "1"], [], 1).has_apostrophe
        assert not Sentence(["mi", "1"], [], 1).has_apostrophe

    def test_generate_sentence_helper(self, lexicon):
        text, meanings = generate_sentence(lexicon, 3, include_dot=True)
        assert text.endswith(".")
        assert len(meanings) >= 3
