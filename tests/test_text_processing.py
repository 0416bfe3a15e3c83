from plagiarism_engine.core.text_processing import (
    count_words, generate_ngrams, normalize_text, split_sentences, term_frequency, to_percent, tokenize
)


class TestNormalizeText:
    def test_lowercases_and_strips_punctuation(self):
        assert normalize_text("The Quick, Brown Fox!") == "the quick brown fox"

    def test_collapses_whitespace(self):
        assert normalize_text("  many\t\tspaces \n and\nlines  ") == "many spaces and lines"

    def test_keeps_word_characters(self):
        assert normalize_text("snake_case and v2.0") == "snake_case and v20"

    def test_empty_and_punctuation_only(self):
        assert normalize_text("") == ""
        assert normalize_text("?!... --") == ""

    def test_deterministic(self):
        text = "Bahasa Indonesia: sangat BAIK, sekali."
        assert normalize_text(text) == normalize_text(text)


class TestNGrams:
    def test_bigrams_in_order(self):
        assert generate_ngrams("a b c d", 2) == ["a b", "b c", "c d"]

    def test_trigrams(self):
        assert generate_ngrams("a b c d", 3) == ["a b c", "b c d"]

    def test_exactly_n_tokens(self):
        assert generate_ngrams("a b c", 3) == ["a b c"]

    def test_too_few_tokens(self):
        assert generate_ngrams("a b", 3) == []
        assert generate_ngrams("", 2) == []


class TestTermFrequency:
    def test_normalized_counts(self):
        assert term_frequency("a b a c") == {"a": 0.5, "b": 0.25, "c": 0.25}

    def test_frequencies_sum_to_one(self, words):
        tf = term_frequency(words("w", 7) + " w0 w1")
        assert abs(sum(tf.values()) - 1.0) < 1e-12

    def test_empty_text_is_empty_map(self):
        assert term_frequency("") == {}
        assert tokenize("") == []


class TestSplitSentences:
    def test_terminal_punctuation(self):
        assert split_sentences("Hello world. How are you? Fine!") == ["Hello world.", "How are you?", "Fine!"]

    def test_no_terminator_is_one_sentence(self):
        assert split_sentences("no terminator here") == ["no terminator here"]

    def test_trailing_fragment_kept(self):
        assert split_sentences("First one. trailing words") == ["First one.", "trailing words"]

    def test_repeated_terminators(self):
        assert split_sentences("Wait... what?!") == ["Wait...", "what?!"]

    def test_empty(self):
        assert split_sentences("") == []
        assert split_sentences("   ") == []

    def test_limit(self):
        assert split_sentences("A. B. C. D.", limit=2) == ["A.", "B."]


def test_count_words():
    assert count_words("one two\nthree") == 3
    assert count_words("") == 0


def test_to_percent_rounds_half_up():
    assert to_percent(0.125) == 13
    assert to_percent(0.0) == 0
    assert to_percent(1.0) == 100
    assert to_percent(0.754) == 75
