from plagiarism_checker.preprocess import (
    DEFAULT_STOP_WORDS,
    AdvancedTextPreprocessor,
    SimpleTextProcessor,
    resolve_stop_words,
)


def test_splits_on_punctuation_and_lowercases():
    tokens = SimpleTextProcessor().process("Hello, world!! foo-bar")
    assert tokens == ["hello", "world", "foo", "bar"]


def test_underscore_is_a_separator():
    assert SimpleTextProcessor().process("snake_case") == ["snake", "case"]


def test_empty_text_gives_no_tokens():
    assert SimpleTextProcessor().process("") == []
    assert SimpleTextProcessor().process("  ...  ") == []


def test_default_stop_words_removed():
    tokens = SimpleTextProcessor().process("The quick brown fox jumps over the lazy dog")
    assert tokens == ["quick", "brown", "fox", "jumps", "lazy", "dog"]


def test_duplicates_are_kept():
    assert SimpleTextProcessor().process("fox fox dog") == ["fox", "fox", "dog"]


def test_case_sensitive_keeps_case():
    tokens = SimpleTextProcessor().process("Apple apple", case_sensitive=True)
    assert tokens == ["Apple", "apple"]


def test_stop_words_match_regardless_of_case():
    tokens = SimpleTextProcessor().process("The Fox", case_sensitive=True)
    assert tokens == ["Fox"]


def test_custom_stop_words_replace_default():
    tokens = SimpleTextProcessor().process("The fox and the dog", stop_words=["fox"])
    assert tokens == ["the", "and", "the", "dog"]


def test_empty_stop_word_list_disables_removal():
    assert SimpleTextProcessor().process("the a", stop_words=[]) == ["the", "a"]


def test_resolve_stop_words():
    assert resolve_stop_words(None) is DEFAULT_STOP_WORDS
    assert resolve_stop_words(["Foo", ""]) == frozenset({"foo"})


def test_advanced_preprocessor_matches_simple_rules():
    text = "Line one\r\nLine  two\n\n\nthree\tfour"
    assert AdvancedTextPreprocessor().preprocess(text) == SimpleTextProcessor().process(text)
    assert AdvancedTextPreprocessor().preprocess(text) == [
        "line",
        "one",
        "line",
        "two",
        "three",
        "four",
    ]
