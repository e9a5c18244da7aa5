from cliptails.config import ClipHistorySettings
from cliptails.indexer import index_clip, should_ignore_word, tokenize


def test_tokenize_splits_on_punctuation():
    assert tokenize("  foo.bar(baz, 'qux') ") == ["foo", "bar", "baz", "qux"]


def test_tokenize_keeps_underscores_and_dashes():
    assert tokenize("snake_case kebab-case") == ["snake_case", "kebab-case"]


def test_index_clip_dedups_in_first_seen_order():
    keywords = index_clip("user.name = get_name(user)", ClipHistorySettings())
    assert keywords == ["user", "name", "get_name"]


def test_short_words_are_never_keywords():
    assert index_clip("a bb ccc dddd", ClipHistorySettings()) == ["dddd"]


def test_ignored_words_are_dropped():
    settings = ClipHistorySettings(ignored_words=["return", "self"])
    assert index_clip("return self.value", settings) == ["value"]


def test_ignored_regexes_are_dropped():
    settings = ClipHistorySettings(ignored_regexes=["^test_", "[0-9]"])
    assert index_clip("test_alpha beta2 gamma", settings) == ["gamma"]


def test_should_ignore_word():
    assert should_ignore_word("print", ["print"], []) is True
    assert should_ignore_word("print", [], ["^pr"]) is True
    assert should_ignore_word("abc", [], []) is True
    assert should_ignore_word("abcd", [], []) is False


def test_blank_text_has_no_keywords():
    assert index_clip("   \n\t", ClipHistorySettings()) == []
