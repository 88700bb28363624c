from spelint.tokenizer import Token, Tokenizer, tokenize


def test_tokenize_splits_on_punctuation_and_whitespace() -> None:
    assert tokenize("Hello, world!") == [Token(0, 5, "Hello"), Token(7, 12, "world")]


def test_tokenize_uses_byte_offsets_for_multibyte_text() -> None:
    text = "naïve café"
    tokens = tokenize(text)

    assert tokens == [Token(0, 6, "naïve"), Token(7, 12, "café")]
    encoded = text.encode("utf-8")
    assert [encoded[t.start : t.end].decode("utf-8") for t in tokens] == ["naïve", "café"]


def test_tokenize_keeps_combining_marks_inside_words() -> None:
    assert tokenize("cafe\u0301 ok") == [Token(0, 6, "cafe\u0301"), Token(7, 9, "ok")]
    assert tokenize("ne\u0301s") == [Token(0, 5, "ne\u0301s")]


def test_tokenize_splits_on_digits_and_underscores() -> None:
    assert [t.text for t in tokenize("abc123def foo_bar")] == ["abc", "def", "foo", "bar"]
    assert tokenize("abc123def")[1] == Token(6, 9, "def")


def test_tokenize_handles_empty_and_letterless_text() -> None:
    assert tokenize("") == []
    assert tokenize("123 !? 456") == []


def test_tokenizer_is_stateless_between_calls() -> None:
    tokenizer = Tokenizer()

    first = tokenizer.tokenize("one two")
    second = tokenizer.tokenize("one two")

    assert first == second
    assert [t.text for t in tokenizer.tokenize("Grüße aus Köln")] == ["Grüße", "aus", "Köln"]
