from src.coral.logging.context import derive_context_string


def test_short_context_is_padded() -> None:
    assert derive_context_string("1234") == "1234            "


def test_medium_context_is_padded() -> None:
    assert derive_context_string("12345678901234") == "12345678901234  "


def test_long_context_is_truncated() -> None:
    assert derive_context_string("12345678901234567890") == "1234567890123..."


def test_boundaries() -> None:
    assert derive_context_string("") == " " * 16
    assert derive_context_string("12345678") == "12345678        "
    assert derive_context_string("123456789") == "123456789       "
    assert derive_context_string("1234567890123456") == "1234567890123456"
    assert derive_context_string("12345678901234567") == "1234567890123..."


def test_label_is_always_sixteen_characters() -> None:
    for n in range(0, 40):
        assert len(derive_context_string("x" * n)) == 16
