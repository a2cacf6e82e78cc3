import pytest

from fuzzmatch import (FuzzMatchError, InvalidInputError, InvalidTextError, Matcher,
                       fuzzy_match, fuzzy_match_score)


@pytest.mark.parametrize("text,pattern", [(None, "a"), ("abc", 1), (b"abc", "a"), (["a"], "a")])
def test_non_str_input_is_rejected(text, pattern):
    with pytest.raises(InvalidInputError):
        fuzzy_match(text, pattern)
    with pytest.raises(TypeError):
        fuzzy_match_score(text, pattern)


def test_lone_surrogate_is_rejected():
    with pytest.raises(InvalidTextError) as exc:
        fuzzy_match("ab\ud800c", "ac")
    assert isinstance(exc.value, ValueError)
    assert isinstance(exc.value, FuzzMatchError)


def test_matcher_carries_flags():
    strict = Matcher(case_sensitive=True, normalize=False)
    loose = Matcher()
    assert not strict.match("Hello World", "hw").matched
    assert loose.match("Hello World", "hw").positions == [0, 6]
    assert strict.score("café", "cafe") == -1
    assert loose.score("café", "cafe") == 104
    assert loose.normalize_text("Été").chars == "ete"
    assert "case_sensitive=True" in repr(strict)


def test_calls_are_independent():
    m = Matcher()
    first = m.match("foo_bar_baz", "fbb")
    m.match("something else", "se")
    assert m.match("foo_bar_baz", "fbb") == first
