import pytest
from wordler.engine import (
    EmptyInput, Excluded, FixedLetter, InvalidToken, LetterCount, PatternLengthMismatch,
    PositionConflict, clue_from_tokens, extract_clue, merge, merge_all, parse_token,
)
from wordler.engine.clue import combine_letters


def _clue(token):
    return extract_clue(parse_token(token))


def _ex(letters):
    return Excluded(frozenset(letters))


# Feedback earned by CRANE, SLOTH and HALVE against the answer SHALE.
A, B, C = "C0R0A2N0E2", "S2L1O0T0H1", "H1A1L1V0E2"


def test_extract_apple_with_duplicate_p():
    clue = _clue("A0P1P2L0E0")
    assert clue.pattern == (
        _ex("AEL"), _ex("AELP"), FixedLetter("P"), _ex("AEL"), _ex("AEL"),
    )
    assert clue.letters == {"P": LetterCount("P", 2, False)}


@pytest.mark.parametrize("token", ["C2R0A1N0E2", "S0L1A0T2E0", "M1O1U0S0E0", "Q0U0I0Z0"])
def test_no_exact_without_repeated_letters(token):
    clue = _clue(token)
    assert not any(lc.exact for lc in clue.letters.values())


def test_grey_duplicate_caps_count():
    # S green, second S grey: exactly one S
    clue = _clue("S2S0A1L0T0")
    assert clue.letters["S"] == LetterCount("S", 1, True)
    assert clue.letters["A"] == LetterCount("A", 1, False)
    assert clue.pattern[0] == FixedLetter("S")
    # S is not globally excluded: only its own grey slot forbids it
    assert clue.pattern[1] == _ex("SLT")
    assert clue.pattern[2] == _ex("ALT")


def test_grey_duplicate_counts_every_coloured_copy():
    # LEVEL: L grey + L yellow, E green + E grey, V grey
    clue = _clue("L0E2V0E0L1")
    assert clue.letters == {
        "E": LetterCount("E", 1, True),
        "L": LetterCount("L", 1, True),
    }
    assert "V" in clue.pattern[0].letters and "L" in clue.pattern[0].letters
    assert "E" not in clue.pattern[0].letters

    clue = _clue("E1E1E0X0")
    assert clue.letters["E"] == LetterCount("E", 2, True)


def test_grey_resolution_ignores_order_within_guess():
    # the grey copy comes before the coloured one
    assert _clue("S0A1S2").letters["S"] == LetterCount("S", 1, True)


def test_pattern_length_follows_guess():
    assert len(_clue("A0B1")) == 2
    assert len(_clue("S0T0R0I0N0G0")) == 6


def test_merge_combines_positions_and_letters():
    clue = merge_all([_clue(A), _clue(B), _clue(C)])
    assert clue.pattern[0] == FixedLetter("S")
    assert clue.pattern[1] == _ex("CRNLOTAV")
    assert clue.pattern[2] == FixedLetter("A")
    assert clue.pattern[3] == _ex("CRNOTV")
    assert clue.pattern[4] == FixedLetter("E")
    assert set(clue.letters) == {"A", "E", "S", "L", "H"}
    assert all(lc.count == 1 and not lc.exact for lc in clue.letters.values())


def test_merge_is_commutative():
    a, b = _clue(A), _clue(B)
    assert merge(a, b) == merge(b, a)


def test_merge_is_associative():
    a, b, c = _clue(A), _clue(B), _clue(C)
    assert merge(a, merge(b, c)) == merge(merge(a, b), c)


@pytest.mark.parametrize("token", [A, B, C, "A0P1P2L0E0", "L0E2V0E0L1"])
def test_merge_with_itself_is_identity(token):
    a = _clue(token)
    assert merge(a, a) == a


def test_combine_letters_takes_max_and_or():
    a = {"E": LetterCount("E", 2, False), "S": LetterCount("S", 1, False)}
    b = {"E": LetterCount("E", 1, True), "T": LetterCount("T", 1, False)}
    out = combine_letters(a, b)
    assert out == {
        "E": LetterCount("E", 2, True),
        "S": LetterCount("S", 1, False),
        "T": LetterCount("T", 1, False),
    }
    assert combine_letters(b, a) == out


def test_merge_exact_survives_across_guesses():
    clue = clue_from_tokens(["S2S0A1L0T0", "S2H0A2R0K0"])
    assert clue.letters["S"] == LetterCount("S", 1, True)


def test_merge_length_mismatch():
    with pytest.raises(PatternLengthMismatch) as exc:
        merge(_clue(A), _clue("S0T0R0I0N0G0"))
    assert (exc.value.left, exc.value.right) == (5, 6)


def test_merge_position_conflict():
    with pytest.raises(PositionConflict) as exc:
        merge(_clue("C2R0A0N0E0"), _clue("S2L0A0T0E0"))
    assert exc.value.position == 0
    assert (exc.value.left, exc.value.right) == ("C", "S")


def test_fixed_letter_wins_over_exclusion():
    clue = merge(_clue("C0R0A0N0E0"), _clue("C2H0O0K0E0"))
    assert clue.pattern[0] == FixedLetter("C")


def test_merge_all_requires_input():
    with pytest.raises(EmptyInput):
        merge_all([])
    with pytest.raises(EmptyInput):
        clue_from_tokens([])


def test_clue_from_tokens_reports_bad_token():
    with pytest.raises(InvalidToken) as exc:
        clue_from_tokens([A, "S2X"])
    assert exc.value.token == "S2X"


def test_clue_is_hashable_value():
    a = clue_from_tokens([A, B])
    b = clue_from_tokens([B, A])
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b, _clue(C)}) == 2


def test_clue_letters_are_read_only():
    clue = _clue("A0P1P2L0E0")
    with pytest.raises(TypeError):
        clue.letters["Q"] = LetterCount("Q", 1)
    assert "Q" not in clue.letters
