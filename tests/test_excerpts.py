import pytest

from quotevote.core.excerpts import activity_excerpt

TEXT = "First line\nsecond line of the post"


@pytest.mark.parametrize("kind", ["POSTED", "liked", "SOMETHING_ELSE"])
def test_full_text_activities(kind):
    assert activity_excerpt(kind, TEXT) == TEXT


def test_vote_excerpt_drops_line_breaks():
    vote = {"startWordIndex": 6, "endWordIndex": 17, "type": "up"}
    assert activity_excerpt("upvoted", TEXT, vote=vote) == "linesecond"


def test_each_activity_uses_its_own_record():
    quote = {"startWordIndex": 0, "endWordIndex": 5}
    comment = {"startWordIndex": 11, "endWordIndex": 17}
    assert activity_excerpt("QUOTED", TEXT, quote=quote, comment=comment) == "First"
    assert activity_excerpt("COMMENTED", TEXT, quote=quote, comment=comment) == "second"


def test_missing_bounds_fall_back_to_text():
    assert activity_excerpt("DOWNVOTED", TEXT) == TEXT
    assert activity_excerpt("QUOTED", TEXT, quote={"startWordIndex": 1}) == TEXT


def test_empty_text():
    assert activity_excerpt("POSTED", "") == ""


def test_author_punctuation_is_kept():
    text = "He said “no” — ＡBC ﬁne"
    assert activity_excerpt("POSTED", text) == text
    quote = {"startWordIndex": 8, "endWordIndex": 12}
    assert activity_excerpt("QUOTED", text, quote=quote) == "“no”"


def test_mojibake_is_repaired():
    assert activity_excerpt("POSTED", "âœ” No problems") == "✔ No problems"
