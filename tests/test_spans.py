from quotevote.core.aggregation import PositionTally, aggregate
from quotevote.core.spans import Span, build_spans
from quotevote.core.votes import Vote, VoteDirection

UP, DOWN = VoteDirection.UP, VoteDirection.DOWN


def test_aggregate_counts_each_direction():
    tallies = aggregate([Vote(0, 2, UP), Vote(1, 3, DOWN), Vote(1, 1, UP)], 10)
    assert tallies == {
        0: PositionTally(1, 0),
        1: PositionTally(2, 1),
        2: PositionTally(1, 1),
        3: PositionTally(0, 1),
    }
    assert tallies[1].total == 3


def test_aggregate_skips_out_of_range():
    votes = [Vote(4, 2, UP), Vote(-2, 1, UP), Vote(0, 5, UP), Vote(0, 4, DOWN)]
    assert aggregate(votes, 5) == {p: PositionTally(0, 1) for p in range(5)}


def test_unknown_direction_covers_without_counting():
    tallies = aggregate([Vote(0, 1, "sideways")], 3)
    assert tallies == {0: PositionTally(), 1: PositionTally()}


def test_no_tallies_is_one_plain_span():
    assert build_spans({}, 7) == [Span(0, 7, None)]


def test_zero_length_text():
    assert build_spans({}, 0) == []


def test_equal_tallies_merge_by_value():
    tallies = {0: PositionTally(1, 0), 1: PositionTally(1, 0), 2: PositionTally(2, 0)}
    spans = build_spans(tallies, 4)
    assert spans == [
        Span(0, 2, PositionTally(1, 0)),
        Span(2, 3, PositionTally(2, 0)),
        Span(3, 4, None),
    ]


def test_gaps_and_trailing_text_are_kept():
    tallies = aggregate([Vote(2, 3, UP), Vote(6, 6, DOWN)], 9)
    spans = build_spans(tallies, 9)
    assert [(s.start, s.end, s.covered) for s in spans] == [
        (0, 2, False), (2, 4, True), (4, 6, False), (6, 7, True), (7, 9, False),
    ]
