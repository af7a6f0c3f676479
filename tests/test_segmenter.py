from __future__ import annotations

import random

import pytest

from conftest import tok
from speakerline.diarization.models import Segment
from speakerline.transcript.segmenter import join_words, segment_tokens


def test_empty_input_yields_no_segments() -> None:
    assert segment_tokens([]) == []


def test_two_speaker_example() -> None:
    tokens = [
        tok("hi", "S1", 0.0, 0.5),
        tok("there", "S1", 0.5, 1.0),
        tok("bye", "S2", 1.0, 1.3),
    ]
    assert segment_tokens(tokens) == [
        Segment("S1", ("hi", "there"), 0.0, 1.0),
        Segment("S2", ("bye",), 1.0, 1.3),
    ]


def test_single_speaker_collapses_to_one_segment() -> None:
    tokens = [tok(f"w{i}", "Speaker_0", i * 0.4, i * 0.4 + 0.3) for i in range(10)]
    segments = segment_tokens(tokens)
    assert len(segments) == 1
    assert segments[0].start_time == 0.0
    assert segments[0].end_time == pytest.approx(9 * 0.4 + 0.3)
    assert segments[0].words == tuple(f"w{i}" for i in range(10))


def test_returning_speaker_opens_new_segment() -> None:
    tokens = [tok("a", "A", 0, 1), tok("b", "B", 1, 2), tok("c", "A", 2, 3)]
    assert [s.speaker for s in segment_tokens(tokens)] == ["A", "B", "A"]


def test_none_speaker_is_its_own_value() -> None:
    tokens = [
        tok("um", None, 0.0, 0.2),
        tok("uh", None, 0.2, 0.4),
        tok("hello", "Speaker_0", 0.4, 0.9),
        tok("hm", None, 0.9, 1.0),
    ]
    segments = segment_tokens(tokens)
    assert [(s.speaker, s.words) for s in segments] == [
        (None, ("um", "uh")),
        ("Speaker_0", ("hello",)),
        (None, ("hm",)),
    ]


def test_speaker_match_is_case_sensitive() -> None:
    tokens = [tok("a", "speaker_0", 0, 1), tok("b", "Speaker_0", 1, 2)]
    assert len(segment_tokens(tokens)) == 2


def test_end_time_is_overwritten_not_maxed() -> None:
    tokens = [tok("long", "A", 0.0, 5.0), tok("late", "A", 6.0, 7.0), tok("early", "A", 1.0, 1.5)]
    (segment,) = segment_tokens(tokens)
    assert segment.start_time == 0.0
    assert segment.end_time == 1.5


def test_out_of_order_input_is_not_sorted() -> None:
    tokens = [tok("second", "A", 3.0, 4.0), tok("first", "A", 0.0, 1.0)]
    (segment,) = segment_tokens(tokens)
    assert segment.words == ("second", "first")
    assert segment.end_time < segment.start_time


def test_accepts_any_iterable() -> None:
    tokens = (t for t in [tok("x", "A", 0, 1), tok("y", "B", 1, 2)])
    assert len(segment_tokens(tokens)) == 2


@pytest.mark.parametrize("seed", range(20))
def test_random_sequences_partition_and_alternate(seed: int) -> None:
    rng = random.Random(seed)
    speakers = ["Speaker_0", "Speaker_1", "Speaker_2", None]
    clock = 0.0
    tokens = []
    for i in range(rng.randint(1, 60)):
        dur = rng.uniform(0.05, 0.6)
        tokens.append(tok(f"w{i}", rng.choice(speakers), clock, clock + dur))
        clock += dur

    segments = segment_tokens(tokens)

    assert [w for s in segments for w in s.words] == [t.text for t in tokens]
    for prev, nxt in zip(segments, segments[1:]):
        assert prev.speaker != nxt.speaker
    for s in segments:
        assert s.start_time <= s.end_time


def test_join_words_uses_single_spaces() -> None:
    assert join_words(Segment("A", ("hi", "there", "you"), 0, 1)) == "hi there you"
    assert join_words(Segment("A", ("solo",), 0, 1)) == "solo"
