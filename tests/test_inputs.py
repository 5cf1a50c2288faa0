import math

import pytest

from leadseq.errors import InvalidActivityError, InvalidSequenceError
from leadseq.inputs import parse_activity, parse_sequence, prompt_activity, prompt_sequence


def _answers(*values):
    it = iter(values)
    return lambda prompt: next(it)


def test_parse_sequence_accepts_valid_input():
    assert parse_sequence("ACGTACGTACGTACGTACGT\n", 20) == "ACGTACGTACGTACGTACGT"


@pytest.mark.parametrize(
    "text, message",
    [
        ("ACGT", "Must be length 20 bases"),
        ("ACGTACGTACGTACGTACGTA", "Must be length 20 bases"),
        ("ACGTACGTACGTACGTACGN", "Use only bases A, C, G, and T"),
        ("acgtacgtacgtacgtacgt", "Use only bases A, C, G, and T"),
    ],
)
def test_parse_sequence_rejects(text, message):
    with pytest.raises(InvalidSequenceError, match=message):
        parse_sequence(text, 20)


@pytest.mark.parametrize("text, value", [("0", 0.0), ("0.5", 0.5), (" 0.999 ", 0.999)])
def test_parse_activity_accepts(text, value):
    assert parse_activity(text) == value


@pytest.mark.parametrize("text", ["1.0", "-0.1", "1e3", "nan", "inf"])
def test_parse_activity_rejects_out_of_range(text):
    with pytest.raises(InvalidActivityError, match=r"interval \[0.0, 1.0\)"):
        parse_activity(text)


def test_parse_activity_rejects_non_numeric():
    with pytest.raises(InvalidActivityError, match="Data Type"):
        parse_activity("high")


def test_prompt_sequence_reprompts_until_valid():
    printed = []
    seq = prompt_sequence(4, input_fn=_answers("AC", "ACGX", "GATC"), print_fn=printed.append)
    assert seq == "GATC"
    assert printed == [
        "ERROR: Invalid Sequence! Must be length 4 bases.",
        "ERROR: Invalid Sequence! Use only bases A, C, G, and T.",
    ]


def test_prompt_activity_reprompts_until_valid():
    printed = []
    value = prompt_activity(input_fn=_answers("abc", "2", "0.25"), print_fn=printed.append)
    assert math.isclose(value, 0.25)
    assert len(printed) == 2
    assert all(p.startswith("ERROR: ") for p in printed)
