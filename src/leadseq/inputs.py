"""Console input layer: parse and re-prompt until the user gives usable values."""
from __future__ import annotations

from typing import Callable, Optional

from leadseq.errors import InvalidActivityError, InvalidSequenceError
from leadseq.genome import validate_sequence


def parse_sequence(text: str, length: int) -> str:
    return validate_sequence(text.strip(), length)


def parse_activity(text: str) -> float:
    """Parse an activity value on the interval [0.0, 1.0)."""
    try:
        value = float(text.strip())
    except ValueError as e:
        raise InvalidActivityError(
            "Invalid Activity Value Data Type! Input must be a decimal number."
        ) from e
    # NaN fails both comparisons
    if not 0.0 <= value < 1.0:
        raise InvalidActivityError(
            "Invalid Activity Value! Must be on the interval [0.0, 1.0)."
        )
    return value


def prompt_sequence(
    length: int,
    input_fn: Optional[Callable[[str], str]] = None,
    print_fn: Optional[Callable[[str], None]] = None,
) -> str:
    input_fn = input_fn or input
    print_fn = print_fn or print
    prompt = f"Enter the initial DNA Sequence, with bases ACGT and length {length}: "
    while True:
        try:
            return parse_sequence(input_fn(prompt), length)
        except InvalidSequenceError as e:
            print_fn(f"ERROR: {e}")


def prompt_activity(
    input_fn: Optional[Callable[[str], str]] = None,
    print_fn: Optional[Callable[[str], None]] = None,
) -> float:
    input_fn = input_fn or input
    print_fn = print_fn or print
    prompt = "Enter the activity value for the initial sequence, a decimal on interval [0.0, 1.0): "
    while True:
        try:
            return parse_activity(input_fn(prompt))
        except InvalidActivityError as e:
            print_fn(f"ERROR: {e}")
