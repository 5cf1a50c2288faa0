from __future__ import annotations

import re
from dataclasses import dataclass, replace

import numpy as np

from leadseq.errors import InvalidSequenceError

ALPHABET = np.array(list("ACGT"))

_VALID_SEQ = re.compile(r"^[ACGT]+$")


@dataclass
class Genome:
    """One individual: a nucleotide sequence and its activity (fitness)."""

    sequence: str
    fitness: float

    def __len__(self) -> int:
        return len(self.sequence)

    def copy(self) -> "Genome":
        return replace(self)


def validate_sequence(seq: str, length: int) -> str:
    """
    Check that ``seq`` is exactly ``length`` bases drawn from A, C, G, T.

    Length is checked before content, so a short sequence with bad symbols
    reports the length problem first.
    """
    if len(seq) != length:
        raise InvalidSequenceError(f"Invalid Sequence! Must be length {length} bases.")
    if not _VALID_SEQ.match(seq):
        raise InvalidSequenceError("Invalid Sequence! Use only bases A, C, G, and T.")
    return seq
