from leadseq.errors import (
    LeadSeqError,
    InvalidSequenceError,
    InvalidActivityError,
    InvalidParameterError,
    PopulationInvariantError,
)
from leadseq.genome import ALPHABET, Genome
from leadseq.config import EvolutionConfig
from leadseq.generator_core import GenerationRecord, make_rng, run_ga

__version__ = "2.4.1"

__all__ = [
    "ALPHABET",
    "EvolutionConfig",
    "GenerationRecord",
    "Genome",
    "InvalidActivityError",
    "InvalidParameterError",
    "InvalidSequenceError",
    "LeadSeqError",
    "PopulationInvariantError",
    "make_rng",
    "run_ga",
]
