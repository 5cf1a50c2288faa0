class LeadSeqError(Exception):
    """Base class for every error raised by leadseq."""


class InvalidSequenceError(LeadSeqError, ValueError):
    """Sequence has the wrong length or contains a base outside ACGT."""


class InvalidActivityError(LeadSeqError, ValueError):
    """Activity value is not a number or lies outside [0.0, 1.0)."""


class InvalidParameterError(LeadSeqError, ValueError):
    """Generation parameter is non-positive or otherwise unusable."""


class PopulationInvariantError(LeadSeqError, RuntimeError):
    """Population lost members or a genome changed length between generations."""
