from __future__ import annotations

from dataclasses import asdict, dataclass

from leadseq.errors import InvalidParameterError


@dataclass(frozen=True)
class EvolutionConfig:
    """Generation parameters for one run. Defaults are the fixed lab constants."""

    n_generations: int = 10
    population_size: int = 50
    # 20 bases seems to be the most effective length
    sequence_length: int = 20
    elite_fraction: float = 0.5

    @property
    def elite_size(self) -> int:
        return max(1, int(self.population_size * self.elite_fraction))

    def validate(self) -> "EvolutionConfig":
        if self.n_generations < 1:
            raise InvalidParameterError(
                f"n_generations must be >= 1, got {self.n_generations}"
            )
        if self.population_size < 2:
            raise InvalidParameterError(
                f"population_size must be >= 2, got {self.population_size}"
            )
        if self.sequence_length < 1:
            raise InvalidParameterError(
                f"sequence_length must be >= 1, got {self.sequence_length}"
            )
        if not 0.0 < self.elite_fraction <= 1.0:
            raise InvalidParameterError(
                f"elite_fraction must be in (0, 1], got {self.elite_fraction}"
            )
        return self

    def to_dict(self) -> dict:
        return asdict(self)
