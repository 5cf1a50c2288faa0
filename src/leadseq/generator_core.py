from __future__ import annotations

import logging
from typing import Callable, List, NamedTuple, Optional, Tuple

import numpy as np

from leadseq.config import EvolutionConfig
from leadseq.errors import PopulationInvariantError
from leadseq.genome import ALPHABET, Genome, validate_sequence

logger = logging.getLogger(__name__)

# substitution symbols are drawn in ACTG order
MUTATION_BASES = np.array(list("ACTG"))
MUTATION_RATE = 0.01
ACTIVITY_DRIFT = 0.1
CROSSOVER_MIN_PCT = 0.2
CROSSOVER_MAX_PCT = 0.8


class GenerationRecord(NamedTuple):
    generation: int
    average_fitness: float


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Build the random source for a run; ``None`` seeds from OS entropy."""
    return np.random.default_rng(seed)


def random_genome(length: int, rng: np.random.Generator) -> Genome:
    bases = rng.choice(ALPHABET, size=length)
    return Genome("".join(bases), float(rng.random()))


def init_population(initial: Genome, n: int, rng: np.random.Generator) -> List[Genome]:
    """``n - 1`` random genomes of the initial genome's length, then the initial genome."""
    pop = [random_genome(len(initial), rng) for _ in range(n - 1)]
    pop.append(initial.copy())
    return pop


def select_elite(pop: List[Genome], elite_size: int) -> List[Genome]:
    """
    Keep the ``elite_size`` fittest genomes and refill to the original size.

    The population is sorted by descending fitness (ties keep their order).
    Free slots are filled by cycling copies of the elites in rank order, so
    the returned list has ``len(pop)`` independent records.
    """
    ranked = sorted(pop, key=lambda g: g.fitness, reverse=True)
    elites = ranked[: max(1, min(elite_size, len(ranked)))]
    return [elites[i % len(elites)].copy() for i in range(len(pop))]


def crossover(a: Genome, b: Genome, point: int, rng: np.random.Generator) -> Tuple[Genome, Genome]:
    """Single-point crossover at ``point``; offspring get fresh random activities."""
    c1 = Genome(a.sequence[:point] + b.sequence[point:], float(rng.random()))
    c2 = Genome(b.sequence[:point] + a.sequence[point:], float(rng.random()))
    return c1, c2


def crossover_population(pop: List[Genome], rng: np.random.Generator) -> None:
    """
    Replace the population pairwise with offspring of random distinct parents.

    For each pair of positions two parent indices are drawn without
    replacement from the whole population (parents are read from the list as
    it stands, including offspring already written this pass). With an odd
    population the last position receives only the first offspring.
    """
    n = len(pop)
    for i in range(0, n, 2):
        p1, p2 = (int(x) for x in rng.choice(n, size=2, replace=False))
        length = len(pop[p1])
        pct = rng.uniform(CROSSOVER_MIN_PCT, CROSSOVER_MAX_PCT)
        point = int(pct * length)
        c1, c2 = crossover(pop[p1], pop[p2], point, rng)
        pop[i] = c1
        if i + 1 < n:
            pop[i + 1] = c2


def mutate(genome: Genome, rng: np.random.Generator, p: float = MUTATION_RATE) -> Genome:
    """
    Mutate ``genome`` in place and return it.

    Every base is swapped for a random symbol with probability ``p`` (the new
    symbol may equal the old one). Independently, the activity receives one
    uniform drift in [-0.1, 0.1] per base position.
    """
    length = len(genome)
    rates = rng.random(length)
    subs = rng.integers(0, len(MUTATION_BASES), size=length)
    drift = rng.uniform(-ACTIVITY_DRIFT, ACTIVITY_DRIFT, size=length)

    hits = rates < p
    if hits.any():
        s = np.array(list(genome.sequence))
        s[hits] = MUTATION_BASES[subs[hits]]
        genome.sequence = "".join(s)
    genome.fitness += float(drift.sum())
    return genome


def mutate_population(pop: List[Genome], rng: np.random.Generator, p: float = MUTATION_RATE) -> None:
    for g in pop:
        mutate(g, rng, p)


def average_fitness(pop: List[Genome]) -> float:
    return float(np.mean([g.fitness for g in pop]))


def best_genome(pop: List[Genome]) -> Genome:
    """First genome of maximum fitness, as an independent copy."""
    fit = np.array([g.fitness for g in pop])
    return pop[int(np.argmax(fit))].copy()


def check_population(pop: List[Genome], size: int, length: int) -> None:
    if len(pop) != size:
        raise PopulationInvariantError(
            f"population has {len(pop)} genomes, expected {size}"
        )
    bad = [i for i, g in enumerate(pop) if len(g) != length]
    if bad:
        raise PopulationInvariantError(
            f"genomes {bad} do not have length {length}"
        )


def evolve_one_gen(
    pop: List[Genome],
    elite_size: int,
    rng: np.random.Generator,
    mut_p: float = MUTATION_RATE,
) -> List[Genome]:
    """Selection, then crossover, then mutation. Returns the next population."""
    new_pop = select_elite(pop, elite_size)
    crossover_population(new_pop, rng)
    mutate_population(new_pop, rng, mut_p)
    return new_pop


def run_ga(
    initial: Genome,
    population_size: int = 50,
    sequence_length: int = 20,
    n_generations: int = 10,
    elite_fraction: float = 0.5,
    rng: Optional[np.random.Generator] = None,
    callback: Optional[Callable[[GenerationRecord], None]] = None,
) -> Tuple[List[GenerationRecord], Genome]:
    """
    Evolve a population seeded with ``initial`` for ``n_generations``.

    Parameters
    ----------
    initial
        Validated starting genome; its sequence must have ``sequence_length`` bases.
    population_size, sequence_length, n_generations, elite_fraction
        Generation parameters, validated up front.
    rng
        Random source. A fresh unseeded generator is used when omitted.
    callback
        Called with each ``GenerationRecord`` as soon as it is computed.

    Returns
    -------
    (history, best)
        One ``GenerationRecord`` per generation (indices start at 1) and the
        fittest genome of the final population.
    """
    config = EvolutionConfig(
        n_generations=n_generations,
        population_size=population_size,
        sequence_length=sequence_length,
        elite_fraction=elite_fraction,
    ).validate()
    validate_sequence(initial.sequence, config.sequence_length)
    rng = rng if rng is not None else make_rng()

    pop = init_population(initial, config.population_size, rng)
    check_population(pop, config.population_size, config.sequence_length)

    history: List[GenerationRecord] = []
    for gen in range(1, config.n_generations + 1):
        pop = evolve_one_gen(pop, config.elite_size, rng)
        check_population(pop, config.population_size, config.sequence_length)

        record = GenerationRecord(gen, average_fitness(pop))
        history.append(record)
        logger.debug(
            "generation %d: average activity %.6f, best %.6f",
            gen, record.average_fitness, max(g.fitness for g in pop),
        )
        if callback is not None:
            callback(record)

    best = best_genome(pop)
    logger.info(
        "finished %d generations; best %s (activity %.6f)",
        config.n_generations, best.sequence, best.fitness,
    )
    return history, best
