from __future__ import annotations

import json
import pathlib
from typing import Iterable, List, Sequence

import pandas as pd

from leadseq.generator_core import GenerationRecord
from leadseq.genome import Genome

COLUMNS = ["generation", "average_activity"]


def history_frame(history: Iterable[GenerationRecord]) -> pd.DataFrame:
    """Per-generation average activity as a two-column table."""
    rows = [(int(r.generation), float(r.average_fitness)) for r in history]
    return pd.DataFrame(rows, columns=COLUMNS)


def save_history_csv(path: pathlib.Path, history: Sequence[GenerationRecord]) -> pathlib.Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    history_frame(history).to_csv(path, index=False)
    return path


def save_fasta(path: pathlib.Path, genomes: Sequence[Genome], name: str = "best") -> pathlib.Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w") as f:
        for i, g in enumerate(genomes):
            label = name if len(genomes) == 1 else f"{name}_{i}"
            f.write(f">{label}|fitness={g.fitness:.6f}\n{g.sequence}\n")
    return path


def save_config(path: pathlib.Path, config: dict) -> pathlib.Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config, indent=2))
    return path


def format_generation(record: GenerationRecord) -> str:
    return f"Gen {record.generation:03d} | avg_activity={record.average_fitness:.4f}"


def summary_lines(history: Sequence[GenerationRecord], best: Genome) -> List[str]:
    df = history_frame(history)
    lines: List[str] = []
    if not df.empty:
        lines.append(
            f"Average activity: first={df['average_activity'].iloc[0]:.4f}, "
            f"last={df['average_activity'].iloc[-1]:.4f}, "
            f"max={df['average_activity'].max():.4f}"
        )
    lines.append(f"Optimized DNA sequence: {best.sequence} (Activity: {best.fitness})")
    return lines
