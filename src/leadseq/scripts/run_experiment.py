#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import pathlib
import sys
import time
from typing import List, Optional

from leadseq import __version__
from leadseq.config import EvolutionConfig
from leadseq.errors import LeadSeqError
from leadseq.generator_core import make_rng, run_ga
from leadseq.genome import Genome
from leadseq.inputs import parse_activity, parse_sequence, prompt_activity, prompt_sequence
from leadseq.report import (
    format_generation,
    save_config,
    save_fasta,
    save_history_csv,
    summary_lines,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="leadseq-run",
        description="Simulate optimization of a DNA lead sequence with a toy GA",
    )
    # Initial genome (prompted for when omitted)
    ap.add_argument("--sequence", type=str, default=None)
    ap.add_argument("--activity", type=str, default=None)

    ap.add_argument("--seed", type=int, default=None)

    # Output
    ap.add_argument("--outdir", type=str, default=None,
                    help="write config.json, history.csv and final_best.fa under a run directory")
    ap.add_argument("--no-gui", action="store_true", help="do not open the results window")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def read_initial_genome(args: argparse.Namespace, config: EvolutionConfig) -> Genome:
    if args.sequence is not None:
        seq = parse_sequence(args.sequence, config.sequence_length)
    else:
        seq = prompt_sequence(config.sequence_length)
    if args.activity is not None:
        activity = parse_activity(args.activity)
    else:
        activity = prompt_activity()
    return Genome(seq, activity)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = EvolutionConfig().validate()

    try:
        initial = read_initial_genome(args, config)
        history, best = run_ga(
            initial,
            population_size=config.population_size,
            sequence_length=config.sequence_length,
            n_generations=config.n_generations,
            elite_fraction=config.elite_fraction,
            rng=make_rng(args.seed),
            callback=lambda rec: print(format_generation(rec)),
        )
    except LeadSeqError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    for line in summary_lines(history, best):
        print(line)

    # =========================
    # Save run artefacts
    # =========================
    if args.outdir is not None:
        run_id = time.strftime("%Y%m%d-%H%M%S")
        outdir = pathlib.Path(args.outdir) / run_id
        save_config(outdir / "config.json", {
            **config.to_dict(),
            "seed": args.seed,
            "initial_sequence": initial.sequence,
            "initial_activity": initial.fitness,
        })
        save_history_csv(outdir / "history.csv", history)
        save_fasta(outdir / "final_best.fa", [best])
        print(f"[DONE] Results written to {outdir.resolve()}")

    if not args.no_gui:
        from leadseq.display import show_results
        try:
            show_results(history, best, __version__)
        except Exception as e:
            # headless hosts raise TclError; results are already printed
            logger.warning("could not open results window: %s", e)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
