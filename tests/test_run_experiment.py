import json

from leadseq.scripts.run_experiment import main

SEQ = "ACGTACGTACGTACGTACGT"


def test_main_runs_without_window(tmp_path, capsys):
    code = main([
        "--sequence", SEQ, "--activity", "0.5", "--seed", "1",
        "--no-gui", "--outdir", str(tmp_path),
    ])
    assert code == 0

    out = capsys.readouterr().out
    gen_lines = [line for line in out.splitlines() if line.startswith("Gen ")]
    assert len(gen_lines) == 10
    assert gen_lines[0].startswith("Gen 001 | avg_activity=")
    assert "Optimized DNA sequence: " in out

    (run_dir,) = list(tmp_path.iterdir())
    config = json.loads((run_dir / "config.json").read_text())
    assert config["population_size"] == 50
    assert config["n_generations"] == 10
    assert config["seed"] == 1
    assert config["initial_sequence"] == SEQ
    assert (run_dir / "history.csv").exists()
    assert (run_dir / "final_best.fa").read_text().startswith(">best|fitness=")


def test_main_same_seed_same_output(capsys):
    args = ["--sequence", SEQ, "--activity", "0.5", "--seed", "4", "--no-gui"]
    main(args)
    first = capsys.readouterr().out
    main(args)
    assert capsys.readouterr().out == first


def test_main_prompts_when_values_missing(monkeypatch, capsys):
    answers = iter(["ACGT", SEQ, "1.5", "0.3"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main(["--seed", "2", "--no-gui"]) == 0
    out = capsys.readouterr().out
    assert "ERROR: Invalid Sequence! Must be length 20 bases." in out
    assert "ERROR: Invalid Activity Value! Must be on the interval [0.0, 1.0)." in out


def test_main_rejects_bad_sequence_argument(capsys):
    assert main(["--sequence", "ACGT", "--activity", "0.5", "--no-gui"]) == 2
    assert "Invalid Sequence" in capsys.readouterr().err
