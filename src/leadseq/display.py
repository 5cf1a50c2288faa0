"""
Results window for a finished run.

Shows a read-only table of generation / average activity with the optimized
sequence underneath. Row formatting lives in ``table_rows`` so it can be used
without a display.
"""
from __future__ import annotations

from typing import List, Sequence, Tuple

from leadseq.generator_core import GenerationRecord
from leadseq.genome import Genome

HEADING = "Optimization of Lead Sequences"
HEADERS = ("Generation", "Average Activity")
WINDOW_SIZE = (400, 275)


def table_rows(history: Sequence[GenerationRecord]) -> List[Tuple[str, str]]:
    return [(str(r.generation), repr(float(r.average_fitness))) for r in history]


def window_title(version: str) -> str:
    return f"IGEMGUI {version}"


def show_results(history: Sequence[GenerationRecord], best: Genome, version: str) -> None:
    """Open the results window and block until it is closed."""
    try:
        import tkinter as tk
        from tkinter import ttk
    except Exception as e:
        raise ImportError(
            "tkinter is required for the results window; "
            "install your platform's Tk package or run with --no-gui"
        ) from e

    root = tk.Tk()
    root.title(window_title(version))
    w, h = WINDOW_SIZE
    root.geometry(f"{w}x{h}")
    root.resizable(False, False)

    heading = ttk.Label(root, text=HEADING, font=("Arial", 24))
    heading.pack(side=tk.TOP, anchor=tk.W)

    frame = ttk.Frame(root)
    frame.pack(side=tk.TOP, fill=tk.BOTH, expand=True)
    table = ttk.Treeview(frame, columns=HEADERS, show="headings", selectmode="none")
    for col in HEADERS:
        table.heading(col, text=col, anchor=tk.CENTER)
        table.column(col, anchor=tk.CENTER, width=w // 2)
    for row in table_rows(history):
        table.insert("", tk.END, values=row)
    scroll = ttk.Scrollbar(frame, orient=tk.VERTICAL, command=table.yview)
    table.configure(yscrollcommand=scroll.set)
    scroll.pack(side=tk.RIGHT, fill=tk.Y)
    table.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)

    footer = ttk.Label(root, text=f"Optimized Sequence: {best.sequence}")
    footer.pack(side=tk.BOTTOM, anchor=tk.W)

    root.mainloop()
