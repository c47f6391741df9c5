"""Balanced multiway merge sort over a set of binary tape files."""

from __future__ import annotations

import heapq
import shutil
from collections import deque
from itertools import islice
from pathlib import Path
from typing import Optional, Union

from .records import Record, Statistics, iter_records, write_record

NUM_TAPES = 20
INTERNAL_MEMORY = 10

_RULE = "-" * 60
_HEADER = "Inscricao | Nota  | Estado | Cidade                      | Curso"

PathLike = Union[str, Path]


def _grade(record: Record) -> float:
    return record.grade


class TapeSet:
    """A group of tape files, half used as inputs and half as outputs."""

    def __init__(self, directory: PathLike = "fitas", count: int = NUM_TAPES):
        if count < 2 or count % 2:
            raise ValueError("the number of tapes must be an even number >= 2")
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)
        self.paths = [self.directory / f"fita{i}.bin" for i in range(count)]
        self.files = []
        try:
            for path in self.paths:
                self.files.append(open(path, "w+b"))
        except OSError:
            self.close()
            raise
        # Length of every run stored on each tape, in order.
        self.runs = [deque() for _ in self.paths]

    def close(self) -> None:
        """Close every tape file."""
        for tape in self.files:
            tape.close()

    def __enter__(self) -> "TapeSet":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def _clear(tapes: TapeSet, index: int) -> None:
    tape = tapes.files[index]
    tape.seek(0)
    tape.truncate()
    tapes.runs[index].clear()


def generate_sorted_runs(
    input_path: PathLike, quantity: int, tapes: TapeSet, stats: Statistics
) -> None:
    """Read up to `quantity` records and spread sorted runs over the input tapes."""
    half = len(tapes.files) // 2
    current = 0
    with open(input_path, "rb") as source:
        records = islice(iter_records(source), max(quantity, 0))
        while block := list(islice(records, INTERNAL_MEMORY)):
            stats.reads += len(block)
            block.sort(key=_grade)
            tape = tapes.files[current]
            for record in block:
                write_record(tape, record)
            stats.writes += len(block)
            tapes.runs[current].append(len(block))
            current = (current + 1) % half


def merge_runs(tapes: TapeSet, stats: Statistics) -> Path:
    """Merge runs back and forth until one sorted run is left on the first tape."""
    half = len(tapes.files) // 2
    inputs = range(0, half)
    outputs = range(half, 2 * half)

    while sum(len(tapes.runs[i]) for i in inputs) > 1:
        for i in inputs:
            tapes.files[i].seek(0)
        for o in outputs:
            _clear(tapes, o)

        target = 0
        while any(tapes.runs[i] for i in inputs):
            streams = [
                islice(iter_records(tapes.files[i]), tapes.runs[i].popleft())
                for i in inputs
                if tapes.runs[i]
            ]
            out_index = outputs[target]
            out = tapes.files[out_index]
            length = 0
            for record in heapq.merge(*streams, key=_grade):
                write_record(out, record)
                length += 1
            stats.reads += length
            stats.writes += length
            stats.comparisons += length
            tapes.runs[out_index].append(length)
            target = (target + 1) % half

        for i in inputs:
            _clear(tapes, i)
        inputs, outputs = outputs, inputs

    holder: Optional[int] = next((i for i in inputs if tapes.runs[i]), None)
    if holder is not None and holder != 0:
        source = tapes.files[holder]
        source.seek(0)
        _clear(tapes, 0)
        shutil.copyfileobj(source, tapes.files[0])
        tapes.runs[0].extend(tapes.runs[holder])
        _clear(tapes, holder)
    for tape in tapes.files:
        tape.flush()
    return tapes.paths[0]


def format_result(path: PathLike) -> str:
    """Render the records stored in a tape file as a table."""
    lines = ["", "Resultado da Ordenacao:", _RULE, _HEADER, _RULE]
    with open(path, "rb") as tape:
        for r in iter_records(tape):
            lines.append(
                f"{r.registration:<9} | {r.grade:5.2f} | {r.state:<6} | "
                f"{r.city:<26} | {r.course:<30}"
            )
    lines.append(_RULE)
    return "\n".join(lines)


def balanced_merge(
    input_path: PathLike,
    quantity: int,
    show_result: bool = False,
    stats: Optional[Statistics] = None,
    tape_dir: PathLike = "fitas",
) -> Path:
    """Sort the first `quantity` records of a file; return the tape holding them."""
    if stats is None:
        stats = Statistics()
    with TapeSet(tape_dir) as tapes:
        print("FITAS INICIADAS")
        generate_sorted_runs(input_path, quantity, tapes, stats)
        print("GERACAO DE BLOCOS CONCLUIDA")
        result = merge_runs(tapes, stats)
        print("INTERCALACAO DE BLOCOS CONCLUIDA")
    if show_result:
        print(format_result(result))
    return result