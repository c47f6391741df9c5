"""Command line entry point of the tape sorter."""

from __future__ import annotations

import re
import sys
from typing import Optional, Sequence

from .balanced_merge import balanced_merge
from .records import Statistics

_INPUTS = {
    1: "arquivos/aleatorio.bin",
    2: "arquivos/crescente.bin",
    3: "arquivos/decrescente.bin",
}


def _atoi(text: str) -> int:
    match = re.match(r"\s*[+-]?\d+", text)
    return int(match.group()) if match else 0


def input_path_for(situation: int) -> str:
    """Return the input file for a situation: 1 random, 2 ascending, 3 descending."""
    try:
        return _INPUTS[situation]
    except KeyError:
        raise ValueError(f"invalid situation: {situation}") from None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run `ordena <method> <quantity> <situation> [-P]`; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 3:
        print("Uso: ordena <método> <quantidade> <situação> [-P]")
        return 1

    method, quantity, situation = (_atoi(a) for a in args[:3])
    show_result = len(args) > 3 and args[3] == "-P"

    try:
        input_path = input_path_for(situation)
    except ValueError:
        print("Situação inválida!")
        return 1

    stats = Statistics()
    if method == 1:
        print("Metodo 1 - Intercalacao de 2 fitas")
        try:
            balanced_merge(input_path, quantity, show_result, stats, "fitas")
        except OSError as exc:
            print(f"Erro ao abrir arquivo de entrada: {exc}", file=sys.stderr)
            return 1
        stats.finish()
        print(stats.report())
    elif method in (2, 3):
        print(f"Método {method}!")
    else:
        print("Método inválido!")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())