"""Build and inspect the binary input files from the exam results text."""

from __future__ import annotations

import re
import struct
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, TextIO, Union

from .records import ENCODING, Record, iter_records, write_record

MAX_STUDENTS = 471705
SITUATION_FILES = {1: "aleatorio.bin", 2: "crescente.bin", 3: "decrescente.bin"}

PathLike = Union[str, Path]

_SPACE = re.compile(r"\s*")
_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _atoi(text: str) -> int:
    match = re.match(r"\s*[+-]?\d+", text)
    return int(match.group()) if match else 0


def _single(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def compact_spaces(text: str) -> str:
    """Drop leading spaces and collapse every run of spaces into one."""
    out: List[str] = []
    for ch in text.lstrip(" "):
        if ch != " " or out[-1] != " ":
            out.append(ch)
    return "".join(out)


class _Scanner:
    """Reads the whitespace separated and fixed-width fields of the text."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def _skip(self) -> None:
        self.pos = _SPACE.match(self.text, self.pos).end()

    def word(self, width: int) -> Optional[str]:
        self._skip()
        match = re.compile(rf"\S{{1,{width}}}").match(self.text, self.pos)
        if not match:
            return None
        self.pos = match.end()
        return match.group()

    def number(self) -> Optional[float]:
        self._skip()
        match = _NUMBER.match(self.text, self.pos)
        if not match:
            return None
        self.pos = match.end()
        return _single(float(match.group()))

    def chars(self, width: int) -> Optional[str]:
        self._skip()
        end = self.pos + width
        if end > len(self.text):
            return None
        chunk = self.text[self.pos:end]
        self.pos = end
        return chunk

    def record(self) -> Optional[Record]:
        registration = self.word(8)
        if registration is None:
            return None
        grade = self.number()
        if grade is None:
            return None
        state = self.word(2)
        if state is None:
            return None
        city = self.chars(50)
        if city is None:
            return None
        course = self.chars(30)
        if course is None:
            return None
        return Record(
            registration, grade, state, compact_spaces(city), compact_spaces(course)
        )


def parse_provao(stream: TextIO) -> List[Record]:
    """Parse records until the text stops matching the expected layout."""
    scanner = _Scanner(stream.read())
    records: List[Record] = []
    while len(records) < MAX_STUDENTS:
        record = scanner.record()
        if record is None:
            break
        records.append(record)
    return records


def save_binary(path: PathLike, records: Iterable[Record]) -> Path:
    """Write the records to a binary file and return its path."""
    path = Path(path)
    with open(path, "wb") as f:
        for record in records:
            write_record(f, record)
    return path


def read_binary(situation: int, directory: PathLike = ".") -> List[Record]:
    """Read all records of the file for a situation (1, 2 or 3)."""
    try:
        name = SITUATION_FILES[situation]
    except KeyError:
        raise ValueError(f"invalid situation: {situation}") from None
    with open(Path(directory) / name, "rb") as f:
        return list(iter_records(f))


def generate_files(source: PathLike = "PROVAO.TXT", directory: PathLike = ".") -> List[Path]:
    """Write the random, ascending and descending binary files from the text."""
    with open(source, encoding=ENCODING, newline="") as f:
        records = parse_provao(f)
    directory = Path(directory)
    ordered = {
        "aleatorio.bin": records,
        "crescente.bin": sorted(records, key=lambda r: r.grade),
        "decrescente.bin": sorted(records, key=lambda r: r.grade, reverse=True),
    }
    return [save_binary(directory / name, data) for name, data in ordered.items()]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run `gerar` to build the files or `ler <situation>` to print one."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Uso: arquivos <opcao> [arquivo]")
        print("Opcoes:")
        print("  gerar - Gera os arquivos binários a partir do PROVAO.TXT")
        print("  ler <arquivo> - Lê e imprime o conteúdo de um arquivo binário")
        return 1

    command = args[0]
    if command == "gerar":
        try:
            paths = generate_files()
        except OSError:
            print("Erro ao abrir PROVAO.TXT")
            return 1
        for path in paths:
            print(f"Arquivo {path} gerado com sucesso!")
    elif command == "ler" and len(args) == 2:
        situation = _atoi(args[1])
        try:
            records = read_binary(situation)
        except ValueError:
            print("Situacao invalida!")
            return 1
        except OSError:
            print(f"Erro ao abrir {SITUATION_FILES[situation]}")
            return 1
        for r in records:
            print(f"{r.registration} {r.grade:.1f} {r.state} {r.city} {r.course}")
    else:
        print("Opção inválida!")
    return 0


if __name__ == "__main__":
    sys.exit(main())