"""Exam record layout, binary tape I/O and run statistics."""

from __future__ import annotations

import struct
import time
from dataclasses import dataclass, field
from typing import BinaryIO, Iterator, Optional

# registration[9], padding, float32 grade, state[3], city[51], course[31], padding
_LAYOUT = struct.Struct("<9s3xf3s51s31s3x")
RECORD_SIZE = _LAYOUT.size
ENCODING = "latin-1"


def _encode(text: str, size: int) -> bytes:
    # Fixed-size fields keep room for the terminating NUL byte.
    return text.encode(ENCODING, errors="replace")[: size - 1]


def _decode(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode(ENCODING)


@dataclass
class Record:
    """One student's exam result."""

    registration: str
    grade: float
    state: str = ""
    city: str = ""
    course: str = ""

    def to_bytes(self) -> bytes:
        """Encode the record in its fixed-size binary layout."""
        return _LAYOUT.pack(
            _encode(self.registration, 9),
            self.grade,
            _encode(self.state, 3),
            _encode(self.city, 51),
            _encode(self.course, 31),
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> "Record":
        """Decode a record from exactly RECORD_SIZE bytes."""
        if len(data) != RECORD_SIZE:
            raise ValueError(
                f"a record takes {RECORD_SIZE} bytes, got {len(data)}"
            )
        registration, grade, state, city, course = _LAYOUT.unpack(data)
        return cls(
            _decode(registration),
            grade,
            _decode(state),
            _decode(city),
            _decode(course),
        )


def read_record(stream: BinaryIO) -> Optional[Record]:
    """Read the next record, or return None when no whole record is left."""
    data = stream.read(RECORD_SIZE)
    if len(data) < RECORD_SIZE:
        return None
    return Record.from_bytes(data)


def iter_records(stream: BinaryIO) -> Iterator[Record]:
    """Yield records from the stream's current position to its end."""
    while (record := read_record(stream)) is not None:
        yield record


def write_record(stream: BinaryIO, record: Record) -> None:
    """Append one record to the stream."""
    stream.write(record.to_bytes())


@dataclass
class Statistics:
    """Counters and processor time of one sorting run."""

    reads: int = 0
    writes: int = 0
    comparisons: int = 0
    started: float = field(default_factory=time.process_time)
    elapsed: float = 0.0

    def finish(self) -> float:
        """Record and return the processor time spent since creation."""
        self.elapsed = time.process_time() - self.started
        return self.elapsed

    def report(self) -> str:
        """Return the counters as printable lines."""
        return "\n".join(
            [
                f"Leituras: {self.reads}",
                f"Escritas: {self.writes}",
                f"Comparacoes: {self.comparisons}",
                f"Tempo de Execucao: {self.elapsed:.2f}",
            ]
        )