"""Loading of comma-separated connection logs and simple column queries."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import groupby
from os import PathLike
from typing import Any, Iterable, Iterator, Optional, Sequence, Union

from netlogkit.records import LogDate

FIELD_COUNT = 8
PORT_LIMIT = 1000
PREFIX_LENGTH = 10
MISSING = "-"

DEFAULT_NAMES = (
    "jeffrey.reto.com",
    "betty.reto.com",
    "katherine.reto.com",
    "scott.reto.com",
    "benjamin.reto.com",
    "samuel.reto.com",
    "raymond.reto.com",
    "server.reto.com",
)

_PORTS_HEADER = "Los puertos encontrados debajo del mil son: "


def unique_sorted(values: Iterable[Any]) -> list[Any]:
    """Collapse runs of equal neighbours, keeping the first of each run.

    Applied to sorted input this yields the distinct values in order.
    """
    return [key for key, _ in groupby(values)]


def format_ports(ports: Iterable[int]) -> str:
    """Render ports in ascending order as a comma list ending with a period."""
    ordered = sorted(ports)
    text = _PORTS_HEADER + "\n"
    if ordered:
        text += ", ".join(str(port) for port in ordered) + ".\n"
    return text


@dataclass(frozen=True)
class LogRecord:
    """One connection line of the log."""

    date: LogDate
    time: str
    source_ip: str
    source_port: str
    source_name: str
    destination_ip: str
    destination_port: str
    destination_name: str

    @classmethod
    def from_line(cls, line: str) -> "LogRecord":
        """Build a record from a comma-separated line of up to eight fields."""
        fields = line.split(",")[:FIELD_COUNT]
        fields.extend([""] * (FIELD_COUNT - len(fields)))
        raw_date, *rest = fields
        return cls(LogDate.parse(raw_date), *rest)


class LogFile:
    """A connection log held in memory, line order preserved."""

    def __init__(self, records: Iterable[LogRecord] = ()) -> None:
        self.records: list[LogRecord] = list(records)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "LogFile":
        """Parse lines of text; blank lines are skipped."""
        records = []
        for line in lines:
            stripped = line.rstrip("\r\n")
            if stripped.strip():
                records.append(LogRecord.from_line(stripped))
        return cls(records)

    @classmethod
    def from_path(cls, path: Union[str, "PathLike[str]"]) -> "LogFile":
        """Read and parse a log file."""
        with open(path, encoding="utf-8") as handle:
            return cls.from_lines(handle)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[LogRecord]:
        return iter(self.records)

    @property
    def dates(self) -> list[LogDate]:
        return [record.date for record in self.records]

    @property
    def times(self) -> list[str]:
        return [record.time for record in self.records]

    @property
    def source_ips(self) -> list[str]:
        return [record.source_ip for record in self.records]

    @property
    def source_ports(self) -> list[str]:
        return [record.source_port for record in self.records]

    @property
    def source_names(self) -> list[str]:
        return [record.source_name for record in self.records]

    @property
    def destination_ips(self) -> list[str]:
        return [record.destination_ip for record in self.records]

    @property
    def destination_ports(self) -> list[str]:
        return [record.destination_port for record in self.records]

    @property
    def destination_names(self) -> list[str]:
        return [record.destination_name for record in self.records]

    def second_date(self) -> tuple[LogDate, int]:
        """Return the first date that differs from the opening one, and the
        length of the run of records starting where it first appears."""
        dates = self.dates
        if not dates:
            raise ValueError("the log is empty")
        first = dates[0]
        start = next((i for i, date in enumerate(dates) if date != first), None)
        if start is None:
            raise ValueError("the log holds a single date")
        wanted = dates[start]
        count = 0
        for date in dates[start:]:
            if date != wanted:
                break
            count += 1
        return wanted, count

    def names_present(self, names: Optional[Sequence[str]] = None) -> dict[str, bool]:
        """Map each name to whether it appears as a source name."""
        present = set(self.source_names)
        return {name: name in present for name in (names or DEFAULT_NAMES)}

    def unique_source_names(self) -> list[str]:
        """Distinct source names in ascending order."""
        return unique_sorted(sorted(self.source_names))

    def internal_prefixes(self) -> list[str]:
        """Leading ten characters of the source addresses, runs collapsed."""
        return unique_sorted(
            ip[:PREFIX_LENGTH] for ip in self.source_ips if len(ip) > 1
        )

    def unique_destination_names(self) -> list[str]:
        """Distinct destination names in ascending order."""
        return unique_sorted(sorted(self.destination_names))

    def low_ports(self, limit: int = PORT_LIMIT) -> list[int]:
        """Distinct destination ports not above limit, ascending."""
        ports = {
            int(port)
            for port in self.destination_ports
            if port != MISSING
        }
        return sorted(port for port in ports if port <= limit)

    def first_contact(
        self, source: str, target_a: str, target_b: str
    ) -> Optional[LogRecord]:
        """First record where source contacted either target, or None."""
        return next(
            (
                record
                for record in self.records
                if record.source_ip == source
                and record.destination_ip in (target_a, target_b)
            ),
            None,
        )