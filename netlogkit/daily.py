"""Per-day views of a connection log: counts, rankings and connection graphs."""

from __future__ import annotations

from collections import Counter
from typing import Any, Iterable, Union

from netlogkit.bst import BST
from netlogkit.graph import Graph
from netlogkit.logfile import MISSING, LogFile, unique_sorted
from netlogkit.records import Connection, LogDate

TOP_SIZE = 5

Day = Union[LogDate, str]


def _as_date(day: Day) -> LogDate:
    return day if isinstance(day, LogDate) else LogDate.parse(day)


def _column(log: LogFile, column: Union[str, Iterable[Any]]) -> list[Any]:
    values = getattr(log, column) if isinstance(column, str) else list(column)
    if len(values) != len(log):
        raise ValueError("column length does not match the number of records")
    return values


def unique_for_day(
    log: LogFile, column: Union[str, Iterable[Any]], day: Day
) -> list[Any]:
    """Distinct values of a column on the given day, ascending, without "-".

    The column is a LogFile attribute name or a sequence aligned with the records.
    """
    day = _as_date(day)
    values = [
        value
        for date, value in zip(log.dates, _column(log, column))
        if date == day and value != MISSING
    ]
    return unique_sorted(sorted(values))


def outgoing_for_day(log: LogFile, ip: str, day: Day) -> list[str]:
    """Distinct destinations contacted by ip on the given day, ascending."""
    day = _as_date(day)
    destinations = [
        record.destination_ip
        for record in log
        if record.date == day
        and record.source_ip == ip
        and record.destination_ip != MISSING
    ]
    return unique_sorted(sorted(destinations))


def connections_per_day(log: LogFile, day: Day) -> dict[str, int]:
    """Number of connections to each destination on the given day, by address."""
    day = _as_date(day)
    counts = Counter(
        record.destination_ip
        for record in log
        if record.date == day and record.destination_ip != MISSING
    )
    return dict(sorted(counts.items()))


def connection_tree(log: LogFile, day: Day) -> BST:
    """Search tree of the day's destinations ordered by connection count."""
    day = _as_date(day)
    tree = BST()
    tree.label = day
    for ip, count in connections_per_day(log, day).items():
        tree.insert(Connection(ip, count))
    return tree


def top(log: LogFile, n: int, day: Day) -> list[Connection]:
    """The n most contacted destinations of the day, most contacted first."""
    return connection_tree(log, day).top_n(n)


def top5_report(log: LogFile) -> str:
    """Text report of each day's top five and of addresses that persist in it."""
    dates = unique_sorted(log.dates)
    trees = [connection_tree(log, date) for date in dates]
    lines: list[str] = []
    for tree in trees:
        lines.append(f"Top 5 en el dia -> {tree.label}")
        lines.extend(
            f"{connection} ({rank}) "
            for rank, connection in enumerate(tree.top_n(TOP_SIZE), start=1)
        )
        lines.append("")
    if not trees:
        return ""

    tops = [
        [tree.top(i) for i in range(TOP_SIZE) if tree.top(i) is not None]
        for tree in trees
    ]
    first_day = tops[0]
    for connection in first_day:
        appearances = sum(
            1 for day_top in tops for other in day_top if other.ip == connection.ip
        )
        if appearances == len(dates):
            lines.append(
                f"La IP -> {connection.ip}. Aparece en el top 5 todos los dias."
                f" Con una frecuencia de: {connection.frequency} el primer dia "
            )

    pool: list[Connection] = []
    later: list[str] = []
    appeared: LogDate | None = None
    for index in range(len(dates) - 1):
        pool.extend(tops[index])
        following = tops[index + 1]
        for candidate in pool:
            for other in following:
                if (
                    other.ip == candidate.ip
                    and other.ip not in later
                    and other not in first_day
                ):
                    later.append(other.ip)
                    appeared = dates[index]
                    break
        if later:
            lines.extend(
                f"La IP -> {ip}. Aparece en el top 5 desde la fecha -> {appeared}"
                for ip in later
            )
            break
    return "\n".join(lines) + "\n"


def graph_for_day(log: LogFile, day: Day) -> Graph:
    """Graph of the day's addresses with an edge for each distinct contact.

    Sources are added first, then destinations; edges are numbered from 0.
    """
    day = _as_date(day)
    graph = Graph()
    for ip in unique_for_day(log, "source_ips", day):
        graph.add_vertex(ip)
    for ip in unique_for_day(log, "destination_ips", day):
        graph.add_vertex(ip)
    label = 0
    for vertex in graph:
        for target in outgoing_for_day(log, vertex.info, day):
            graph.add_edge(vertex, target, label)
            label += 1
    return graph


def graphs_by_day(log: LogFile) -> list[tuple[LogDate, Graph]]:
    """A connection graph for each run of dates in the log, in log order."""
    return [(date, graph_for_day(log, date)) for date in unique_sorted(log.dates)]