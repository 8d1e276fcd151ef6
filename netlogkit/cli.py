"""Command-line reports over a connection log."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from netlogkit.computers import Computer
from netlogkit.daily import graphs_by_day
from netlogkit.graph import Graph
from netlogkit.logfile import MISSING, LogFile

DEFAULT_LOG = "equipo4.csv"
DEFAULT_IP_A = "172.17.230.12"
DEFAULT_IP_B = "68.25.108.136"
DEFAULT_IP_C = "23.207.91.19"

RETO_DOMAIN = "reto.com"
ANOMALOUS_DOMAINS = ("nyvbcosk2llkngjncf9o.net", "kdkkgs7z6ptuhv2f8jub.ru")
EXCLUDED_SERVER = "1.1.1.1"
IGNORED_PORT = "67"
SEARCHED_IPS = (
    "172.17.230.12",
    "172.17.230.100",
    "172.17.230.101",
    "172.17.230.103",
    "172.17.230.49",
)


def _incoming(graph: Graph, ip: str) -> int:
    """Edges pointing at ip from vertices that do not hold ip."""
    return sum(
        1
        for vertex in graph
        if vertex.info != ip
        for edge in vertex.edges
        if edge.target.info == ip
    )


def _incoming_section(number: int, label: str, ip: str, counts: list) -> list[str]:
    lines = [
        "",
        f" --- {number}. Ubica la cantidad de computadoras que se han conectado "
        f"hacia {label} por dia --- ",
    ]
    if not counts:
        lines.append(f"No hay conexiones de otras computadoras hacia {ip}")
    else:
        lines.extend(
            f"En la fecha -> {date} hubo ({count}) Conexiones de Computadoras "
            "Independientes"
            for date, count in counts
        )
    return lines


def graph_report(
    log: LogFile,
    ip_a: str = DEFAULT_IP_A,
    ip_b: str = DEFAULT_IP_B,
    ip_c: str = DEFAULT_IP_C,
) -> str:
    """Report the daily outgoing and incoming connections of three addresses."""
    graphs = graphs_by_day(log)
    lines = [
        "--- 1. Determina la cantidad de computadoras con las que se ha "
        "conectado A por dia. ---"
    ]
    busiest = []
    counts_a = []
    for date, graph in graphs:
        best = None
        best_count = 0
        incoming = 0
        for vertex in graph:
            if len(vertex) > best_count:
                best, best_count = vertex, len(vertex)
            if vertex.info == ip_a:
                lines.append(
                    f"La computadora -> {ip_a} se conecto con: {len(vertex)} "
                    f"computadoras en la fecha -> {date}"
                )
            else:
                incoming += sum(1 for edge in vertex.edges if edge.target.info == ip_a)
        busiest.append((date, best, best_count))
        counts_a.append((date, incoming))

    counts_b = [(date, _incoming(graph, ip_b)) for date, graph in graphs]
    counts_c = [(date, _incoming(graph, ip_c)) for date, graph in graphs]

    lines.append("")
    lines.append(
        f"--- 1.1 Es el vertice: {ip_a} el que mas conexiones salientes tiene "
        "hacia la red interna?  "
    )
    for date, vertex, count in busiest:
        if vertex is None:
            lines.append(f"No hay conexiones salientes en el dia -> {date}")
        elif vertex.info == ip_a:
            lines.append(
                f"Si, en En la fecha: {date} La ip A es la computadora con mas "
                f"conexiones. Tiene ({count}) "
            )
        else:
            lines.append(
                f"No, La computadora con mas conexiones en el dia -> {date} "
                f"Es la computadora: {vertex.info} con ({count}) conexiones"
            )

    lines.extend(_incoming_section(2, "A", ip_a, counts_a))
    lines.extend(_incoming_section(3, "B", ip_b, counts_b))
    lines.extend(_incoming_section(4, "C", ip_c, counts_c))
    return "\n".join(lines) + "\n"


def domain_report(log: LogFile) -> str:
    """Report anomalous domains, busy reto.com hosts and first contacts."""
    domain_ips: dict[str, str] = {}
    reto_ips: set[str] = set()
    for record in log:
        name = record.destination_name
        if name == RETO_DOMAIN or name == MISSING:
            reto_ips.add(record.destination_ip)
        domain_ips.setdefault(name, record.destination_ip)

    first, second = ANOMALOUS_DOMAINS
    lines = [
        "--- Hay algun nombre de dominio en el conjunto que sea anomalo ---  ",
        "R. ",
        f"1. {first}",
        f"2. {second}",
        "--- De los nombres de dominio encontrados en el paso anterior, "
        "¿cual es su IP?---  ",
        "R. ",
    ]
    lines.extend(
        f"Dominio: {domain} --> IP: {domain_ips.get(domain, '')}"
        for domain in ANOMALOUS_DOMAINS
    )

    lines.append("")
    lines.append(
        "--- De las computadoras pertenecientes al dominio reto.com determina "
        "la cantidad de IPs que tienen al menos una conexin entrante. ---  "
    )
    lines.append("R. ")
    for ip in sorted(reto_ips):
        total = Computer(ip, log).incoming_total()
        if total > 1 and ip != EXCLUDED_SERVER:
            lines.append(f"{ip} ({total}) conexiones entrantes ")

    lines.append("")
    lines.append("--- Toma algunas computadoras que no sean server.reto.com. ---  ")
    lines.append("")
    lines.append("--- Obten las IPs unicas de las conexiones entrantes.  ---  ")
    for ip in SEARCHED_IPS:
        lines.append(f"--- {ip} ---")
        pairs = {
            pair
            for pair in Computer(ip, log).outgoing.pairs
            if pair[1] != IGNORED_PORT
        }
        lines.extend(f"{address}, {port}" for address, port in sorted(pairs))
        lines.append("")
    lines.append(
        "Las ip tienen muchas conexiones salientes y muy pocas entrates, excepto "
        "en un caso raro, donde hay muchas conexiones entrantes"
    )

    lines.append("")
    lines.append(
        "--- Determina en que fecha ocurre la primera comunicacion entre "
        "estas dos ---  "
    )
    target_a = domain_ips.get(first, "")
    target_b = domain_ips.get(second, "")
    for ip in SEARCHED_IPS:
        record = log.first_contact(ip, target_a, target_b)
        if record is not None:
            lines.append(
                f" La ip: {ip} se conecto a {record.destination_ip} en la fecha: "
                f"{record.date} por el puerto: {record.destination_port}"
            )
    return "\n".join(lines) + "\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load a log and print the chosen report."""
    parser = argparse.ArgumentParser(description="Connection log reports.")
    parser.add_argument("path", nargs="?", default=DEFAULT_LOG, help="log file")
    parser.add_argument(
        "--report", choices=("graph", "domain"), default="graph",
        help="which report to print",
    )
    parser.add_argument("--ip-a", default=DEFAULT_IP_A)
    parser.add_argument("--ip-b", default=DEFAULT_IP_B)
    parser.add_argument("--ip-c", default=DEFAULT_IP_C)
    args = parser.parse_args(argv)

    try:
        log = LogFile.from_path(args.path)
    except OSError as error:
        parser.error(f"cannot read {args.path}: {error.strerror or error}")
    except ValueError as error:
        parser.error(f"malformed log {args.path}: {error}")

    if args.report == "domain":
        sys.stdout.write(domain_report(log))
    else:
        sys.stdout.write(graph_report(log, args.ip_a, args.ip_b, args.ip_c))
    return 0