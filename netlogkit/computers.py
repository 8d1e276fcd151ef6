"""Connections seen from the point of view of a single computer."""

from __future__ import annotations

from typing import Optional

from netlogkit.logfile import LogFile

_RUN_LENGTH = 3
_PREFIX_DOTS = 3


def _network_prefix(ip: str) -> str:
    dots = 0
    for position, char in enumerate(ip):
        if char == ".":
            dots += 1
            if dots == _PREFIX_DOTS:
                return ip[: position + 1]
    raise ValueError(f"not a dotted address: {ip!r}")


class IncomingConnections:
    """Records of the log whose destination is the given address."""

    def __init__(self, ip: str, log: LogFile) -> None:
        self.ip = ip
        selected = [record for record in log if record.destination_ip == ip]
        self.addresses = [record.destination_ip for record in selected]
        self.pairs = [
            (record.destination_ip, record.destination_port) for record in selected
        ]

    def __len__(self) -> int:
        return len(self.addresses)


class OutgoingConnections:
    """Records of the log whose source is the given address."""

    def __init__(self, ip: str, log: LogFile) -> None:
        self.ip = ip
        selected = [record for record in log if record.source_ip == ip]
        self.addresses = [record.source_ip for record in selected]
        self.pairs = [
            (record.destination_ip, record.destination_port) for record in selected
        ]

    def __len__(self) -> int:
        return len(self.addresses)


class Computer:
    """One address of the log with its incoming and outgoing connections."""

    def __init__(self, ip: str, log: LogFile) -> None:
        self.ip = ip
        self.log = log
        self.incoming = IncomingConnections(ip, log)
        self.outgoing = OutgoingConnections(ip, log)

    def is_internal(self, other: str) -> bool:
        """True when other shares this address's first three dotted parts."""
        return _network_prefix(other) == _network_prefix(self.ip)

    def incoming_total(self) -> int:
        """Number of connections received."""
        return len(self.incoming)

    def outgoing_total(self) -> int:
        """Number of connections started."""
        return len(self.outgoing)

    def origins(self) -> list[str]:
        """Source address of each connection this computer started."""
        return [record.source_ip for record in self.log if record.source_ip == self.ip]

    def destinations(self) -> list[str]:
        """Destination of each connection this computer started, in log order."""
        return [
            record.destination_ip
            for record in self.log
            if record.source_ip == self.ip
        ]

    def repeated_destination(self) -> Optional[str]:
        """First destination contacted three times in a row, or None."""
        destinations = self.destinations()
        for start in range(len(destinations) - _RUN_LENGTH + 1):
            window = destinations[start : start + _RUN_LENGTH]
            if all(value == window[0] for value in window):
                return window[0]
        return None