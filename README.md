# netlogkit

Tools for studying a network connection log: which hosts talk to which,
on which days, over which ports, and which destinations stand out.

Each log line is a comma-separated record of eight fields:

```
date,time,source_ip,source_port,source_name,destination_ip,destination_port,destination_name
```

The date is written `DD-M-YYYY`. A `-` in a field means the value was not
recorded. Blank lines are skipped. Dates compare equal when their day
numbers are equal.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Command line

Print the per-day graph report for a log (the path defaults to
`equipo4.csv`):

```
netlogkit equipo4.csv
```

For each day it tells how many hosts address A contacted, which host had
the most outgoing connections, and how many hosts connected to addresses
A, B and C. The three addresses can be changed with `--ip-a`, `--ip-b`
and `--ip-c`.

Print the domain report instead:

```
netlogkit equipo4.csv --report domain
```

It shows the addresses of two fixed suspicious domains, the `reto.com`
hosts with more than one incoming connection, the distinct destinations
and ports of a fixed set of internal hosts, and the first time each of
those hosts contacted one of the suspicious addresses.

Run the traversal demonstration: a random adjacency matrix walked depth
first, then a random adjacency list walked breadth first:

```
netlogkit-traversal
netlogkit-traversal --seed 42 --vertices 10 --edges 15
```

`--vertices` must be at least 10. Run the hash map demonstration instead:

```
netlogkit-traversal --hashmaps
```

## Library

```python
from netlogkit.logfile import LogFile
from netlogkit.daily import connections_per_day, graph_for_day, top
from netlogkit.computers import Computer

log = LogFile.from_path("equipo4.csv")

print(log.second_date())               # (date, length of its first run)
print(log.low_ports(1000))             # distinct destination ports <= 1000

day = log.records[0].date
print(connections_per_day(log, day))   # destination IP -> count
print(top(log, 5, day))                # most contacted destinations first
graph = graph_for_day(log, day)        # who connected to whom that day
print(graph)

computer = Computer("172.17.230.12", log)
print(computer.incoming_total(), computer.outgoing_total())
print(computer.repeated_destination()) # first destination hit three times in a row
```

Modules:

- `netlogkit.logfile` — `LogFile` and `LogRecord`; column properties such
  as `source_ips` and `destination_ports`, `names_present`,
  `unique_source_names`, `unique_destination_names`, `internal_prefixes`,
  `low_ports`, `first_contact`; helpers `unique_sorted` and `format_ports`.
- `netlogkit.daily` — per-day views: `unique_for_day`, `outgoing_for_day`,
  `connections_per_day`, `connection_tree`, `top`, `top5_report`,
  `graph_for_day`, `graphs_by_day`.
- `netlogkit.computers` — `Computer`, `IncomingConnections` and
  `OutgoingConnections` for a single address.
- `netlogkit.cli` — `graph_report`, `domain_report` and the `netlogkit`
  command.
- `netlogkit.graph` — `Graph`, `Vertex` and `Edge`, a directed adjacency list.
- `netlogkit.bst` — `TreeNode`, `BinaryTree` and `BST`, with traversals,
  level numbering and a descending top-N walk.
- `netlogkit.hashmaps` — `LinearProbingHashMap` and `ChainedHashMap`
  for integer keys; `get` raises `KeyError` for a missing key.
- `netlogkit.sorting` — bubble, insertion, selection, quick and merge sort
  taking a comparison function such as `ascending` or `descending`.
- `netlogkit.search` — `sequential_search` and `binary_search`, returning
  an index or `None`.
- `netlogkit.records` — `LogDate` and `Connection`.
- `netlogkit.traversal` — `dfs`, `bfs`, `random_matrix`,
  `random_multilist`, `render_matrix`, `hashmap_demo` and the
  `netlogkit-traversal` command.

## Limits

The whole log is read into memory, and nothing is stored between runs. The
domain report looks only at its built-in list of domains and hosts.