# contestkit

A toolbox of classic algorithms and data structures, written in plain Python
with no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `contestkit.disjoint_set` | `DisjointSet` (union by rank, path compression, set sizes), `count_acorns`, `forest_summary`, `network_sizes` |
| `contestkit.twosat` | `TwoSat` solver, `negate`, `strongly_connected_components` (Tarjan) |
| `contestkit.shortest_paths` | `bellman_ford`, `has_negative_cycle`, `dijkstra` (multi-source), `NegativeCycleError` |
| `contestkit.hashing` | `hash_sequence`, `hash_pair` (64-bit hash combiners) |
| `contestkit.connectivity` | `bridges`, `articulation_points`, `biconnected_components` |
| `contestkit.matching` | `bipartite_matching` (Kuhn), `escape_failures`, `general_matching` (Edmonds' blossom) |
| `contestkit.maxflow` | `FlowNetwork` with Dinic's max flow |
| `contestkit.bigint` | `BigInteger` decimal big integer, `evaluate`, a command-line calculator |
| `contestkit.fraction` | `Fraction` (reduced, positive denominator), `determinant` |
| `contestkit.crt` | Chinese remainder theorem for distinct prime moduli: `crt_init`, `crt_digits`, `crt_value`, `solve_crt` |
| `contestkit.geometry` | Floating-point 2D geometry around `Point`: projections, distances, intersections, circles, polygon area, centroid, half-plane cuts |
| `contestkit.int_geometry` | Exact integer geometry around `IntPoint`, including `convex_hull` (keeps collinear boundary points) |
| `contestkit.hull` | `strict_convex_hull` (strict corners only), `all_on_hull` |
| `contestkit.closest_pair` | `closest_pair` for integer points, returning indices |
| `contestkit.convex_hull_trick` | `LineEnvelope` for minimum queries over lines |
| `contestkit.aho_corasick` | `AhoCorasick` multi-pattern occurrence counting |
| `contestkit.tree_center` | `build_tree`, `farthest_path`, `tree_diameter`, `best_relink` |
| `contestkit.min_bit` | `MaxFenwick2D` (prefix maxima in any of four directions), `min_key_distance` |

Errors are raised as exceptions: for example `bellman_ford` raises
`NegativeCycleError` when a negative cycle is reachable, and
`BigInteger.divide_by` raises `ZeroDivisionError` for a zero divisor.

## Installation

```
pip install .
```

## Examples

Union-find:

```python
from contestkit.disjoint_set import DisjointSet

ds = DisjointSet(5)
ds.union(0, 1)
ds.union(1, 2)
print(ds.members(0))    # 3
print(ds.components())  # 3
```

Shortest paths:

```python
from contestkit.shortest_paths import dijkstra

adjacency = [[(1, 4), (2, 1)], [(0, 4), (2, 2)], [(0, 1), (1, 2)]]
print(dijkstra(3, adjacency, [0]))  # [0, 3, 1]
```

Maximum flow:

```python
from contestkit.maxflow import FlowNetwork

net = FlowNetwork(4)
net.add_edge(0, 1, 3, 0)
net.add_edge(1, 3, 2, 0)
net.add_edge(0, 2, 2, 0)
net.add_edge(2, 3, 3, 0)
print(net.max_flow(0, 3))  # 4
```

Counting pattern occurrences (overlapping occurrences are counted):

```python
from contestkit.aho_corasick import AhoCorasick

automaton = AhoCorasick(["a", "ab", "bab"])
print(automaton.count("ababab"))  # [3, 3, 2]
```

Big integers (division truncates toward zero; `<<` and `>>` shift by powers
of ten):

```python
from contestkit.bigint import BigInteger

a = BigInteger("123456789012345678901234567890")
b = BigInteger(987654321)
print(a * b, a // b, a % b)
```

## Calculator

The big-integer module has a calculator that reads equations of the form
`left op right` from standard input, separated by whitespace, and prints one
result per equation:

```
echo "12345678901234567890 * 98765432109876543210" | contestkit-bigint
```

Supported operators are `+ - * / % ^ < > <= >= == << >>`, where `^` is
power and `<<` / `>>` shift by powers of ten. Comparisons print `1` or `0`;
an unknown operator prints `unrecognized operator`.

## What it does not do

Apart from the calculator, the package is a library only: it has no commands
that read contest input files, and it keeps nothing on disk.

## Running the tests

```
pip install .[test]
pytest
```