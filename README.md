# olymp

A library of algorithms and data structures for competitive programming.
It depends only on the standard library and supports Python 3.10 and later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Contents

### Number theory and algebra

- `olymp.primes`: `is_prime` (trial division), `generate_primes` (all primes
  up to `n`), `min_divisors` (least prime divisor table), `factorize` (for
  numbers up to one million) and `factorize_big` (up to two billion). Both
  raise `ValueError` above their limit. `PrimeCounter(n)` counts primes up to
  `n` and up to every `n // k` in O(n^(3/4)); `count_primes(n)` is the
  shortcut for a single count.
- `olymp.number_theory`: `extended_gcd(a, b)` returns `(g, x, y)` with
  `a*x + b*y == g`; `extended_gcd_small_x` does the same for positive inputs
  with `0 <= x < b // g`; `crt(a1, r1, a2, r2)` returns the smallest
  non-negative solution of two congruences, or `None` if there is none.
- `olymp.ntt`: `NTT(mod, max_power=23)` with `dft` and `multiply` for
  polynomial products modulo a prime.
- `olymp.gauss`: `gauss_eliminate(matrix)` returns a reduced copy of the
  matrix; entries must support field arithmetic (for example `Fraction`).
- `olymp.geometry`: `Vec` (integer coordinates) and `VecF` (float coordinates,
  compared with tolerance `EPS`), with `dot`, `cross`, `orth`, `len2`,
  `length`; `VecF` also has `rotate` and `rotate_sin_cos`. `approx_equal`
  compares floats with the same tolerance.

### Utilities

- `olymp.debug`: `format_value` and `format_values` render nested values on
  one line: strings quoted, pairs and containers in braces.
- `olymp.multivector`: `multi_vector(*dims, fill=0)` builds nested lists of
  the given shape.

### Data structures

- `olymp.fenwick`: `Fenwick`, built from a size or a sequence, with `add`,
  `prefix_sum`, `range_sum` and `lower_bound`.
- `olymp.sparse_table`: `SparseTable` (idempotent range queries),
  `SparseIndexTable` and `LinearMinTable` (index of a range minimum, the
  latter in linear memory). Ranges are inclusive `[l, r]`.
- `olymp.segment_tree`: `SegmentTree` over half-open ranges, with point
  updates, lazy range updates and queries; `MaxNode` and `merge_max` give
  range addition with range maximum and its position.
- `olymp.treap`: `Treap` and `TreapNode`; subclass the node and override
  `update` to keep extra subtree data.
- `olymp.ordered_treap`: `OrderedTreap`, a sorted multiset with `insert`,
  `insert_at`, `erase_one`, `erase_all`, `kth`, `lower_bound`, `upper_bound`,
  `min`, `max` and `index_of`.
- `olymp.splay_tree`: `SplayTree` and `SplayNode`, with `find`, `merge` and
  `split`.

### Strings

- `olymp.aho`: `AhoCorasick`, a pattern trie with suffix links and links to
  the nearest terminal suffix.
- `olymp.suffix_array`: `suffix_array(s)` by prefix doubling.

### Graphs

- `olymp.dijkstra`: `dijkstra(graph, source)`; unreachable vertices get
  `math.inf`.
- `olymp.scc`: `SCC`, strongly connected components, with colours,
  component lists and the condensation graph.
- `olymp.hld`: `HeavyLightDecomposition` with `add`, `lca`, `path_max` and
  `path_max_exclusive` (maxima are taken together with zero).
- `olymp.flows`: `Dinic` (maximum flow) and `MinCostMaxFlow` (minimum-cost
  flow), both able to split the flow into source-to-sink paths with
  `decompose`.

## Examples

```python
from olymp.primes import count_primes, generate_primes
from olymp.fenwick import Fenwick

print(count_primes(10**9 + 7))   # 50847535
print(generate_primes(20))       # [2, 3, 5, 7, 11, 13, 17, 19]

fenw = Fenwick(10)
fenw.add(3, 5)
fenw.add(5, 7)
print(fenw.range_sum(3, 5))      # 12
```

```python
from olymp.flows import Dinic

d = Dinic(4)
d.add_edge(0, 1, 3)
d.add_edge(1, 3, 2)
d.add_edge(0, 2, 1)
d.add_edge(2, 3, 4)
print(d.max_flow(0, 3))          # 3
```

## Not included

The library has no command-line interface. It offers no modular integer
type, no arbitrary-precision integer type, no disjoint-set union structure,
no offline dynamic connectivity and no 2-SAT solver.