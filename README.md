# dstructs

A few textbook data structures and a genetic-algorithm benchmark suite.
The package needs nothing beyond the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dstructs.btree` | `BTree` (order 4, unique integer keys) with `insert`, `delete`, `search`, `find_max`, `find_min`, `in`, ascending iteration, `levels()` and `format()`; `format_tree` |
| `dstructs.hashtable` | `ChainedHashTable`, a fixed-size separately chained hash table; `multiplicative_hash`, `linear_probe`, `format_table` |
| `dstructs.linkedlist` | `LinkedList`: `append`, `push_front`, `delete_after`, `search`, `reverse`, `has_cycle`, `swap_even_pairs`, `middle`, `format` |
| `dstructs.benchmarks` | unconstrained test functions of any dimension: `sphere`, `rastrigin`, `ackley`, `griewank`, `rosenbrock`, the penalised functions and more |
| `dstructs.lowdim` | low-dimensional test functions (Shekel, Branin, Kowalik, ...) and `benchmark(number)` for functions 1 to 25 |
| `dstructs.constrained` | constrained problems `case1` ... `case6` with their `caseN_penalty` terms |
| `dstructs.rotated` | `random_rotation`, `rotate`, `RotatedFunction` and `rotated_benchmark(number, n)` for functions 101 to 122 |
| `dstructs.ga` | `GeneticAlgorithm`, `GAConfig`, `Problem`, `problem_settings`, `read_bounds`, `summarize`, `run_experiment` and the `dstructs-ga` command |

## Examples

A B-tree:

```python
from dstructs.btree import BTree

tree = BTree()
for key in (10, 20, 5, 6, 12, 30, 7, 17):
    tree.insert(key)

print(6 in tree)        # True
print(list(tree))       # keys in ascending order
print(tree.format())    # one "[ k1 k2 ]" group per node, one line per level
tree.delete(6)
```

`insert` returns `False` for a key already present and `delete` returns
`False` for a missing one.

A chained hash table:

```python
from dstructs.hashtable import ChainedHashTable, multiplicative_hash, format_table

table = ChainedHashTable(11, multiplicative_hash)
for key in (22, 41, 53, 46, 30, 13, 12, 67):
    table.insert(key)
print(len(table), 41 in table)
print(table.search(41))   # index of the chain holding 41
print(format_table(table))
table.delete(41)          # raises KeyError for a missing key
```

A linked list:

```python
from dstructs.linkedlist import LinkedList

items = LinkedList([1, 2, 3, 4])
items.swap_even_pairs()
print(items.format())     # 2->1->4->3->
print(items.middle())
items.reverse()
```

Benchmark functions:

```python
import random

from dstructs.benchmarks import rastrigin, sphere
from dstructs.lowdim import benchmark
from dstructs.rotated import rotated_benchmark

print(sphere([0.0] * 30), rastrigin([0.0] * 30))
print(benchmark(17)([3.14159, 2.275]))          # Branin
rotated = rotated_benchmark(109, 10, random.Random(1))
print(rotated([0.0] * 10))
```

Running the genetic algorithm directly:

```python
import random
from dataclasses import replace

from dstructs.ga import GAConfig, GeneticAlgorithm, problem_settings

problem = replace(problem_settings(1), bounds=((-100.0, 100.0),) * 30, max_evals=5000)
ga = GeneticAlgorithm(problem, GAConfig(trials=1), random.Random(0))
result = ga.run_trial()
print(result.best_value, result.best_eval, result.best_gen)
```

## Command

`dstructs-ga` runs the genetic algorithm on one or more numbered benchmark
functions (1 to 22, default 1):

```
dstructs-ga 1 9 --trials 3 --seed 42
```

Options: `--bounds-dir` (default `function`), `--output-dir` (default
`SGA30`), `--trials` (default 3) and `--seed`.

For function `N` the lower and upper bound of each variable are read, as
whitespace-separated pairs, from `<bounds-dir>/fN.txt`. One line per trial is
printed. A header and one summary line per function are appended to
`<output-dir>/result.txt`, and `total.txt`, `stepAvg.txt` and `stepB.txt` are
written to `<output-dir>/FN/`.

## What it does not do

The package has no graph types, no sequential-list type and no sorting
routines, and it has no interactive menus: the structures are used from
Python code, and the only command is `dstructs-ga`. Bound files for the
benchmark functions are not included; they must be supplied.