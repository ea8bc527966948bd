# kruskalbench

Times four variants of Kruskal's minimum spanning tree algorithm on random
complete graphs in the unit square.

Each node is a random point with both coordinates drawn uniformly from
`[0, 1)`. An edge joins every pair of nodes. An edge's weight is the square
of the Euclidean distance between its two ends.

The four variants are in `kruskalbench.kruskal`:

| Function                   | Edge order        | Find                    |
|----------------------------|-------------------|-------------------------|
| `kruskal_array`            | sorted list       | plain root walk         |
| `kruskal_array_compressed` | sorted list       | with path compression   |
| `kruskal_heap`             | binary heap       | plain root walk         |
| `kruskal_heap_compressed`  | binary heap       | with path compression   |

Each variant returns the list of chosen edges in the order it picked them.

## Installation

```
pip install .
```

The package needs no third-party libraries. To run the tests, install the
`test` extra (`pip install .[test]`) and run `pytest`.

## Running the benchmark

```
kruskalbench
```

By default the command builds graphs of N = 2^k nodes for k from 5 to 13,
which is 32 to 8192 nodes. It runs each size five times. Each run does the
following:

1. It times how long the graph takes to build.
2. It times each of the four variants.
3. It checks that all four spanning trees have the same total weight.
4. It prints a summary.
5. It appends one line to `csv/resultados.csv`, relative to the current
   directory.

Options:

| Option          | Default                | Meaning                               |
|-----------------|------------------------|---------------------------------------|
| `--min-exp K`   | `5`                    | smallest exponent k                   |
| `--max-exp K`   | `13`                   | largest exponent k                    |
| `--repeats R`   | `5`                    | runs per size                         |
| `--csv PATH`    | `csv/resultados.csv`   | file the rows are appended to         |
| `--seed S`      | none (random)          | seed for the point generator          |

Each CSV line has this form, with times in seconds:

```
N,construction_time,kruskal_array,kruskal_array_compressed,kruskal_heap,kruskal_heap_compressed
```

The command does not create the CSV file's directory. If the file cannot be
opened, the command prints a message to standard error and carries on. If
the four variants disagree on the total weight, the command prints an error
and exits with status 1.

The larger sizes take a long time. A complete graph of 8192 nodes has about
33 million edges.

## Using it as a library

```python
import random

from kruskalbench.graph import Graph, Node, format_edges, total_weight
from kruskalbench.kruskal import kruskal_array_compressed

graph = Graph([Node(1, 2), Node(4, 6), Node(-3, 7)])
print(graph.describe())

tree = kruskal_array_compressed(graph)
print(format_edges(tree))
print(total_weight(tree))  # 66.0

rng = random.Random(0)
random_graph = Graph([Node.random(rng) for _ in range(100)])
```

`Graph` gives each node an `id` equal to its position in the list. The
graph's `nodes` and `edges` are plain lists. Each `Edge` holds its two nodes
as `first` and `second`, along with its `weight`. `same_weights(*edge_lists)`
reports whether every list has the same total weight.

You can run a single experiment and save its row yourself:

```python
import random
import sys

from kruskalbench.experiment import append_csv, run_experiment

result = run_experiment(256, random.Random(1), sys.stdout)
print(result.csv_row())
append_csv(result, "results.csv")
```

`run_experiment` returns an `ExperimentResult` holding `n` and the time in
seconds for each step. It raises `WeightMismatchError` when the four
variants do not produce trees of equal total weight.

`kruskalbench.unionfind.UnionFind(n)` is the disjoint-set structure that the
variants use. It offers these methods:

- `union(root_x, root_y)` joins two trees. The smaller tree goes under the
  root of the larger one.
- `find(x)` returns the root of `x` and compresses the path.
- `find_no_compression(x)` returns the root of `x` and leaves the forest
  unchanged.

## What it does not do

The package only writes raw timings to CSV. It does not aggregate, plot or
otherwise analyse the results.