# algokit

A small collection of classic data structures and algorithms in pure Python,
with no dependencies outside the standard library.

## Contents

| Module | What it provides |
| --- | --- |
| `algokit.graphs` | `Graph`, `Vertex`, `Edge` and `EdgeType`: an adjacency-list graph whose vertices keep their insertion order, with optional coordinates and integer edge weights |
| `algokit.traversal` | `depth_first_traverse` and `breadth_first_traverse`, both starting from the first vertex added |
| `algokit.heap` | `Heap` and `BinaryTreeNode`: a binary min-heap ordered by a comparison function |
| `algokit.huffman` | `Symbol`, `compare_freq`, `huffman_priority_queue`, `huffman_extract_and_insert`, `huffman_tree` and `huffman_codes` |
| `algokit.treeprint` | `render_binary_tree`: draws a binary tree as text |
| `algokit.nary` | `NaryTree`: insertion, traversal, height, diameter and path lookup |
| `algokit.pathfinding` | `Point`, `backtracking_array`, `backtracking_graph` and `dijkstra_graph` |
| `algokit.rbtree` | `Color`, `RBNode`, `RBTree`, `is_valid_rb` and `render_rb` |

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Quick tour

### Graphs and traversal

```python
from algokit.graphs import Graph, EdgeType
from algokit.traversal import depth_first_traverse, breadth_first_traverse

g = Graph()
for city in ("San Francisco", "Seattle", "New York", "Las Vegas"):
    g.add_vertex(city)
g.add_edge("San Francisco", "Las Vegas", EdgeType.BIDIRECTIONAL)
g.add_edge("Las Vegas", "New York", EdgeType.UNIDIRECTIONAL)

print(g.format())

def show(vertex, depth):
    print(" " * depth * 4 + f"[{vertex.index}] {vertex.content}")

deepest = depth_first_traverse(g, show)
breadth_first_traverse(g, show)
```

`Graph.format()` returns the adjacency list as text, one line per vertex
(`[0] San Francisco ->3`). Both traversals call the action once per
reachable vertex and return the greatest depth reached (0 for an empty
graph).

### Heaps

```python
from algokit.heap import Heap

heap = Heap(lambda a, b: (a > b) - (a < b))
for value in (5, 1, 3):
    heap.insert(value)
heap.peek()     # 1
heap.extract()  # 1
len(heap)       # 2
```

Items are stored in a list; the `root` property builds a linked tree of
`BinaryTreeNode` objects mirroring the heap's current shape, which
`render_binary_tree` can draw.

### Huffman coding

```python
from algokit.huffman import huffman_codes, huffman_tree

codes = huffman_codes("abcdef", [6, 11, 12, 13, 16, 36])  # {char: code}
root = huffman_tree("abcdef", [6, 11, 12, 13, 16, 36])
```

Frequencies must be positive. Ties in frequency are broken by character;
a single symbol gets the code `"0"`.

### N-ary trees

```python
from algokit.nary import NaryTree

root = NaryTree("/")
opt = root.insert("opt")
betty = opt.insert("Betty")
betty.insert("betty-style.pl")

root.path_exists(["/", "opt", "Betty", "betty-style.pl"])  # True
root.diameter()
root.traverse(lambda node, depth: print("  " * depth + node.content))
```

A newly inserted child becomes the first child of its parent.

### Pathfinding

```python
from algokit.graphs import Graph, EdgeType
from algokit.pathfinding import backtracking_array, dijkstra_graph

g = Graph()
for city in ("Seattle", "Chicago", "Washington"):
    g.add_vertex(city)
g.add_edge("Seattle", "Chicago", EdgeType.BIDIRECTIONAL, 1734)
g.add_edge("Chicago", "Washington", EdgeType.BIDIRECTIONAL, 594)

path = dijkstra_graph(g, "Seattle", "Washington", report=print)

grid = ["000", "110", "000"]
cells = backtracking_array(grid, (0, 0), (0, 2))
```

Graph searches accept either a `Vertex` of the graph or a vertex name and
return a list of vertex names from start to target. `backtracking_array`
works on a grid of `'0'` (open) and any other character (wall), tries
neighbours right, down, left, then up, and returns a list of `Point`
values. Every search returns `None` when the target cannot be reached and
takes an optional `report` callable, which is given a line of text for
every cell or vertex it checks.

### Red-black trees

```python
from algokit.rbtree import RBTree

tree = RBTree.from_iterable([79, 47, 68, 87, 84, 91, 21, 32, 34, 2, 20, 22])
assert tree.is_valid()
print(tree.render())
list(tree)  # values in ascending order
```

`is_valid_rb` and `render_rb` work on any hand-built tree of `RBNode`
objects as well.

## Errors

Errors are reported with exceptions, not sentinel return values: adding a
vertex that already exists or inserting a duplicate into an `RBTree`
raises `ValueError`, naming an unknown vertex raises `KeyError`, and
extracting from or peeking into an empty heap raises `IndexError`.

## What it does not do

- Red-black trees support insertion, lookup and validation only; there is
  no removal of values.
- There is no command-line program; everything is used as a library.