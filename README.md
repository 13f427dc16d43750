# algokit

Small, dependency-free implementations of classic algorithms and data
structures: arithmetic helpers, searching and sorting, integer matrices,
linked lists, a queue, string hashes, an open-addressing hash table, a tiny
JSON text builder, and shapes with visitors. A few command-line tools sit on
top of them.

## Installation

```
pip install algokit
```

To run the test suite:

```
pip install "algokit[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algokit.arithmetic` | `power`, `calculate`, `gcd`, `main` |
| `algokit.searching` | `linear_search`, `binary_search`, `find_all`, `search_position`, `insert_at`, `insert_sorted` |
| `algokit.sorting` | `Timing`, `random_array`, `format_array`, `selection_sort`, `partition`, `quick_sort`, `benchmark`, `main` |
| `algokit.matrix` | `matmul`, `mateq`, `format_matrix` |
| `algokit.sysinfo` | `read_cpu_fields`, `cpu_usage`, `measure_cpu`, `read_memory`, `memory_bar`, `main` |
| `algokit.complex_number` | `Complex` with `+`, `-`, `==`, `abs()` and the built-in `abs` |
| `algokit.students` | `Student`, `StudentList` |
| `algokit.json_tokens` | `Token`, `StringToken`, `NumToken`, `BoolToken`, `ArrayToken`, `Json` |
| `algokit.shapes` | `Shape`, `Rectangle`, `Circle`, `Triangle`, `Visitor`, `NameVisitor`, `PerimeterVisitor`, `AreaVisitor`, `main` |
| `algokit.linked_list` | `Node`, `LinkedList` |
| `algokit.linked_queue` | `LinkedQueue` |
| `algokit.singly_linked` | `ListNode`, `generate`, `generate_random`, `reverse`, `reverse_range`, `to_list` |
| `algokit.hashing` | `simple_hash`, `cool_hash` |
| `algokit.hash_table` | `HashTable` |

## Behaviour worth knowing

- `calculate(a, op, b)` understands `+ - * / ^`. Division by zero raises
  `ZeroDivisionError`; an unknown operator returns `0.0`. `^` truncates `b`
  to an integer, and `power` returns `1.0` for a zero or negative exponent.
- `gcd` ignores signs: `gcd(-30, -18)` is `6`, `gcd(0, 5)` is `5`.
- `binary_search` and `linear_search` return `-1` when the value is absent;
  `find_all` returns every matching index. `insert_at` and `insert_sorted`
  return new lists; `insert_at` raises `IndexError` for a position outside
  the list.
- `selection_sort` and `quick_sort(items, start=0, end=None)` sort in place.
- `matmul` raises `ValueError` for ragged matrices or mismatched shapes.
- `StudentList` methods `append`, `remove` and `set_score` return the list,
  so calls chain; `find_student` raises `KeyError` for an unknown name,
  `average_score` is NaN for an empty list, `best_students` keeps scores
  above 6 and `worst_students` scores below 4.
- `Json.serialize` writes members in the mapping's order; string tokens are
  quoted but not escaped.
- `LinkedList.insert`/`remove` return `False` for an out-of-range position,
  `get` returns `None`, and `clone()` returns a new list.
- `LinkedQueue.dequeue` returns the removed value (`None` when empty);
  `front()` and `rear()` raise `IndexError` on an empty queue.
- `reverse` and `reverse_range` rewire the nodes in place and return the new
  head; `reverse_range` uses zero-based inclusive positions.
- `simple_hash` and `cool_hash` give unsigned 32-bit values, e.g.
  `simple_hash("hello") == 763074757`.
- `HashTable.get` raises `KeyError` for a missing key; `insert` returns
  `False` for a key already present; `len()` and `in` are supported.

## Examples

```python
from algokit.arithmetic import calculate, gcd
from algokit.searching import binary_search
from algokit.complex_number import Complex

calculate(6, "*", 7)                              # 42
gcd(48, 64)                                       # 16
binary_search([1, 2, 3, 4, 5, 8, 10], 4)          # 3
Complex(1, 1) + Complex(0, 2) == Complex(1, 3)    # True
```

```python
from algokit.json_tokens import Json, NumToken, StringToken, ArrayToken

Json({"array_token": ArrayToken([NumToken(1), StringToken("ok")])}).serialize()
# '{"array_token":[1,"ok"]}'
```

```python
from algokit.hash_table import HashTable

table = HashTable()
table.insert("first", "hi")
table.insert("secnd", "ih")
table.get("first")     # 'hi'
len(table)             # 2
```

## Command-line tools

```
algokit-calc                 # reads expressions such as 3+4 or 2^10 from standard input, one per line
algokit-sortbench            # times selection sort against quick sort; --max-power sets the largest size (default 4)
algokit-sysinfo              # memory totals and a usage bar from /proc/meminfo
algokit-sysinfo cpu          # CPU busy percentage over --interval seconds (default 3) from /proc/stat
algokit-shapes               # perimeters, then areas, of a circle, a square and a triangle
```

`algokit-sysinfo` also takes `--stat` and `--meminfo` to read other files in
the same format.

## What it does not do

- `algokit.sysinfo` only reads the Linux `/proc/stat` and `/proc/meminfo`
  formats; it has no support for other operating systems.
- The shapes use 3.14 for pi, and a triangle's area treats its third side
  value as an angle in radians.
- Nothing is stored between runs; every structure lives in memory only.