# dsa_kit

Small, readable implementations of classic data structures and algorithms.
The package covers searching, heaps, linked lists, stacks, trees, recursion
exercises, two-pointer techniques and hash-based array problems. It has no
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dsa_kit.arrays` | `binary_search` |
| `dsa_kit.heap` | `MinHeap` |
| `dsa_kit.linkedlist` | `SinglyLinkedList`, `DoublyLinkedList` |
| `dsa_kit.recursion` | `reverse_string`, `nth_triangular`, `unique_paths` |
| `dsa_kit.stacks` | `Stack`, `is_valid` |
| `dsa_kit.trees` | `Tree`, `BinaryTree`, `is_equal`, `dfs_bst`, `invert`, `search_bt` |
| `dsa_kit.twopointers` | `max_profit`, `move_zeroes` |
| `dsa_kit.hashing` | `contains_duplicate`, `group_anagrams`, `top_k_frequent`, `two_sum`, `is_anagram` |

## Examples

```python
from dsa_kit.arrays import binary_search
from dsa_kit.heap import MinHeap
from dsa_kit.stacks import is_valid
from dsa_kit.twopointers import max_profit, move_zeroes
from dsa_kit.hashing import two_sum, top_k_frequent

binary_search([3, 4, 5, 6, 19, 23, 34, 35, 38, 45, 46, 88], 38)  # 8

heap = MinHeap()
for value in (50, 71, 100, 101, 80, 200):
    heap.insert(value)
heap.delete()  # 50

is_valid("()[]{}")                     # True
max_profit([7, 1, 5, 3, 6, 4])         # 5
move_zeroes([0, 1, 0, 3, 12, 0])       # [1, 3, 12, 0, 0, 0]
two_sum([2, 7, 11, 15], 9)             # [1, 0]
top_k_frequent([1, 1, 1, 2, 2, 3], 2)  # [1, 2]
```

Linked lists and trees:

```python
from dsa_kit.linkedlist import SinglyLinkedList, DoublyLinkedList
from dsa_kit.trees import BinaryTree, Tree, invert

numbers = SinglyLinkedList()
for value in (1, 2, 3, 4):
    numbers.append(value)
numbers.sum()  # 10
numbers.reverse()
list(numbers)  # [4, 3, 2, 1]

items = DoublyLinkedList()
items.append(1)
items.append(2)
items.insert_at(0, 0)
list(items)  # [0, 1, 2]
items.remove_at(1)  # 1

tree = BinaryTree(7, BinaryTree(23), BinaryTree(3))
tree.pre_order()  # [7, 23, 3]
invert(tree)
tree.in_order()   # [3, 7, 23]

family = Tree(13, [Tree(12, [Tree(7)]), Tree(4)])
family.bfs(7)         # True
list(family.levels())  # [[13], [12, 4], [7]]
```

## Errors

Operations that cannot succeed raise instead of returning a sentinel:

- `MinHeap.delete`, `Stack.pop` and `Stack.peek` raise `IndexError` when empty.
- `DoublyLinkedList.get`, `remove_at` and `insert_at` raise `IndexError` for
  positions outside the list (`insert_at` accepts the length itself, appending).
- `nth_triangular` and `unique_paths` raise `ValueError` for arguments below 1.
- `group_anagrams` raises `ValueError` for characters outside `a`-`z`.

`binary_search` returns `-1` and `two_sum` returns `[]` when nothing is found.

## What it does not do

This is a library of functions and classes only: it provides no command-line
program and keeps no data anywhere beyond the objects you create.