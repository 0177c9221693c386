# currc

Classic data structures together with a simulated memory pool.
The package has no runtime dependencies.

## What is inside

| Module              | Provides |
|---------------------|----------|
| `currc.memory`      | `MemoryPool`, `MemoryBlock`: a first-fit allocator over a fixed byte pool |
| `currc.linked_list` | `LinkedList`: a singly linked list that inserts at the head |
| `currc.stack`       | `Stack`: a LIFO stack |
| `currc.queues`      | `Queue`: a FIFO queue that can be cloned |
| `currc.hashmap`     | `HashMap`, `hash_function`: a string-keyed map with separate chaining and 32-bit djb2 hashing |
| `currc.bst`         | `BinarySearchTree`, `BSTNode`: an unbalanced binary search tree that keeps duplicate keys |

## Installation

```
pip install .
```

## Usage

### Memory pool

Addresses are integer offsets into the pool's buffer; every block carries a
24-byte header. The default pool holds 1 MiB.

```python
from currc.memory import MemoryPool

pool = MemoryPool(1024)
address = pool.calloc(4, 8)          # 32 zeroed bytes
pool.view(address)[:4] = b"abcd"
address = pool.realloc(address, 64)  # contents are copied over
pool.free(address)
for block in pool.blocks():
    print(block)
```

`malloc(0)` returns `None`, a request no free block can satisfy raises
`MemoryError`, and freeing or viewing an address that is not an allocated
block raises `ValueError`. Neighbouring free blocks are merged on every
`free`.

### Linked list, stack and queue

```python
from currc.linked_list import LinkedList
from currc.stack import Stack
from currc.queues import Queue

items = LinkedList([5, 10, 15])
items.insert(20)     # new items go to the head
items.delete(10)     # True if an equal item was removed
items.reverse()
print(list(items), len(items))

stack = Stack()
stack.push(10)
stack.push(20)
print(stack.peek(), stack.pop())

queue = Queue()
queue.enqueue(1)
queue.enqueue(2)
copy = queue.clone(lambda item: item)
print(queue.dequeue(), queue.is_empty(), list(copy))
```

`Stack.pop`, `Stack.peek`, `Queue.dequeue` and `Queue.peek` raise
`IndexError` when the container is empty. `LinkedList.search` returns the
first equal item or `None`.

### Hash map

```python
from currc.hashmap import HashMap

table = HashMap(101)
table.put("one", 1)
table.put("two", 2)
print(table.get("two"), "one" in table)
table.remove("two")  # True if the key was present
```

Keys must be `str`; `get` raises `KeyError` for a missing key. The number
of buckets is fixed when the map is created.

### Binary search tree

```python
from currc.bst import BinarySearchTree

tree = BinarySearchTree([50, 30, 70, 20, 40, 60, 80])
print(list(tree.in_order()))  # keys in sorted order
tree.delete(20)
print(tree.minimum(), tree.maximum(), 40 in tree)
```

Keys may be any mutually comparable values. `in_order`, `pre_order` and
`post_order` return iterators; `minimum` and `maximum` raise `ValueError`
on an empty tree.

## What it does not do

This is a library only: it installs no command-line program. The memory
pool is a simulation over a Python `bytearray` and does not back the other
data structures, which keep ordinary Python objects.

## Running the tests

```
pip install .[test]
pytest
```