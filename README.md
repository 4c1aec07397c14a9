# arbolnif

Binary trees keyed by NIF numbers (eight-digit identifiers), with three
kinds of tree:

- **abb** (`arbolnif.trees.SearchTree`): a binary search tree. Smaller keys
  go left and larger keys go right.
- **abe** (`arbolnif.trees.BalancedTree`): a level-filled binary tree. Keys
  fill each level from left to right before the next level is started,
  whatever their order.
- **avl** (`arbolnif.avl.AVLTree`): a self-balancing search tree whose
  subtrees never differ in height by more than one. With tracing switched
  on, every rotation is reported.

The program's messages are in Spanish.

## Command line

```
arbolnif -ab <abb|abe|avl> [-trace <y|n>] -init <manual | random N | file N FILENAME>
```

Options are processed in order, so `-ab` must come before `-init`. Tracing
applies to insertions made after `-trace`, so give `-trace` before `-init`
if rotations during initialisation are to be reported.

- `-init manual` reads keys from standard input until `-1` or the end of
  input. A key that is not eight digits stops the program with an error.
- `-init random N` inserts `N` random numbers below 100000000. They are not
  checked, so a random key may have fewer than eight digits.
- `-init file N FILENAME` reads the first `N` whitespace-separated keys from
  `FILENAME`. A file that cannot be opened, or a key that is not eight
  digits, stops the program with an error.
- `-trace y` prints each AVL rotation as it happens; `-trace n` turns this
  off (the default).
- `-h`, `-help` or `--help` prints the full usage text.

Missing or invalid arguments print an error and the usage text, and the
program exits with status 1.

When initialisation is done, a menu offers:

| option | action |
|--------|--------|
| `i` | insert keys (end with `-1`), then show the tree |
| `b` | search for keys (end with `-1`) |
| `o` | show the in-order traversal and the tree |
| `m` | show the tree level by level |
| `q` | quit |

Inside the menu, a key that is not eight digits is reported and asked for
again. End of input also ends the program. The screen is cleared between
options only when the output is a terminal.

The tree is drawn level by level, with `[.]` standing for an empty child:

```
Nivel 0: [20000000]
Nivel 1: [10000000][30000000]
Nivel 2: [.][.][.][.]
```

AVL nodes show their balance factor (left height minus right height), as
in `[50000000(1)]`.

## Library use

```python
from arbolnif.nif import Nif
from arbolnif.avl import AVLTree

tree = AVLTree()
for number in (30000000, 20000000, 10000000):
    tree.insert(Nif(number), trace=False)

print(Nif(20000000) in tree)  # True
print(tree.inorder())         # keys in order
print(len(tree))              # 3
print(tree.render())
```

- `arbolnif.nif.Nif` holds an eight-digit number. `-1` is also accepted as
  the end-of-input marker (`is_sentinel()`). `Nif.parse(text)` reads one
  from text, and `Nif.random(rng)` makes a random one. Any other number
  raises `InvalidNifError`, which is a `ValueError`. NIFs compare and hash
  like their numbers.
- Every tree (`SearchTree`, `BalancedTree`, `AVLTree`) has
  `insert(key, trace=False)`, which returns `False` for a key already
  present, and `search(key)` / `in`. It can be iterated in order and has
  `len()`, `is_empty()`, `inorder()`, and `levels()`, which returns nodes
  per level with `None` for missing children. `render()` and `str()` give
  the level drawing.
- `AVLTree(out)` writes rotation traces to the stream `out`, which defaults
  to standard output.
- `arbolnif.nodes` provides `BinaryNode`, `AVLNode` and `format_node(node)`.
- `arbolnif.cli` provides `main(argv=None)`, `parse_arguments`, `run_menu`,
  `make_tree(kind)`, `usage_text(prog)` and `menu_text()`.

## Limitations

Keys can be inserted and searched for, but not removed. Trees are kept in
memory only and are not saved between runs.

## Tests

```
pip install -e .[test]
pytest
```