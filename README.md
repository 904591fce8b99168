# autocompleteme

Find the weighted terms whose query starts with a given prefix, heaviest
first. The terms might be film titles ranked by popularity, or any other
queries that carry a weight.

## Installing

```
pip install .
```

## Using it

```python
from autocompleteme.autocomplete import Autocomplete
from autocompleteme.term import Term

engine = Autocomplete()
engine.insert(Term("The Godfather", 5000))
engine.insert(Term("The Dark Knight", 4200))
engine.insert(Term("Toy Story", 1200))
engine.sort()

for term in engine.all_matches("The"):
    print(term)          # "5000\tThe Godfather", then "4200\tThe Dark Knight"
```

Call `sort()` after inserting terms and before searching. The matching is
case-sensitive and compares the start of each query with the prefix.

`Autocomplete` offers:

- `insert(term)` adds a term.
- `sort()` orders the terms by query.
- `binary_search(prefix)` returns the index of some matching term, or `None`.
- `search(key)` returns a `(first, last)` pair of indexes for the matching
  range, or `None` when nothing matches.
- `all_matches(prefix)` returns a `SortingList` of the matching terms,
  heaviest first. It is empty when nothing matches.
- `print(out=None)` writes every term, one per line, to `out` or standard
  output.

## The other modules

- `autocompleteme.term.Term`: a frozen dataclass holding `query` and
  `weight`. Terms order by query with `<`, and `str(term)` gives
  `weight<TAB>query`. `Term.compare_by_weight(t1, t2)` returns 1, 0 or -1 for
  descending weight order. `Term.compare_by_prefix(t1, t2, r)` compares only
  the first `r` characters of each query, returning 1 when `t1` sorts first,
  0 when equal and -1 otherwise; it raises `ValueError` when `r` is negative.
- `autocompleteme.sorting_list.SortingList`: a list that can be built from an
  iterable, supports `insert`, `len()`, indexing and iteration, and sorts in
  place with `std_sort` (by `<`) or with `selection_sort`, `bubble_sort` and
  `merge_sort`. The last three take a function `compare(a, b)` and put `a`
  before `b` when it returns a positive number. `shuffle(rng=None)` mixes the
  order, optionally with a given `random.Random`, and `print(out=None)` lists
  the items.
- `autocompleteme.power_string`: `to_lower` and `to_upper` change ASCII
  letters; `remove_extra_space` strips leading and trailing spaces and tabs
  and collapses runs of spaces; `word_format` does both clean-ups, lowers the
  text and capitalises the first letter of each word, so `"  the   god"`
  becomes `"The God"`.

## What it does not do

The package is a library only. It has no command-line program, no
interactive prompt and no reader for files of weighted terms: build the
`Term` objects yourself and insert them into an `Autocomplete`.