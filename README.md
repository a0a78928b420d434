# dshomework

Four small programs built around classic data structures. Each one can be
used as a Python module or run as a command. Every command reads an input
file and writes an output file. Both file names are optional positional
arguments. When they are left out, the defaults below are used.

| Command                   | Module                    | Default input / output                     |
|---------------------------|---------------------------|--------------------------------------------|
| `dshomework-browser`      | `dshomework.browser`      | `inputProblem1.txt` / `outputProblem1.txt` |
| `dshomework-address-book` | `dshomework.address_book` | `inputProblem2.txt` / `outputProblem2.txt` |
| `dshomework-flips`        | `dshomework.flips`        | `inputProblem3.txt` / `outputProblem3.txt` |
| `dshomework-triage`       | `dshomework.triage`       | `inputProblem4.txt` / `outputProblem4.txt` |

For example:

```
dshomework-flips problems.txt answers.txt
```

The package uses only the standard library.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Browser history

`BrowserHistory` keeps the current page in `current`, plus one stack for
back history and one for forward history.

- `visit(url)` pushes the current page, if there is one, onto the back stack.
  It then makes `url` the current page, clears the forward stack and returns
  `url`.
- `back()` and `forward()` move one page and return the new current page.
  When there is nowhere to go, they raise `HistoryError` with the message
  `Cannot go back` or `Cannot go forward`.

`run_commands(text)` runs a script and returns the report lines. In the script,
commands are separated by whitespace. A `visit` takes the rest of its line,
after one separating character, as the URL. `back` and `forward` each move one
page. Any other word produces `Unknown command: <word>`.

```python
from dshomework.browser import BrowserHistory, run_commands

history = BrowserHistory()
history.visit("example.com")
history.visit("example.com/docs")
history.back()          # "example.com"

run_commands("visit example.com\nback\n")
# ["Visited: example.com", "Cannot go back"]
```

## Address book

`AddressBook` stores `Contact` records (`contact_id`, `name`, `phone`,
`email`) in an AVL tree keyed by the integer id.

- `add(contact_id, name, phone, email)` inserts a contact and returns it. If
  the id is already taken, it raises `DuplicateContactError`.
- `find(contact_id)` returns the contact with that id. `delete(contact_id)`
  removes it. If the id is not in the book, both raise `ContactNotFoundError`.
- `contacts()` lists the contacts in ascending id order. The book also
  supports `len()`, `in` (by id) and iteration.
- `tree_lines()` draws the tree sideways: the right subtree comes first, and
  each id is right-aligned to 6 columns per level.
- `height()` returns the tree height, which is 0 for an empty book.

```python
from dshomework.address_book import AddressBook

book = AddressBook()
book.add(7, "Ada", "ext-7", "ada@example.com")
book.add(3, "Grace", "ext-3", "grace@example.com")
[c.name for c in book.contacts()]   # ["Grace", "Ada"]
book.delete(3)
```

`run_session(text)` plays the numbered menu (add, search, delete, list, show
tree, exit) using `text` as the input, and returns the full transcript. The
session ends at option 6 or when no further number can be read.

## Window flips

`parse_line(line)` reads a line such as `[0,1,1,0,1,1,0] 3`. It collects the
`0`/`1` characters inside the brackets as bits and returns `(bits, k)`, where
`k` is the integer after the first `]`. If there is no integer there, it raises
`ValueError`.

`min_flips(bits, k)` scans the bits from left to right. Each zero starts a
flip of a window of `k` bits. When a flip turns a one into a zero, the scan
resumes past that position. The function returns the number of flips, or `-1`
if zeros remain. It does not change the input. Bits other than 0 or 1 raise
`ValueError`.

`solve_lines(lines)` returns one answer per line.

```python
from dshomework.flips import min_flips, parse_line

bits, k = parse_line("[0,0,0,1,0,1,1,0] 3")
min_flips(bits, k)
```

## Triage

`Patient` has a `name`, a `severity` and an `arrival_time`. `PatientHeap` is a
max-heap that orders patients by higher severity first and then by earlier
arrival. It has the following operations:

- `push(patient)` adds a patient. If the heap is already at its capacity
  (1000 by default), it raises `HeapFullError`.
- `pop()` removes and returns the patient with the highest priority. On an
  empty heap it raises `IndexError`.
- `names()` lists the names in the heap's storage order.

`parse_patient(line)` reads one line of this form:

```
{"name": "Alice", "severity": 80, "arrival_time": 1}
```

`read_test_cases(lines)` groups patient lines into test cases, using blank
lines as separators. It keeps at most 10 cases and 100 patients per case. Extra
lines are skipped, with a warning on standard error.

`process_test_case(patients, number)` returns the report lines for one case.
The report shows the heap after each insertion, followed by the treatment
order.

```python
from dshomework.triage import PatientHeap, parse_patient

heap = PatientHeap()
heap.push(parse_patient('{"name": "Alice", "severity": 80, "arrival_time": 1}'))
heap.names()    # ["Alice"]
heap.pop().name # "Alice"
```

## What the package does not do

- The address book keeps contacts in memory only. Nothing is saved between
  runs.
- `dshomework-address-book` replays a session from an input file and writes
  the transcript to a file. It does not prompt at an interactive terminal.
- None of the commands reads from standard input or writes its results to
  standard output.