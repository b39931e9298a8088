# logicdrills

Three small logic exercises. Each is usable as a library function and
as a command. The package has no dependencies beyond the standard library.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Maximum path sum in a number triangle

Module `logicdrills.max_path_sum`.

A triangle is a list of rows, for example `[[59], [73, 41], [52, 40, 9]]`.
Starting at the top and stepping to one of the two cells directly beneath,
`max_path_sum` returns the largest total reachable. The input is not
modified. An empty triangle, or a row without enough values beneath it,
raises `ValueError`.

`read_data_from_file` loads a triangle stored as a JSON array of integer
arrays and raises `ValueError` if the file holds anything else.

```python
from logicdrills.max_path_sum import max_path_sum, read_data_from_file

max_path_sum([[59], [73, 41], [52, 40, 9]])   # 184
triangle = read_data_from_file("number.json")
```

From the shell:

```
logicdrills-max-path-sum [FILE]
```

Without `FILE` it reads `./find-max-sum-with-path/files/number.json`,
relative to the current directory. It prints the absolute path it read and
then `Maximum path sum: <n>`; it exits with status 1 if the file cannot be
opened or parsed.

## Decoding L / R / = patterns

Module `logicdrills.left_right`.

`decode_letter(letter, value)` returns a `(left, right)` pair:
`L` gives `(value, value - 1)`, `R` gives `(value - 1, value)`, `=` gives
`(value, value)` and any other letter `(0, 0)`.

`decode_pattern(pattern)` starts from a fixed first pair chosen by the first
letter (`L` → `(4, 2)`, `R` → `(2, 4)`, `=` → `(2, 2)`), then feeds the right
value of the previous pair to `decode_letter` for every following letter.
It returns a `DecodedPattern` with `pairs` (the list of pairs) and `text`
(one digit per letter: the left value for `L` and `=`, the right value for
`R`; other letters add no digit). An empty pattern, or one that does not
start with `L`, `R` or `=`, raises `ValueError`.

```python
from logicdrills.left_right import decode_letter, decode_pattern

decode_letter("L", 4)            # (4, 3)
decoded = decode_pattern("LRL=R")
decoded.pairs                    # [(4, 2), (1, 2), (2, 1), (1, 1), (0, 1)]
decoded.text                     # '42211'
```

From the shell:

```
logicdrills-left-right LRL=R
```

prints the pairs and the decoded string; with no argument it prints a usage
line.

## Counting words in a text file

Module `logicdrills.meat`.

`FileMeta(file_name, file_path, file_type="")` describes a file; its
`location` property joins path and name. `ProcessFileService(meta)` reads
that file line by line, and `get_meat_list()` returns a dict of how often
each word occurs. Words are separated by whitespace, full stops and commas.

```python
from logicdrills.meat import FileMeta, ProcessFileService, split_words, count_words

split_words("t-bone, fatback.. pastrami")   # ['t-bone', 'fatback', 'pastrami']
count_words(["beef", "beef", "pork"])       # {'beef': 2, 'pork': 1}

service = ProcessFileService(FileMeta("file.txt", "./pie-fire-dire/files", "txt"))
counts = service.get_meat_list()
```

## HTTP service

Module `logicdrills.rest`.

`HttpRest(addr, service=None)` binds an HTTP server to `addr`
(`"host:port"`) as soon as it is created; `start()` serves until `stop()` is
called from another thread, and `address` gives the bound host and port.
Without a `service` it counts `./pie-fire-dire/files/file.txt`.

`GET /api/beef/summary` answers with `{"beef": {"<word>": <count>, ...}}`
(see `MeatResponse`). If the file cannot be read the answer is status 500
with `{"error": "Failed to get meat list"}`. Any other path answers 404.

From the shell:

```
logicdrills-serve [--addr HOST:PORT] [--file-path DIR] [--file-name NAME]
```

The defaults are `localhost:8080`, `./pie-fire-dire/files` and `file.txt`.
The server stops cleanly on SIGINT (Ctrl-C) or SIGTERM.

## What is not included

The word counts are served over plain HTTP with JSON only; the package has
no RPC interface and no client for the service.