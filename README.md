# tapesort

tapesort sorts exam score records by grade with an external sort. The records are stored in a fixed-width binary format.

The sort works in two phases:

1. It reads the input in blocks of at most ten records. It sorts each block in memory and writes the blocks as runs across ten input tapes, taking the tapes in turn.
2. It merges the runs. Each pass takes one run from every input tape that still holds one and merges those runs onto an output tape. Then the input and output tapes swap roles. The passes go on until a single sorted run is left. That run ends up on the first tape, `fita0.bin`.

During the sort it counts reads, writes and comparisons. It also measures the processor time spent.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Preparing the data sets

`tapesort-datasets gerar` reads `PROVAO.TXT` from the current directory. The file is read as Latin-1 text.

Each entry holds these fields in order:

1. A registration of up to 8 characters.
2. A grade.
3. A state of up to 2 characters.
4. A city field 50 characters wide.
5. A course field 30 characters wide.

In the city and course fields, leading spaces are dropped and each run of spaces becomes a single space. Parsing stops at the first entry that does not match this layout, or after 471705 records.

The command writes three binary files into the current directory:

- `aleatorio.bin`: the records in their original order
- `crescente.bin`: the records sorted by ascending grade
- `decrescente.bin`: the records sorted by descending grade

```
tapesort-datasets gerar
```

To print one of these files, give its situation number. `1` is random, `2` is ascending and `3` is descending.

```
tapesort-datasets ler 1
```

## Sorting

```
tapesort <method> <quantity> <situation> [-P]
```

- `method`: use `1` for the balanced merge sort.
- `quantity`: the number of records to read from the start of the input.
- `situation`: selects the input file.
  - `1`: `arquivos/aleatorio.bin`
  - `2`: `arquivos/crescente.bin`
  - `3`: `arquivos/decrescente.bin`
- `-P`: when the sort finishes, print the sorted records as a table.

The inputs are read from an `arquivos/` directory. Run `tapesort-datasets gerar` inside that directory, or move the generated files into it.

The tape files `fita0.bin` to `fita19.bin` are written to a `fitas/` directory, which is created if it does not exist.

After a sort the command prints the counters and the elapsed processor time. An invalid situation or method, or an input file that cannot be opened, gives exit status 1.

Example:

```
tapesort 1 100 1 -P
```

## Library use

```python
from tapesort.records import Statistics
from tapesort.balanced_merge import balanced_merge, format_result

stats = Statistics()
result = balanced_merge("arquivos/aleatorio.bin", 100, False, stats, "fitas")
stats.finish()
print(stats.report())
print(format_result(result))
```

`balanced_merge` returns the path of the tape that holds the sorted records. `TapeSet`, `generate_sorted_runs` and `merge_runs` expose the two phases separately.

`tapesort.records` provides these names:

- `Record`: a record, with `to_bytes` and `from_bytes` for its 104-byte little-endian layout.
- `read_record`, `iter_records` and `write_record`: read and write records on binary streams.
- `Statistics`: the counters and processor time of a run.

`tapesort.datasets` provides these functions:

- `parse_provao`: parse the text format into records.
- `compact_spaces`: the space clean-up applied to the city and course fields.
- `save_binary`, `read_binary` and `generate_files`: write and read the binary data sets.

## Limitations

Only method `1` sorts. Methods `2` and `3` are accepted, but they only print `Método 2!` or `Método 3!` and do nothing else.