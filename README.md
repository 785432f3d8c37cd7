# lz77kit

lz77kit is a small LZ77 compressor and decompressor. You can use it as a
library or through two command-line tools. Each tool times its work and
adds a row of results to a CSV file.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Command line

### Compress

```
lz77-compress <windowSize> <lookaheadBufferSize> <archivoEntrada> <archivoSalida>
```

- `windowSize` is how many bytes back the encoder searches for a match.
- `lookaheadBufferSize` is the longest match that one record may hold.

The tool compresses the input file into the output file 21 times. It
divides the total time, in whole milliseconds, by 20 and appends a row
to `resultados_compress.csv` in the current directory. The row holds
that average, the input size in bytes and the output size in bytes. If
the CSV file is new or empty, this header is written first:

```
Tiempo promedio(milliseconds),Archivo Original(bytes),Archivo Codificado(bytes)
```

### Decompress

```
lz77-decompress <archivoComprimido> <archivoDescomprimido>
```

Decompression does not need the window or lookahead sizes. This tool
also runs 21 times, divides the total by 20 and appends a row to
`resultados_decompress.csv`. The row holds the average, the compressed
size and the decompressed size. When it is done it prints
`Archivo descomprimido: <archivoDescomprimido>`.

### Exit status

Both tools exit with status 0 on success. They print a message to
standard error and exit with status 1 when:

- they are given the wrong number of arguments (a usage line is printed);
- a size argument is not an integer;
- a file cannot be read or written;
- a compressed stream is malformed;
- the CSV file cannot be opened.

## Library

```python
from lz77kit.codec import LZ77

codec = LZ77(window_size=4096, lookahead_buffer_size=32)

packed = codec.encode(b"abracadabra abracadabra")
restored = codec.decode(packed)

codec.compress("notes.txt", "notes.lz77")
codec.decompress("notes.lz77", "notes.out")
```

- `LZ77.encode(data)` turns bytes into a stream of records.
- `LZ77.decode(data)` turns a record stream back into bytes. It raises
  `ValueError` if the stream length is not a whole number of records, if
  a length is negative, or if an offset points outside the bytes decoded
  so far.
- `LZ77.compress(input_path, output_path)` and
  `LZ77.decompress(input_path, output_path)` do the same for files.
- `LZ77.find_longest_match(data, position)` returns a `Match` with
  `offset`, `length` and `next_byte` for the longest run in the window
  that matches the data at `position`. When two runs are equally long,
  the one that starts earlier wins.

The module `lz77kit.cli` also has two helpers used by the tools:

- `time_runs(action, runs)` calls `action` `runs` times and returns the
  total time in whole milliseconds.
- `append_results(csv_path, header, row)` appends `row` as one
  comma-separated line and writes `header` first if the file is empty.

## Format

The compressed stream is a flat sequence of 9-byte records, in
little-endian order:

1. the match offset, as a signed 32-bit integer;
2. the match length, as a signed 32-bit integer;
3. one literal byte that follows the match.

## Limitations

- The stream has no header, no stored original length and no checksum.
- Every record takes 9 bytes, so the output is often larger than the
  input.
- A record always carries a literal byte, even when its match runs to
  the very end of the input. Decoding such a stream gives one extra byte
  at the end, so the round trip is not always exact.
- The match search compares every position in the window, so large
  windows are slow.