"""Command-line benchmarks that compress or decompress a file and log timings."""

from __future__ import annotations

import os
import sys
import time
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence

from lz77kit.codec import LZ77

# The operation is repeated this many times, but the total is averaged over
# one run fewer.
_RUNS = 21
_AVERAGE_DIVISOR = 20

_COMPRESS_CSV = "resultados_compress.csv"
_COMPRESS_HEADER = (
    "Tiempo promedio(milliseconds),Archivo Original(bytes),Archivo Codificado(bytes)"
)
_DECOMPRESS_CSV = "resultados_decompress.csv"
_DECOMPRESS_HEADER = (
    "Tiempo promedio(milliseconds),Archivo Codificado(bytes),"
    "Archivo Descomprimido(bytes)"
)


def time_runs(action: Callable[[], object], runs: int) -> int:
    """Call ``action`` ``runs`` times; return the total of whole milliseconds."""
    total = 0
    for _ in range(runs):
        start = time.perf_counter_ns()
        action()
        end = time.perf_counter_ns()
        total += (end - start) // 1_000_000
    return total


def append_results(csv_path, header: str, row: Iterable[object]) -> None:
    """Append ``row`` to ``csv_path``, writing ``header`` first if it is empty."""
    path = Path(csv_path)
    with path.open("a", encoding="utf-8", newline="") as handle:
        if handle.tell() == 0:
            handle.write(header + "\n")
        handle.write(",".join(str(value) for value in row) + "\n")


def _file_sizes(first: str, second: str) -> Optional[tuple[int, int]]:
    try:
        first_size = os.path.getsize(first)
    except OSError:
        print("Error opening input file to calculate size", file=sys.stderr)
        return None
    try:
        second_size = os.path.getsize(second)
    except OSError:
        print("Error opening output file to calculate size", file=sys.stderr)
        return None
    return first_size, second_size


def _record(csv_name: str, header: str, avg_ms: float, sizes: tuple[int, int]) -> bool:
    try:
        append_results(csv_name, header, (f"{avg_ms:g}", *sizes))
    except OSError:
        print(f"Error opening {csv_name} file", file=sys.stderr)
        return False
    return True


def compress_main(argv: Optional[Sequence[str]] = None) -> int:
    """Benchmark compression of a file and append the results to a CSV file."""
    args = list(sys.argv[1:] if argv is None else argv)
    usage = (
        "Uso: lz77-compress <windowSize> <lookaheadBufferSize> "
        "<archivoEntrada> <archivoSalida>"
    )
    if len(args) != 4:
        print(usage, file=sys.stderr)
        return 1
    try:
        window_size = int(args[0])
        lookahead_size = int(args[1])
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    input_file, output_file = args[2], args[3]

    codec = LZ77(window_size, lookahead_size)
    try:
        total = time_runs(lambda: codec.compress(input_file, output_file), _RUNS)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    sizes = _file_sizes(input_file, output_file)
    if sizes is None:
        return 1
    if not _record(_COMPRESS_CSV, _COMPRESS_HEADER, total / _AVERAGE_DIVISOR, sizes):
        return 1
    return 0


def decompress_main(argv: Optional[Sequence[str]] = None) -> int:
    """Benchmark decompression of a file and append the results to a CSV file."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print(
            "Uso: lz77-decompress <archivoComprimido> <archivoDescomprimido>",
            file=sys.stderr,
        )
        return 1
    compressed_file, decompressed_file = args

    # Window and lookahead sizes play no part in decoding.
    codec = LZ77(0, 0)
    try:
        total = time_runs(
            lambda: codec.decompress(compressed_file, decompressed_file), _RUNS
        )
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    sizes = _file_sizes(compressed_file, decompressed_file)
    if sizes is None:
        return 1
    if not _record(
        _DECOMPRESS_CSV, _DECOMPRESS_HEADER, total / _AVERAGE_DIVISOR, sizes
    ):
        return 1

    print(f"Archivo descomprimido: {decompressed_file}")
    return 0