"""External sorting of binary integer files, locally or through TCP stages."""

import argparse
import itertools
import os

from demokit.pipeline import (
    in_mem_sort,
    merge_n,
    network_sink,
    network_source,
    random_source,
    reader_source,
    write_sink,
)


def _chunk(file_name, offset, size):
    with open(file_name, "rb") as handle:
        handle.seek(offset)
        yield from reader_source(handle, size)


def _sorted_chunks(file_name, file_size, chunk_count):
    if chunk_count <= 0:
        raise ValueError("chunk_count must be positive")
    chunk_size = file_size // chunk_count
    return [
        in_mem_sort(_chunk(file_name, index * chunk_size, chunk_size))
        for index in range(chunk_count)
    ]


def create_pipeline(file_name, file_size, chunk_count):
    """Sort ``file_name`` in ``chunk_count`` chunks and merge them."""
    return merge_n(*_sorted_chunks(file_name, file_size, chunk_count))


def create_network_pipeline(file_name, file_size, chunk_count, base_port=7000):
    """Like :func:`create_pipeline`, but each sorted chunk goes through TCP.

    Chunk ``i`` listens on ``base_port + i``; a ``base_port`` of 0 lets the
    system pick free ports.
    """
    ports = []
    for index, sorted_chunk in enumerate(_sorted_chunks(file_name, file_size, chunk_count)):
        port = base_port + index if base_port else 0
        _, bound_port = network_sink(f":{port}", sorted_chunk)
        ports.append(bound_port)
    return merge_n(*(network_source(f"127.0.0.1:{port}") for port in ports))


def write_to_file(values, file_name):
    """Write ``values`` to ``file_name`` as binary records."""
    with open(file_name, "wb") as handle:
        write_sink(handle, values)


def print_file(file_name, limit=100):
    """Print and return the first ``limit`` integers of ``file_name``."""
    with open(file_name, "rb") as handle:
        values = list(itertools.islice(reader_source(handle), limit))
    for value in values:
        print(value)
    return values


def main(argv=None):
    """Generate random input files or sort them."""
    parser = argparse.ArgumentParser(description="External sort of binary integer files.")
    commands = parser.add_subparsers(dest="command", required=True)

    generate = commands.add_parser("generate", help="write random integers to a file")
    generate.add_argument("file", nargs="?", default="small.in")
    generate.add_argument("-n", "--count", type=int, default=64)

    sort = commands.add_parser("sort", help="sort a file of integers")
    sort.add_argument("input", nargs="?", default="large.in")
    sort.add_argument("output", nargs="?", default="large.out")
    sort.add_argument("-c", "--chunks", type=int, default=4)
    sort.add_argument("--size", type=int, default=None,
                      help="bytes of input to sort (default: whole file)")
    sort.add_argument("--network", action="store_true",
                      help="pass sorted chunks through TCP")
    sort.add_argument("--base-port", type=int, default=7000)

    args = parser.parse_args(argv)

    if args.command == "generate":
        write_to_file(random_source(args.count), args.file)
        print_file(args.file)
        return 0

    size = os.path.getsize(args.input) if args.size is None else args.size
    if args.network:
        values = create_network_pipeline(args.input, size, args.chunks, args.base_port)
    else:
        values = create_pipeline(args.input, size, args.chunks)
    write_to_file(values, args.output)
    print_file(args.output)
    return 0