"""In-place integer sorts and a command that sorts a file of integers."""

import argparse
import re
import time

_INTEGER = re.compile(r"[+-]?\d+")


def bubble_sort(values):
    """Sort ``values`` in place, stopping early once a pass makes no swap."""
    for end in range(len(values) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
                swapped = True
        if not swapped:
            break


def _partition(values, left, right):
    pivot = values[left]
    i, j = left, right
    while i < j:
        while i < j and values[j] >= pivot:
            j -= 1
        values[i] = values[j]
        while i < j and values[i] <= pivot:
            i += 1
        values[j] = values[i]
    values[i] = pivot
    return i


def quick_sort(values):
    """Sort ``values`` in place with quicksort around the first element."""
    pending = [(0, len(values) - 1)]
    while pending:
        left, right = pending.pop()
        if left >= right:
            continue
        p = _partition(values, left, right)
        pending.append((left, p - 1))
        pending.append((p + 1, right))


def read_values(path):
    """Read one integer per line from ``path``."""
    values = []
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            text = line.rstrip("\r\n")
            if not _INTEGER.fullmatch(text):
                raise ValueError(f"invalid integer {text!r} in {path}")
            values.append(int(text))
    return values


def write_values(path, values):
    """Write ``values`` to ``path``, one per line."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(f"{value}\n" for value in values)


_ALGORITHMS = {"qsort": quick_sort, "bubblesort": bubble_sort}


def main(argv=None):
    """Sort the integers in a file and write them to another."""
    parser = argparse.ArgumentParser(description="Sort a file of integers.")
    parser.add_argument("-i", dest="infile", default="unsorted.dat",
                        help="File contains values for sorting")
    parser.add_argument("-o", dest="outfile", default="sorted.dat",
                        help="File to receive sorted values")
    parser.add_argument("-a", dest="algorithm", default="qsort", help="Sort algorithm")
    args = parser.parse_args(argv)

    try:
        values = read_values(args.infile)
    except OSError as exc:
        print("Failed to open the input file", args.infile)
        print(exc)
        return 1
    except ValueError as exc:
        print(exc)
        return 1

    start = time.perf_counter()
    sorter = _ALGORITHMS.get(args.algorithm)
    if sorter is None:
        print("Unsupported algorithm")
    else:
        sorter(values)
    elapsed = time.perf_counter() - start
    print(args.algorithm, "cost", f"{elapsed:.6f}s")
    write_values(args.outfile, values)
    return 0