"""Pipeline stages over sorted integers: sources, in-memory sort, merges
and sinks, with a TCP hop between stages.

Integers travel as 8-byte big-endian two's-complement records.
"""

import heapq
import logging
import random
import socket
import struct
import threading
import time

_RECORD = struct.Struct(">q")

log = logging.getLogger(__name__)


def array_source(*args):
    """Yield the given values in order."""
    yield from args


def in_mem_sort(source):
    """Read all of ``source``, then yield its values in ascending order."""
    started = time.perf_counter()
    data = list(source)
    log.debug("read done in %.6fs", time.perf_counter() - started)
    started = time.perf_counter()
    data.sort()
    log.debug("in-memory sort done in %.6fs", time.perf_counter() - started)
    yield from data


def merge(left, right):
    """Merge two ascending streams; on equal values the left one comes first."""
    yield from heapq.merge(left, right)
    log.debug("merge done")


def merge_n(*args):
    """Merge any number of ascending streams by pairing them up recursively."""
    if not args:
        raise ValueError("merge_n needs at least one input")
    if len(args) == 1:
        return iter(args[0])
    middle = len(args) // 2
    return merge(merge_n(*args[:middle]), merge_n(*args[middle:]))


def reader_source(reader, chunk_size=-1):
    """Yield integers read from a binary ``reader``.

    Stops at end of input, or once ``chunk_size`` bytes have been read when
    ``chunk_size`` is not negative.
    """
    bytes_read = 0
    while chunk_size < 0 or bytes_read < chunk_size:
        record = reader.read(_RECORD.size)
        if not record:
            return
        if len(record) < _RECORD.size:
            raise ValueError(f"truncated record of {len(record)} bytes")
        bytes_read += len(record)
        yield _RECORD.unpack(record)[0]


def write_sink(writer, values):
    """Write every value to a binary ``writer``."""
    for value in values:
        writer.write(_RECORD.pack(value))


def random_source(count):
    """Yield ``count`` random non-negative 63-bit integers."""
    for _ in range(count):
        yield random.getrandbits(63)


def _split_addr(addr):
    if isinstance(addr, tuple):
        return addr[0], int(addr[1])
    host, _, port = addr.rpartition(":")
    return host, int(port)


def network_sink(addr, source):
    """Listen on ``addr`` ("host:port") and send ``source`` to the first client.

    The listening socket is bound before returning; the actual
    ``(host, port)`` bound is returned, which matters when port 0 is given.
    """
    listener = socket.create_server(_split_addr(addr))

    def serve():
        with listener:
            conn, _ = listener.accept()
            with conn, conn.makefile("wb") as out:
                write_sink(out, source)

    threading.Thread(target=serve, daemon=True).start()
    return listener.getsockname()[:2]


def network_source(addr):
    """Connect to ``addr`` ("host:port") and yield the integers it sends."""
    host, port = _split_addr(addr)
    with socket.create_connection((host or "127.0.0.1", port)) as conn, \
            conn.makefile("rb") as stream:
        yield from reader_source(stream)