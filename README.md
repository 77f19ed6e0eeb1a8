# demokit

Small, self-contained algorithms, design-pattern examples and toy
applications. The package uses only the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `demokit.leetcode` | `two_sum`, `roman_to_int`, `longest_common_prefix`, `is_valid`, `remove_duplicates`, `remove_element`, `str_str`, `reverse`, `is_palindrome` |
| `demokit.dynamic` | `coin_change`, `coin_change2`, `fib`, `fib1`, `fib2`, `fib3`, `can_partition` |
| `demokit.sorting` | `bubble_sort`, `quick_sort` (both in place), `read_values`, `write_values`, `main` |
| `demokit.bloomfilter` | `BloomFilter` (`add`, `in`), the `fnv1_64` and `murmur3_64` hashes |
| `demokit.creational` | `new_api`, `SayHi`, `SayHello`, operator factories, `RedThemeFactory`, `BlackThemeFactory`, `get_instance`, `DefInfo`, `Container.builder` |
| `demokit.structural` | `Adapter`, `System` facade, `ProxySubject`, `HandlerFunc`, `handle_with_middleware`, `new_a`, `new_b`, `new_handler` |
| `demokit.behavioral` | command (`Light`, `LightOnCommand`, `LightOffCommand`, `Controller`), iterator (`Numbers`, `iterator_print`), observer (`Subject`, `Reader`), strategy (`PaymentContext`, `Cash`, `Bank`) |
| `demokit.pipeline` | generator stages: `array_source`, `random_source`, `reader_source`, `in_mem_sort`, `merge`, `merge_n`, `write_sink`, and a TCP hop with `network_sink` / `network_source` |
| `demokit.externsort` | `create_pipeline`, `create_network_pipeline`, `write_to_file`, `print_file`, `main` |
| `demokit.tree` | `Node` with in-order `traverse`, `traverse_func` and iteration; `create_node` |
| `demokit.functional` | `adder`, `fibonacci`, `fibonacci_text`, `weighted_number` |
| `demokit.musiclib` | `MusicInfo`, `MusicManager`, `play` |
| `demokit.ipc` | `Request`, `Response`, `IpcServer`, `IpcClient`: JSON request/response sessions within one process |
| `demokit.gameserver` | `CenterServer`, `CenterClient`, `Player`, `Message`, `Room`, `CenterError` |
| `demokit.crawltypes` | `Request`, `Result`, `Profile`, `WORKER_COUNT`, `ELASTIC_INDEX` |
| `demokit.zhenai` | `parse_city_list`, `parse_city_user`, `parse_user`, `User`, `PARSERS` |
| `demokit.crawlengine` | `fetch`, `work`, `Scheduler`, `Engine`, `main` |
| `demokit.filestore` | `RespMsg`, `gen_simple_resp_string`, `gen_simple_resp_stream`, `Sha1Stream`, `sha1`, `md5`, `file_sha1`, `file_md5`, `path_exists`, `get_file_size` |

Binary files handled by `demokit.pipeline` and `demokit.externsort` hold
integers as 8-byte big-endian signed records.

## Examples

```python
from demokit.dynamic import coin_change
from demokit.bloomfilter import BloomFilter, fnv1_64, murmur3_64
from demokit.sorting import quick_sort
from demokit.pipeline import array_source, in_mem_sort, merge

coin_change([1, 2, 5], 11)        # 3

values = [3, 6, 4, 5, 9]
quick_sort(values)                # values is now [3, 4, 5, 6, 9]

bf = BloomFilter(10000, [fnv1_64, murmur3_64])
bf.add(b"hello")
b"hello" in bf                    # True

list(merge(in_mem_sort(array_source(3, 6, 4)), array_source(1, 5)))
# [1, 3, 4, 5, 6]
```

## Commands

- `demokit-sort [-i INFILE] [-o OUTFILE] [-a qsort|bubblesort]` – read one
  integer per line (default `unsorted.dat`), sort them and write them to
  `sorted.dat`, printing the time taken.
- `demokit-externsort generate [FILE] [-n COUNT]` – write random integers
  to a binary file (default `small.in`, 64 values) and print them.
- `demokit-externsort sort [INPUT] [OUTPUT] [-c CHUNKS] [--size BYTES] [--network] [--base-port PORT]`
  – sort a binary file in chunks, merge the chunks (optionally passing each
  through a local TCP connection) and print the first 100 values of the
  output.
- `demokit-music` – an interactive music library read from standard input:
  `mgr list`, `mgr add <name> <artist> <source> <type>`, `mgr remove <id>`,
  `play <name>`, `q`.
- `demokit-cgss` – an interactive game-centre console: `login <username>
  <level> <exp>`, `logout <username>`, `send <message>`, `listplayer`,
  `help`/`h`, `quit`/`q`.
- `demokit-crawl [--seed URL] [--workers N]` – crawl from a city-list page
  and print every profile found.

Each command accepts `--help`.

## What the package does not do

- `play` only simulates playback: it prints progress dots; no audio is
  decoded or played.
- The game centre runs in a single process; `IpcServer` sessions are
  in-memory, not network connections.
- The crawl engine runs its workers as threads in one process and only
  prints the profiles it finds; it does not store them anywhere, and there
  are no remote worker or storage services.
- `demokit.filestore` offers response envelopes and hashing/file helpers
  only; there is no upload server, database or cache behind them.