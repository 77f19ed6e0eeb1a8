"""A concurrent crawl engine: a FIFO scheduler feeding a pool of workers."""

import argparse
import logging
import queue
import threading
import urllib.error
import urllib.request

from demokit.crawltypes import WORKER_COUNT, Request
from demokit.zhenai import PARSERS

SEED_URL = "http://localhost:8080/mock/www.zhenai.com/zhenghun"

log = logging.getLogger(__name__)

_STOP = object()


def fetch(url):
    """GET ``url`` and return the raw response: status line, headers and body."""
    try:
        response = urllib.request.urlopen(url)
    except urllib.error.HTTPError as err:
        response = err
    with response:
        body = response.read()
        head = f"HTTP/1.1 {response.getcode()} {response.reason}\r\n"
        head += "".join(f"{key}: {value}\r\n" for key, value in response.headers.items())
    return head.encode("latin-1", errors="replace") + b"\r\n" + body


def work(request, fetcher=fetch):
    """Fetch the page of ``request`` and parse it with the named parser."""
    parser = PARSERS.get(request.parser_name)
    if parser is None:
        raise ValueError(f"unknown parser {request.parser_name!r}")
    return parser(fetcher(request.url), request.url)


class Scheduler:
    """Hands requests to workers in the order they were submitted."""

    def __init__(self):
        self._queue = queue.Queue()

    def submit(self, request):
        """Queue ``request`` for a worker."""
        self._queue.put(request)

    def _stop(self, count):
        for _ in range(count):
            self._queue.put(_STOP)

    def next_request(self):
        """Block until a request is available; ``None`` once the scheduler is stopping."""
        item = self._queue.get()
        return None if item is _STOP else item


class Engine:
    """Crawls from seed requests until no request is left.

    ``worker`` turns a request into a result; ``saver``, if given, is
    called with every profile that carries data.
    """

    def __init__(self, worker=work, saver=None, worker_count=WORKER_COUNT):
        if worker_count <= 0:
            raise ValueError("worker_count must be positive")
        self.worker = worker
        self.saver = saver
        self.worker_count = worker_count

    def _work_loop(self, scheduler, results):
        while True:
            request = scheduler.next_request()
            if request is None:
                return
            try:
                result = self.worker(request)
            except Exception:
                log.exception("work on %s failed", request.url)
                result = None
            results.put(result)

    def run(self, *args):
        """Crawl from the seed requests and return the saved profiles."""
        scheduler = Scheduler()
        results = queue.Queue()
        threads = [
            threading.Thread(target=self._work_loop, args=(scheduler, results), daemon=True)
            for _ in range(self.worker_count)
        ]
        for thread in threads:
            thread.start()

        pending = 0
        for seed in args:
            scheduler.submit(seed)
            pending += 1

        saved = []
        try:
            while pending:
                result = results.get()
                pending -= 1
                if result is None:
                    continue
                if result.profile.data is not None:
                    if self.saver is not None:
                        self.saver(result.profile)
                    saved.append(result.profile)
                for request in result.requests:
                    scheduler.submit(request)
                    pending += 1
        finally:
            scheduler._stop(len(threads))
            for thread in threads:
                thread.join()
        return saved


def main(argv=None):
    """Crawl from the seed city list and print every profile found."""
    parser = argparse.ArgumentParser(description="Crawl user profiles.")
    parser.add_argument("--seed", default=SEED_URL, help="city list URL to start from")
    parser.add_argument("--workers", type=int, default=WORKER_COUNT, help="number of workers")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    engine = Engine(work, print, args.workers)
    engine.run(Request(args.seed, "cityList"))
    return 0