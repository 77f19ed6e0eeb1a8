"""Response envelopes and hashing/file helpers for the file store."""

import dataclasses
import hashlib
import json
import os

_CHUNK = 1 << 16


def _jsonable(value):
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"cannot encode {type(value).__name__} as JSON")


@dataclasses.dataclass
class RespMsg:
    """The common body of HTTP responses: a code, a message and data."""

    code: int
    msg: str
    data: object = None

    def json_string(self):
        return json.dumps(
            {"code": self.code, "msg": self.msg, "data": self.data},
            ensure_ascii=False,
            separators=(",", ":"),
            default=_jsonable,
        )

    def json_bytes(self):
        return self.json_string().encode("utf-8")


def gen_simple_resp_string(code, msg):
    """A body holding only a code and a message."""
    return f'{{"code":{code},"msg":"{msg}"}}'


def gen_simple_resp_stream(code, msg):
    """:func:`gen_simple_resp_string` as bytes."""
    return gen_simple_resp_string(code, msg).encode("utf-8")


class Sha1Stream:
    """SHA-1 over data fed in pieces."""

    def __init__(self):
        self._sha1 = hashlib.sha1()

    def update(self, data):
        self._sha1.update(data)

    def sum(self):
        """Hex digest of everything fed so far."""
        return self._sha1.hexdigest()


def sha1(data):
    """Hex SHA-1 of ``data``."""
    return hashlib.sha1(data).hexdigest()


def md5(data):
    """Hex MD5 of ``data``."""
    return hashlib.md5(data).hexdigest()


def _digest_file(hasher, file):
    for chunk in iter(lambda: file.read(_CHUNK), b""):
        hasher.update(chunk)
    return hasher.hexdigest()


def file_sha1(file):
    """Hex SHA-1 of what remains to be read from a binary file object."""
    return _digest_file(hashlib.sha1(), file)


def file_md5(file):
    """Hex MD5 of what remains to be read from a binary file object."""
    return _digest_file(hashlib.md5(), file)


def path_exists(path):
    """Tell whether ``path`` exists; other errors while checking are raised."""
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    return True


def _walk(path):
    yield path
    if os.path.isdir(path) and not os.path.islink(path):
        for name in sorted(os.listdir(path)):
            yield from _walk(os.path.join(path, name))


def get_file_size(path):
    """Size of ``path``; for a directory, the size of the last entry walked."""
    size = 0
    for entry in _walk(path):
        size = os.lstat(entry).st_size
    return size