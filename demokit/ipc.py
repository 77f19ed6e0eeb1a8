"""A request/response session between a client and an in-process server.

Requests and responses travel as JSON text.
"""

import json
from dataclasses import dataclass

CLOSE = "CLOSE"


def _load_object(text):
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object")
    return data


@dataclass(frozen=True)
class Request:
    """A method name with its parameter string."""

    method: str = ""
    params: str = ""

    def to_json(self):
        return json.dumps({"methon": self.method, "params": self.params}, ensure_ascii=False)

    @classmethod
    def from_json(cls, text):
        data = _load_object(text)
        return cls(str(data.get("methon", "")), str(data.get("params", "")))


@dataclass(frozen=True)
class Response:
    """A status code with an optional body."""

    code: str = ""
    body: str = ""

    def to_json(self):
        return json.dumps({"code": self.code, "body": self.body}, ensure_ascii=False)

    @classmethod
    def from_json(cls, text):
        data = _load_object(text)
        return cls(str(data.get("code", "")), str(data.get("body", "")))


class _Session:
    def __init__(self, server):
        self._server = server
        self.closed = False

    def send(self, request):
        if self.closed:
            raise RuntimeError("session closed")
        if request == CLOSE:
            self.closed = True
            print("session closed.")
            return None
        try:
            parsed = Request.from_json(request)
        except ValueError:
            print("invalid request format:", request)
            parsed = Request()
        return self._server.handle(parsed.method, parsed.params).to_json()


class IpcServer:
    """Hands out sessions to a server with ``handle(method, params)``."""

    def __init__(self, server):
        self.server = server

    def connect(self):
        """Open a new session."""
        session = _Session(self.server)
        print("a new session has been create successfully.")
        return session


class IpcClient:
    """Sends requests over one session of an :class:`IpcServer`."""

    def __init__(self, server):
        self._session = server.connect()

    def call(self, method, params):
        """Send one request and return the :class:`Response`."""
        reply = self._session.send(Request(method, params).to_json())
        return Response.from_json(reply)

    def close(self):
        """Close the session; further calls raise RuntimeError."""
        self._session.send(CLOSE)