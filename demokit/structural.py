"""Structural patterns: adapter, facade, proxy and handler middleware."""

from dataclasses import dataclass, field


class AdapteeImpl:
    """An object with the interface the caller does not expect."""

    def specific_request(self):
        return "adaptee method"


@dataclass
class Adapter:
    """Offers ``request`` on top of an adaptee's ``specific_request``."""

    adaptee: object

    def request(self):
        return self.adaptee.specific_request()


class SystemA:
    """Subsystem A."""

    def run(self):
        text = "system A running"
        print(text)
        return text


class SystemB:
    """Subsystem B."""

    def run(self):
        text = "system B running"
        print(text)
        return text


@dataclass
class System:
    """Facade that runs both subsystems in order."""

    a: SystemA = field(default_factory=SystemA)
    b: SystemB = field(default_factory=SystemB)

    def run(self):
        return [self.a.run(), self.b.run()]


class RealSubject:
    """The object the proxy stands in for."""

    def do(self):
        return "real"


@dataclass
class ProxySubject:
    """Wraps the real subject's result with work before and after."""

    real: RealSubject = field(default_factory=RealSubject)

    def do(self):
        return f"pre:{self.real.do()}:after"


@dataclass
class HandlerFunc:
    """Makes a plain callable usable as a handler."""

    func: object

    def handle(self, ctx):
        return self.func(ctx)


@dataclass
class _Announcing:
    name: str
    inner: object

    def handle(self, ctx):
        print(self.name)
        return self.inner.handle(ctx)


def handle_with_middleware(handler, *args):
    """Wrap ``handler`` so the first middleware given runs first."""
    for middleware in reversed(args):
        handler = middleware(handler)
    return handler


def new_a():
    """Middleware that prints "A" before passing on."""
    return lambda handler: _Announcing("A", handler)


def new_b():
    """Middleware that prints "B" before passing on."""
    return lambda handler: _Announcing("B", handler)


def new_handler():
    """Handler that prints "HHH" and returns that text."""

    def _handle(ctx):
        text = "HHH"
        print(text)
        return text

    return HandlerFunc(_handle)