"""Behavioural patterns: command, iterator, observer and strategy."""

from dataclasses import dataclass, field


class Light:
    """A light that can be switched."""

    def on(self):
        text = "light on"
        print(text)
        return text

    def off(self):
        text = "light off"
        print(text)
        return text


@dataclass
class LightOnCommand:
    """Switches its light on."""

    light: Light = field(default_factory=Light)

    def execute(self):
        return self.light.on()


@dataclass
class LightOffCommand:
    """Switches its light off."""

    light: Light = field(default_factory=Light)

    def execute(self):
        return self.light.off()


class Controller:
    """Runs whichever command was set last."""

    def __init__(self):
        self._command = None

    def set_command(self, command):
        self._command = command

    def call(self):
        if self._command is None:
            raise RuntimeError("no command set")
        return self._command.execute()


@dataclass(frozen=True)
class Numbers:
    """The integers from ``start`` to ``end`` inclusive."""

    start: int
    end: int

    def __iter__(self):
        yield from range(self.start, self.end + 1)


def iterator_print(numbers):
    """Print every item of ``numbers`` on its own line."""
    for item in numbers:
        print(repr(item))


class Subject:
    """Holds a context and tells its observers whenever it changes."""

    def __init__(self):
        self.observers = []
        self.context = ""

    def attach(self, *args):
        self.observers.extend(args)

    def update_context(self, context):
        self.context = context
        for observer in self.observers:
            observer.update(self)


@dataclass
class Reader:
    """An observer that reports what it receives."""

    name: str

    def update(self, subject):
        text = f"{self.name} receive {subject.context}"
        print(text)
        return text


@dataclass
class PaymentContext:
    """A payment to be made with a chosen strategy."""

    name: str
    card_id: str
    money: int
    payment: object

    def pay(self):
        return self.payment.pay(self)


class Cash:
    """Pay in cash."""

    def pay(self, ctx):
        text = f"Pay ${ctx.money} to {ctx.name} by cash"
        print(text)
        return text


class Bank:
    """Pay from a bank account."""

    def pay(self, ctx):
        text = f"Pay ${ctx.money} to {ctx.name} by bank account {ctx.card_id}"
        print(text)
        return text