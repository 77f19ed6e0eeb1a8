"""Creational patterns: simple factory, factory method, abstract factory,
singleton and a copy-on-add builder."""

import threading
from dataclasses import dataclass, field


class SayHi:
    """Greets with "Hi"."""

    def say(self, name):
        text = f"Hi, {name}"
        print(text)
        return text


class SayHello:
    """Greets with "Hello"."""

    def say(self, name):
        text = f"Hello, {name}"
        print(text)
        return text


_APIS = {1: SayHi, 2: SayHello}


def new_api(kind):
    """Build the greeter for ``kind`` (1 or 2); ``None`` for any other kind."""
    api_class = _APIS.get(kind)
    return api_class() if api_class is not None else None


class OperatorAdd:
    """Adds its operands."""

    def result(self, a, b):
        return a + b


class OperatorMinus:
    """Subtracts the second operand from the first."""

    def result(self, a, b):
        return a - b


class OperatorAddFactory:
    """Makes addition operators."""

    def create(self):
        return OperatorAdd()


class OperatorMinusFactory:
    """Makes subtraction operators."""

    def create(self):
        return OperatorMinus()


@dataclass(frozen=True)
class ThemeItem:
    """One element of a theme, announcing itself when used."""

    description: str

    def use(self):
        print(self.description)
        return self.description


class ThemeFactory:
    """Makes the desktop, icon and font of one theme."""

    theme = ""

    def create_desktop(self):
        return ThemeItem(f"{self.theme} desktop")

    def create_icon(self):
        return ThemeItem(f"{self.theme} icon")

    def create_font(self):
        return ThemeItem(f"{self.theme} font")


class RedThemeFactory(ThemeFactory):
    """The red theme."""

    theme = "red"


class BlackThemeFactory(ThemeFactory):
    """The black theme."""

    theme = "black"


class Singleton:
    """The class of which :func:`get_instance` hands out one object."""


_instance = None
_instance_lock = threading.Lock()


def get_instance():
    """Return the one shared :class:`Singleton`, creating it on first use."""
    global _instance
    if _instance is None:
        with _instance_lock:
            if _instance is None:
                _instance = Singleton()
    return _instance


@dataclass(frozen=True)
class DefInfo:
    """A key and the scope it is tracked under."""

    key: str
    scope: int


@dataclass(frozen=True)
class Container:
    """Tracked keys; each addition yields a new container and leaves this one as is."""

    tracked: dict = field(default_factory=dict)

    def builder(self, info):
        return Container({**self.tracked, info.key: info.scope})