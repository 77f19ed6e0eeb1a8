"""Shared types and settings for the crawler."""

from dataclasses import dataclass, field

WORKER_COUNT = 10
ELASTIC_INDEX = "zhenai"


@dataclass(frozen=True)
class Request:
    """A page to fetch and the name of the parser that understands it."""

    url: str
    parser_name: str


@dataclass
class Profile:
    """An item extracted from a page; ``data`` is ``None`` when there is none."""

    id: str = ""
    data: object = None


@dataclass
class Result:
    """What parsing one page produced: further requests and possibly a profile."""

    requests: list = field(default_factory=list)
    profile: Profile = field(default_factory=Profile)