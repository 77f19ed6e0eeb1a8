"""Parsers for the city list, city user and user pages of the dating site."""

import re
from dataclasses import dataclass

from demokit.crawltypes import Profile, Request, Result

_CITY_LIST = re.compile(r'href="(.*www\.zhenai\.com/zhenghun/[0-9a-z]+)"')
_CITY_USER = re.compile(r'<a href="(.*album.zhenai\.com/u/[0-9]+)">([^<]+)</a>')
_NEXT_PAGE = re.compile(r'<a href="(.*www.zhenai\.com/zhenghun/[0-9a-z]+/[0-9]+)">')
_NAME = re.compile(r'<h1 class="ceiling-name ib fl fs24 lh32 blue">([^>]+)</h1>')
_ID = re.compile(r".*album\.zhenai\.com/u/([0-9]+)")
_AGE = re.compile(r'<td><span class="label">年龄：</span>([^>]+)</td>')
_GENDER = re.compile(r'<td><span class="label">性别：</span><span field="">([^>]+)</span></td>')


def _text(data):
    return data.decode("utf-8", errors="replace") if isinstance(data, (bytes, bytearray)) else data


@dataclass(frozen=True)
class User:
    """A user profile read from a user page."""

    url: str
    name: str
    age: str
    gender: str


def parse_city_list(text, url=""):
    """Every city page linked from the city list."""
    return Result(
        requests=[Request(m.group(1), "cityUser") for m in _CITY_LIST.finditer(_text(text))]
    )


def parse_city_user(text, url=""):
    """The user pages and further city pages linked from a city page."""
    html = _text(text)
    requests = [Request(m.group(1), "user") for m in _CITY_USER.finditer(html)]
    requests += [Request(m.group(1), "cityUser") for m in _NEXT_PAGE.finditer(html)]
    return Result(requests=requests)


def _first(pattern, text, what):
    match = pattern.search(text)
    if match is None:
        raise ValueError(f"no {what} found")
    return match.group(1)


def parse_user(text, url):
    """The profile on a user page; raise ValueError if a field is missing."""
    html = _text(text)
    user = User(
        url=url,
        name=_first(_NAME, html, "name"),
        age=_first(_AGE, html, "age"),
        gender=_first(_GENDER, html, "gender"),
    )
    return Result(profile=Profile(_first(_ID, url, "user id in url"), user))


PARSERS = {
    "cityList": parse_city_list,
    "cityUser": parse_city_user,
    "user": parse_user,
}