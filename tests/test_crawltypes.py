from demokit.crawltypes import Profile, Request, Result


def test_result_defaults_are_empty():
    result = Result()
    assert result.requests == []
    assert result.profile == Profile()
    assert result.profile.data is None


def test_result_lists_are_independent():
    first = Result()
    second = Result()
    first.requests.append(Request("http://localhost/a", "user"))
    assert second.requests == []
    assert len(first.requests) == 1


def test_requests_compare_by_value():
    a = Request("http://localhost/a", "cityUser")
    b = Request("http://localhost/a", "cityUser")
    c = Request("http://localhost/a", "user")
    assert a == b
    assert a != c
    assert len({a, b, c}) == 2


def test_profile_holds_its_data():
    profile = Profile("42", {"name": "x"})
    assert profile.id == "42"
    assert profile.data == {"name": "x"}