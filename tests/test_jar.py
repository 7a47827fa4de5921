import pytest

from setcookie import HEADER_PREFIX, CookieJar, build_cookie_header


@pytest.mark.parametrize(
    "value,expected_values",
    [
        ("id=abc123", {"id": "abc123"}),
        ("id=abc123; theme=dark%20blue", {"id": "abc123", "theme": "dark blue"}),
        (b"id=abc123;theme=dark", {"id": "abc123", "theme": "dark"}),
        ("id=; flag; =orphan", {"id": ""}),
        ("NID=204=xyz", {"NID": "204=xyz"}),
        ("", {}),
        (None, {}),
    ],
)
def test_jar_from_header(value, expected_values):
    jar = CookieJar.from_header(value)

    assert {name: jar.get(name) for name in jar} == expected_values
    assert len(jar) == len(expected_values)


def test_jar_get():
    jar = CookieJar({"id": "abc123", "empty": None})

    assert jar.get("id") == "abc123"
    assert jar.get("missing") is None
    assert jar.get("missing", "default") == "default"
    assert jar.get("empty", "default") == "default"


def test_jar_exists():
    jar = CookieJar({"id": "abc123", "empty": None, "blank": ""})

    assert jar.exists("id") is True
    assert jar.exists("blank") is True
    assert jar.exists("empty") is False
    assert jar.exists("missing") is False
    assert "id" in jar
    assert "empty" not in jar


def test_jar_set_and_unset():
    jar = CookieJar()

    jar.set("id", "abc123")
    assert jar.get("id") == "abc123"

    jar.unset("id")
    assert jar.exists("id") is False

    jar.unset("missing")
    assert len(jar) == 0


def test_jars_are_independent():
    values = {"id": "abc123"}
    first = CookieJar(values)
    second = CookieJar(values)

    first.unset("id")

    assert second.get("id") == "abc123"
    assert values == {"id": "abc123"}
    assert repr(second) == "<CookieJar ['id']>"


@pytest.mark.parametrize(
    "name,value",
    [
        ("theme", "dark blue"),
        ("greeting", "Grüße, €100%"),
        ("token", "a+b=c&d"),
    ],
)
def test_jar_reads_values_written_by_set_cookie_headers(name, value):
    header = build_cookie_header(name, value)
    assert header is not None

    # clients send back only the name=value pair of the Set-Cookie header
    pair = header[len(HEADER_PREFIX) :]
    jar = CookieJar.from_header(pair)

    assert jar.get(name) == value
