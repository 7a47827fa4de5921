import pytest

from setcookie.normalization import is_valid_cookie_name, normalize_domain


@pytest.mark.parametrize(
    "value,expected_result",
    [
        ("example.com", ".example.com"),
        (".example.com", ".example.com"),
        ("www.example.com", ".www.example.com"),
        ("localhost", None),
        (".localhost", None),
        ("127.0.0.1", None),
        ("::1", None),
        ("2001:db8::1", None),
        ("", None),
        (None, None),
    ],
)
def test_normalize_domain(value, expected_result):
    assert normalize_domain(value) == expected_result


@pytest.mark.parametrize(
    "name,reject_empty,expected_result",
    [
        ("id", True, True),
        ("__Host-id", True, True),
        ("1P_JAR", True, True),
        ("", True, False),
        ("", False, True),
        ("a b", True, False),
        ("a=b", False, False),
        ("a;b", True, False),
        ("a,b", True, False),
        ("a\x0bb", True, False),
        (None, False, False),
    ],
)
def test_is_valid_cookie_name(name, reject_empty, expected_result):
    assert is_valid_cookie_name(name, reject_empty) is expected_result
