"""Unit tests for the optional regexp, ipaddress and bignum handlers."""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
import ipaddress
import re

import pytest

from sconfig.handlers import bignum, lookup_type_handler, net, regexp


@pytest.fixture(autouse=True)
def _register_plugins() -> None:
    """Register the plugin handlers again after the registry reset of a previous test."""

    regexp.register()
    net.register()
    bignum.register()


def test_regexp_handlers_compile_patterns() -> None:
    """Pattern fields should hold compiled expressions."""

    pattern = lookup_type_handler("re.Pattern")(["^foo.+"])  # type: ignore[misc]
    patterns = lookup_type_handler("list[re.Pattern]")(["^foo.+", "^b[ao]r"])  # type: ignore[misc]

    assert pattern.pattern == "^foo.+"
    assert [item.pattern for item in patterns] == ["^foo.+", "^b[ao]r"]
    assert patterns[1].match("bar")


def test_regexp_handler_surfaces_compile_errors() -> None:
    """Invalid patterns should raise the compiler's error."""

    with pytest.raises(re.error):
        regexp.handle_pattern(["(unclosed"])


def test_address_handlers_accept_plain_and_cidr_notation() -> None:
    """Address fields should accept an address or an address with prefix length."""

    any_address = lookup_type_handler("ipaddress.IPv4Address | ipaddress.IPv6Address")

    assert any_address(["10.0.0.1"]) == ipaddress.IPv4Address("10.0.0.1")  # type: ignore[misc]
    assert any_address(["10.0.0.1/24"]) == ipaddress.IPv4Address("10.0.0.1")  # type: ignore[misc]
    assert any_address(["::1"]) == ipaddress.IPv6Address("::1")  # type: ignore[misc]
    assert lookup_type_handler("list[ipaddress.IPv4Address]")(  # type: ignore[misc]
        ["10.0.0.1", "10.0.0.2"]
    ) == [ipaddress.IPv4Address("10.0.0.1"), ipaddress.IPv4Address("10.0.0.2")]


def test_address_handler_rejects_invalid_addresses() -> None:
    """Malformed addresses should raise `ValueError`."""

    with pytest.raises(ValueError):
        lookup_type_handler("ipaddress.IPv4Address")(["not-an-ip"])  # type: ignore[misc]
    with pytest.raises(ValueError):
        lookup_type_handler("ipaddress.IPv4Address")(["::1"])  # type: ignore[misc]


def test_network_handlers() -> None:
    """Network fields should parse CIDR blocks."""

    network = lookup_type_handler("ipaddress.IPv4Network")(["192.168.0.0/16"])  # type: ignore[misc]

    assert network == ipaddress.IPv4Network("192.168.0.0/16")


def test_bignum_handlers() -> None:
    """Decimal and fraction fields should keep exact values."""

    assert lookup_type_handler("decimal.Decimal")(["0.1"]) == Decimal("0.1")  # type: ignore[misc]
    assert lookup_type_handler("fractions.Fraction")(["1/3"]) == Fraction(1, 3)  # type: ignore[misc]


@pytest.mark.parametrize(
    ("handler", "message"),
    [
        (bignum.handle_decimal, "unable to convert nope to Decimal"),
        (bignum.handle_fraction, "unable to convert nope to Fraction"),
    ],
)
def test_bignum_handlers_reject_invalid_numbers(handler, message: str) -> None:  # type: ignore[no-untyped-def]
    """Invalid numbers should raise a descriptive `ValueError`."""

    with pytest.raises(ValueError, match=message):
        handler(["nope"])
