"""Handlers for IP address, network and interface fields.

Importing this module registers the `ipaddress` types. Address fields also
accept CIDR notation, in which case the prefix length is discarded.
"""

from __future__ import annotations

from collections.abc import Callable
import ipaddress

from .registry import register_type
from .validate import validate_single_value, validate_value_limit


_ANY_ADDRESS = "ipaddress.IPv4Address | ipaddress.IPv6Address"
_ANY_NETWORK = "ipaddress.IPv4Network | ipaddress.IPv6Network"


def parse_address(
    text: str,
    factory: Callable[[str], ipaddress.IPv4Address | ipaddress.IPv6Address] = ipaddress.ip_address,
) -> ipaddress.IPv4Address | ipaddress.IPv6Address:
    """Parse an address, accepting and discarding a CIDR prefix length."""

    if "/" in text:
        return factory(str(ipaddress.ip_interface(text).ip))
    return factory(text)


def _address_handler(
    factory: Callable[[str], ipaddress.IPv4Address | ipaddress.IPv6Address],
) -> Callable[[list[str]], object]:
    def _handle(values: list[str]) -> object:
        return parse_address(values[0], factory)

    return _handle


def _address_list_handler(
    factory: Callable[[str], ipaddress.IPv4Address | ipaddress.IPv6Address],
) -> Callable[[list[str]], object]:
    def _handle(values: list[str]) -> object:
        return [parse_address(value, factory) for value in values]

    return _handle


def _single(factory: Callable[[str], object]) -> Callable[[list[str]], object]:
    def _handle(values: list[str]) -> object:
        return factory(values[0])

    return _handle


def _each(factory: Callable[[str], object]) -> Callable[[list[str]], object]:
    def _handle(values: list[str]) -> object:
        return [factory(value) for value in values]

    return _handle


def register() -> None:
    """Register the `ipaddress` handlers."""

    addresses: dict[str, Callable[[str], ipaddress.IPv4Address | ipaddress.IPv6Address]] = {
        "ipaddress.IPv4Address": ipaddress.IPv4Address,
        "ipaddress.IPv6Address": ipaddress.IPv6Address,
        _ANY_ADDRESS: ipaddress.ip_address,
    }
    for descriptor, factory in addresses.items():
        register_type(descriptor, validate_single_value(), _address_handler(factory))
        register_type(
            f"list[{descriptor}]",
            validate_value_limit(1, 0),
            _address_list_handler(factory),
        )

    others: dict[str, Callable[[str], object]] = {
        "ipaddress.IPv4Network": ipaddress.IPv4Network,
        "ipaddress.IPv6Network": ipaddress.IPv6Network,
        _ANY_NETWORK: ipaddress.ip_network,
        "ipaddress.IPv4Interface": ipaddress.IPv4Interface,
        "ipaddress.IPv6Interface": ipaddress.IPv6Interface,
    }
    for descriptor, factory in others.items():
        register_type(descriptor, validate_single_value(), _single(factory))
        register_type(f"list[{descriptor}]", validate_value_limit(1, 0), _each(factory))


register()
