import dataclasses

import pytest

from netgw import AddressFamily, NetworkDefaultGateway, PrefixLengthNotValidError
from netgw.core.types import validate_prefix_length


def test_result_is_immutable():
    gateway = NetworkDefaultGateway("192.168.1.15", "192.168.1.1", "eth0", 24)

    with pytest.raises(dataclasses.FrozenInstanceError):
        gateway.ip = "10.0.0.1"


@pytest.mark.parametrize(
    "value,family,expected",
    [
        (0, AddressFamily.IPV4, 0),
        (32, AddressFamily.IPV4, 32),
        ("24", AddressFamily.IPV4, 24),
        (128, AddressFamily.IPV6, 128),
        ("64", AddressFamily.IPV6, 64),
    ],
)
def test_prefix_length_in_range(value, family, expected):
    assert validate_prefix_length(value, family) == expected


@pytest.mark.parametrize(
    "value,family",
    [
        (33, AddressFamily.IPV4),
        (-1, AddressFamily.IPV4),
        (129, AddressFamily.IPV6),
        (None, AddressFamily.IPV4),
        ("abc", AddressFamily.IPV6),
        (24.5, AddressFamily.IPV4),
        (True, AddressFamily.IPV4),
    ],
)
def test_prefix_length_out_of_range(value, family):
    with pytest.raises(PrefixLengthNotValidError):
        validate_prefix_length(value, family)
