from collections import namedtuple

import pytest

from netgw import DefaultInterfaceNotFoundError, NoAvailableNetworkError
from netgw.core.selector import lowest_metric, select_default

Candidate = namedtuple("Candidate", "name family state metric")


def pick(candidates, unusable_error=DefaultInterfaceNotFoundError):
    return select_default(
        candidates,
        in_family=lambda c: c.family == "inet",
        usable=lambda c: c.state == "UP",
        metric=lambda c: c.metric,
        unusable_error=unusable_error,
    )


def test_lowest_metric_regardless_of_order():
    a = Candidate("a", "inet", "UP", 10)
    b = Candidate("b", "inet", "UP", 5)

    assert pick([a, b]) is b
    assert pick([b, a]) is b


def test_ties_keep_first_encountered():
    a = Candidate("a", "inet", "UP", 5)
    b = Candidate("b", "inet", "UP", 5)

    assert pick([a, b]) is a
    assert pick([b, a]) is b


def test_unusable_never_selected():
    down = Candidate("down", "inet", "DOWN", 0)
    up = Candidate("up", "inet", "UP", 100)

    assert pick([down, up]) is up


def test_other_family_ignored():
    v6 = Candidate("v6", "inet6", "UP", 0)
    v4 = Candidate("v4", "inet", "UP", 100)

    assert pick([v6, v4]) is v4


def test_empty_family_filter():
    with pytest.raises(DefaultInterfaceNotFoundError):
        pick([Candidate("v6", "inet6", "UP", 0)], unusable_error=NoAvailableNetworkError)


def test_empty_state_filter_uses_platform_error():
    with pytest.raises(NoAvailableNetworkError):
        pick([Candidate("down", "inet", "DOWN", 0)], unusable_error=NoAvailableNetworkError)


def test_lowest_metric_of_nothing():
    with pytest.raises(DefaultInterfaceNotFoundError):
        lowest_metric([], metric=lambda c: c)
