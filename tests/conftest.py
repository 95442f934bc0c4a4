from __future__ import annotations

from collections import namedtuple

import psutil
import pytest

from key_deriver import KeyDeriver
from secret_generator import SecretGenerator

FAST_ITERATIONS = 1000
FIXED_ENTROPY = b"AA:BB:CC:DD:EE:FF" + b"1700000000000000000:1700000000000000" + b"\x01" * 8 + b"\x02" * 32 + b"testhost"

IfAddr = namedtuple("IfAddr", ["family", "address", "netmask", "broadcast", "ptp"])


class FixedEntropyCollector:
    """Returns the same entropy on every call."""

    def __init__(self, entropy=FIXED_ENTROPY):
        self.entropy = entropy
        self.calls = 0

    def collect(self):
        self.calls += 1
        return self.entropy


def link_addr(mac: str) -> IfAddr:
    return IfAddr(psutil.AF_LINK, mac, None, None, None)


@pytest.fixture()
def fast_deriver() -> KeyDeriver:
    return KeyDeriver(iterations=FAST_ITERATIONS)


@pytest.fixture()
def fake_interfaces(monkeypatch: pytest.MonkeyPatch):
    """Replace psutil interface enumeration with a fixed table."""

    def apply(table: dict[str, list[IfAddr]]) -> None:
        monkeypatch.setattr(psutil, "net_if_addrs", lambda: table)

    apply({
        "lo": [link_addr("00:00:00:00:00:00")],
        "eth0": [link_addr("02:42:ac:11:00:02")],
    })
    return apply


@pytest.fixture()
def fast_generator(fake_interfaces, fast_deriver) -> SecretGenerator:
    return SecretGenerator(deriver=fast_deriver)
