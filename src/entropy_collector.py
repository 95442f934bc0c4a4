import os
import time
import socket
import logging

import psutil
from Crypto.Random import get_random_bytes

from errors import NoHardwareIdentifier

RANDOM_BYTES = 32
UNKNOWN_HOST = "unknown"
ZERO_MAC = "00:00:00:00:00:00"


class EntropyCollector:
    """
    Gather machine and process specific bytes for key derivation.

    Fields are concatenated in a fixed order: hardware id, timestamp,
    process id, random bytes, hostname. The hardware id is mandatory;
    a missing one is a NoHardwareIdentifier, never a silent fallback.
    """

    def collect(self):
        entropy = bytearray()
        entropy.extend(self.hardware_id().encode("utf-8"))
        entropy.extend(self.timestamp().encode("utf-8"))
        entropy.extend(self.process_id())
        entropy.extend(self.random_bytes())
        entropy.extend(self.hostname().encode("utf-8"))
        logging.debug(f"[EntropyCollector] Collected {len(entropy)} bytes of entropy")
        return bytes(entropy)

    def hardware_id(self):
        try:
            interfaces = psutil.net_if_addrs()
        except OSError as e:
            raise NoHardwareIdentifier() from e

        for name, addrs in interfaces.items():
            for addr in addrs:
                if addr.family != psutil.AF_LINK:
                    continue
                mac = _normalize_mac(addr.address)
                if mac is None or mac == ZERO_MAC:
                    continue
                logging.debug(f"[EntropyCollector] Using hardware address of interface {name}")
                return mac
        raise NoHardwareIdentifier()

    def timestamp(self):
        now_ns = time.time_ns()
        return f"{now_ns}:{now_ns // 1000}"

    def process_id(self):
        # Repeat the 4-byte pid instead of zero-padding to 8 bytes.
        pid = os.getpid() & 0xFFFFFFFF
        return pid.to_bytes(4, "little") * 2

    def random_bytes(self):
        return get_random_bytes(RANDOM_BYTES)

    def hostname(self):
        try:
            name = socket.gethostname()
        except OSError:
            logging.warning("[EntropyCollector] Could not read hostname, using placeholder")
            return UNKNOWN_HOST
        return name or UNKNOWN_HOST


def _normalize_mac(address):
    """Render a link-layer address as AA:BB:CC:DD:EE:FF, or None if it is not a 6-octet MAC."""
    if not address:
        return None
    octets = address.replace("-", ":").split(":")
    if len(octets) != 6:
        return None
    try:
        values = [int(o, 16) for o in octets]
    except ValueError:
        return None
    if any(v > 0xFF for v in values):
        return None
    return ":".join(f"{v:02X}" for v in values)
