import time
import logging

from Crypto.Hash import SHA256, SHA512, SHA3_512
from Crypto.Protocol.KDF import PBKDF2
from Crypto.Random import get_random_bytes

PBKDF2_ITERATIONS = 1_000_000
SALT_SIZE = 64
LAYER_SIZE = 128
OUTPUT_SIZE = 96


class KeyDeriver:
    """
    Two-layer PBKDF2 stretch followed by a SHA3-512 widening step.

    Layer 1 runs PBKDF2-HMAC-SHA512 over the entropy with salt1, layer 2 runs
    PBKDF2-HMAC-SHA256 over layer 1 with salt2 at half the iterations. The
    96-byte output is SHA3-512(layer1 || layer2) followed by the first 32 bytes
    of SHA3-512(hash_a || salt1 || salt2).

    Iteration counts, hash choices and slice bounds determine the output.
    Changing any of them yields a different secret for identical inputs.
    """

    def __init__(self, iterations=PBKDF2_ITERATIONS):
        self.iterations = iterations

    def generate_salt(self):
        return get_random_bytes(SALT_SIZE)

    def derive(self, entropy, salt1, salt2):
        started = time.perf_counter()

        layer1 = PBKDF2(entropy, salt1, dkLen=LAYER_SIZE, count=self.iterations,
                        hmac_hash_module=SHA512)
        layer2 = PBKDF2(layer1, salt2, dkLen=LAYER_SIZE, count=self.iterations // 2,
                        hmac_hash_module=SHA256)

        hash_a = SHA3_512.new(layer1 + layer2).digest()

        h = SHA3_512.new(hash_a)
        h.update(salt1)
        h.update(salt2)
        hash_b = h.digest()

        output = hash_a[:64] + hash_b[:32]
        logging.debug(f"[KeyDeriver] Derived {len(output)} bytes in "
                      f"{time.perf_counter() - started:.2f}s ({self.iterations} iterations)")
        return output
