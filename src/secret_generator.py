import logging

from entropy_collector import EntropyCollector
from key_deriver import KeyDeriver
from secret import AppSecret


class SecretGenerator:
    """
    Collect entropy, salt it twice and derive a 192-character hex secret.
    Touches no persistent storage.
    """

    def __init__(self, collector=None, deriver=None):
        self.collector = collector or EntropyCollector()
        self.deriver = deriver or KeyDeriver()

    def generate(self):
        entropy = self.collector.collect()
        salt1 = self.deriver.generate_salt()
        salt2 = self.deriver.generate_salt()

        logging.info("[SecretGenerator] Deriving secret, this can take a few seconds...")
        secret_bytes = self.deriver.derive(entropy, salt1, salt2)
        return AppSecret.unchecked(secret_bytes.hex())
