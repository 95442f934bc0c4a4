import logging
from pathlib import Path

from errors import EnvFileAccessError
from settings import ENV_FILE_PATH, SECRET_KEY_NAME


class EnvFileWriter:
    """
    Upsert a single KEY=VALUE line in a line-oriented env file.

    The first line starting with `KEY=` is replaced; if there is none, the
    entry is appended after a blank separator line. All other lines are
    kept verbatim and in order. The file is rewritten in full on every
    call, without locking: concurrent writers race and the last one wins.
    """

    def __init__(self, path, key_name):
        self._path = Path(path)
        self._key_name = key_name

    @classmethod
    def with_default_path(cls):
        return cls(ENV_FILE_PATH, SECRET_KEY_NAME)

    @property
    def path(self):
        return self._path

    @property
    def key_name(self):
        return self._key_name

    def write(self, secret):
        try:
            self._ensure_file_exists()
            lines = self._read_lines()
            updated = self.update_lines(lines, str(secret))
            self._write_lines(updated)
        except (OSError, UnicodeDecodeError) as e:
            raise EnvFileAccessError(self._path, e) from e
        logging.info(f"[EnvFileWriter] Stored {self._key_name} in {self._path}")

    def update_lines(self, lines, value):
        """Return a copy of `lines` with the key set to `value`."""
        lines = list(lines)
        prefix = f"{self._key_name}="
        entry = f"{prefix}{value}"

        matches = [i for i, line in enumerate(lines) if line.startswith(prefix)]
        if len(matches) > 1:
            logging.warning(f"[EnvFileWriter] {self._path} has {len(matches)} lines for "
                            f"{self._key_name}; only the first is updated")

        if matches:
            lines[matches[0]] = entry
            return lines

        if lines and lines[-1] != "":
            lines.append("")
        lines.append(entry)
        return lines

    def _ensure_file_exists(self):
        if not self._path.exists():
            logging.info(f"[EnvFileWriter] Creating {self._path}")
            self._path.touch()

    def _read_lines(self):
        with open(self._path, "r", encoding="utf-8", newline="") as f:
            content = f.read()
        if not content:
            return []
        lines = content.split("\n")
        if content.endswith("\n"):
            lines.pop()
        return [line[:-1] if line.endswith("\r") else line for line in lines]

    def _write_lines(self, lines):
        with open(self._path, "w", encoding="utf-8", newline="") as f:
            for line in lines:
                f.write(line + "\n")
