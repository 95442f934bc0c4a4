class SecretError(Exception):
    """Base class for every failure raised while generating or storing a secret."""


class NoHardwareIdentifier(SecretError):
    def __init__(self, message="No MAC address found on this system"):
        super().__init__(message)


class EnvFileAccessError(SecretError):
    """
    Reading, decoding or writing the env file failed. The originating error
    is kept on `error` and chained as the cause.
    """

    def __init__(self, path, error):
        self.path = path
        self.error = error
        super().__init__(f"Failed to access env file {path}: {error}")


class InvalidFormat(SecretError):
    def __init__(self, message="Invalid secret format: expected 192 hexadecimal characters"):
        super().__init__(message)
