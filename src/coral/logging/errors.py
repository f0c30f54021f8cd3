class LoggingError(Exception):
    pass


class InvalidLogLevelError(LoggingError, ValueError):
    def __init__(self, value, accepted):
        self.value = value
        self.accepted = tuple(accepted)
        super().__init__(
            f"Unknown log level: {value!r} (expected one of {', '.join(self.accepted)})"
        )
