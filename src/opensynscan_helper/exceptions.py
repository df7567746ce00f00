class SessionStartError(Exception):
    """Raised when the session sockets can not be bound."""
    def __init__(self, port: int, reason: Exception):
        self.port = port
        self.reason = reason
        super().__init__(f"Could not bind UDP port {port}: {reason}")


class NotConnectedError(Exception):
    pass


class InvalidValueError(ValueError):
    pass
