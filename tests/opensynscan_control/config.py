from opensynscan_control import Settings

HOST = "127.0.0.1"
SLEEP = 0.2


class FakeClock:
    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def make_settings(command_port: int = 0, discovery_port: int = 0) -> Settings:
    settings = Settings()
    settings.set("ports", {"command": command_port, "discovery": discovery_port})
    settings.set("bind_address", HOST)
    settings.set("broadcast_address", HOST)
    settings.set("receive_timeout_ms", 50)
    return settings
