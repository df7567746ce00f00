from opensynscan_helper.custom_types import (
  Address,
  DatagramFromAddress,
)
from opensynscan_helper.exceptions import (
  InvalidValueError,
  NotConnectedError,
  SessionStartError,
)

__all__ = [
  "Address",
  "DatagramFromAddress",
  "InvalidValueError",
  "NotConnectedError",
  "SessionStartError",
]
