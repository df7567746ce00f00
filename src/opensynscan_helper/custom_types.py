from typing import NamedTuple

Address = tuple[str, int]


class DatagramFromAddress(NamedTuple):
    data: bytes
    address: Address
