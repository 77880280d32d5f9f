from typing import NamedTuple, TypedDict


class Endpoint(NamedTuple):
    host: str
    port: int
    is_secure: bool = False


class Stamp(TypedDict):
    sec: int
    nanosec: int


Vector3 = tuple[float, float, float]
