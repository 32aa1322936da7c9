from dataclasses import dataclass


@dataclass(frozen=True)
class Attempt:
    # 1-based ordinal as sent by the client; not checked against position
    number: int
    milestone: bool = False
    top: bool = False
