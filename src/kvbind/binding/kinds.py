"""
Sized integer annotations for bindable dataclass fields.

Plain `int` binds as an unbounded signed integer. The aliases below attach
an IntRange marker through typing.Annotated so the binder can range check:

    @dataclass
    class Server:
        port: UInt16 = 0
        retries: Int8 = 3
"""

from dataclasses import dataclass
from typing import Annotated, Optional, Tuple


@dataclass(frozen=True)
class IntRange:
    signed: bool
    bits: Optional[int] = None

    def bounds(self) -> Tuple[Optional[int], Optional[int]]:
        """Inclusive (low, high); None means unbounded on that side."""
        if self.signed:
            if self.bits is None:
                return None, None
            half = 1 << (self.bits - 1)
            return -half, half - 1
        if self.bits is None:
            return 0, None
        return 0, (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        low, high = self.bounds()
        if low is not None and value < low:
            return False
        if high is not None and value > high:
            return False
        return True


Int8 = Annotated[int, IntRange(signed=True, bits=8)]
Int16 = Annotated[int, IntRange(signed=True, bits=16)]
Int32 = Annotated[int, IntRange(signed=True, bits=32)]
Int64 = Annotated[int, IntRange(signed=True, bits=64)]

UInt = Annotated[int, IntRange(signed=False)]
UInt8 = Annotated[int, IntRange(signed=False, bits=8)]
UInt16 = Annotated[int, IntRange(signed=False, bits=16)]
UInt32 = Annotated[int, IntRange(signed=False, bits=32)]
UInt64 = Annotated[int, IntRange(signed=False, bits=64)]
