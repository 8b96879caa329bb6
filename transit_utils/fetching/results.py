from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union


class LookupFailure(str, Enum):
    TRANSPORT = "transport"
    STATUS = "status"
    EMPTY = "empty"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class LookupHit:
    response: Any


@dataclass(frozen=True)
class LookupMiss:
    failure: LookupFailure
    detail: str
    # Raw provider body when one was received, for error translation.
    payload: Optional[dict] = None


LookupResult = Union[LookupHit, LookupMiss]
