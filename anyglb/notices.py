"""
Structured processing notices

A notice code is a 5-digit int: the first digit is the severity tier
(1 debug, 2 info, 3 warning, 4 error), the rest is a stable identifier for
the event. Downstream tooling matches on these codes, so never renumber.
"""

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)


class Tier(IntEnum):
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4


class NoticeCode(IntEnum):
    """Fixed codes for every event the pipeline reports"""
    READING = 1_4481
    CONVERTING = 1_5118
    WRITING = 1_9158
    CONVERTED = 2_7345
    WROTE = 2_6152
    READ_FAILED = 4_8172
    CONVERT_FAILED = 4_9480
    WRITE_FAILED = 4_1510

    @property
    def tier(self) -> Tier:
        return Tier(self.value // 10_000)


_LOG_LEVELS = {
    Tier.DEBUG: logging.DEBUG,
    Tier.INFO: logging.INFO,
    Tier.WARNING: logging.WARNING,
    Tier.ERROR: logging.ERROR,
}


@dataclass(frozen=True)
class Notice:
    """A single structured notice"""
    code: int
    message: str
    detail: Optional[str] = None

    @property
    def tier(self) -> int:
        return self.code // 10_000

    @property
    def label(self) -> str:
        """Code rendered as '<tier>_<id>', e.g. '2_6152'"""
        c = str(self.code)
        return f"{c[0]}_{c[1:]}"

    def to_dict(self) -> Dict[str, Any]:
        d = {"code": self.code, "message": self.message}
        if self.detail is not None:
            d["detail"] = self.detail
        return d

    def __str__(self) -> str:
        return f"{self.label}: {self.message}"


class NoticeLog:
    """
    Ordered, append-only list of notices for one conversion run.

    Notices below the configured notice level are dropped on record(), so
    a lower level gives a more verbose log. Error-tier notices are always
    kept.
    """

    def __init__(self, notice_level: int):
        self.notice_level = notice_level
        self._notices: List[Notice] = []

    def record(self, tier: int, code: int, message: str, detail: Optional[str] = None) -> None:
        """Append a notice if its tier meets the notice level"""
        logger.log(_LOG_LEVELS.get(tier, logging.INFO), f"[{code}] {message}" + (f": {detail}" if detail else ""))
        if tier < self.notice_level:
            return
        self._notices.append(Notice(code=code, message=message, detail=detail))

    def add(self, code: NoticeCode, message: str, detail: Optional[str] = None) -> None:
        """Record a notice whose tier comes from its code"""
        self.record(code.tier, int(code), message, detail)

    @property
    def notices(self) -> Tuple[Notice, ...]:
        return tuple(self._notices)

    @property
    def has_errors(self) -> bool:
        return any(n.tier == Tier.ERROR for n in self._notices)

    def __len__(self) -> int:
        return len(self._notices)

    def __iter__(self):
        return iter(self._notices)


@dataclass(frozen=True)
class PipelineResult:
    """
    Outcome of one conversion run.

    Attributes:
        did_succeed: True if no error-tier notice was recorded
        notices: Notices in the order they were recorded
    """
    did_succeed: bool
    notices: Tuple[Notice, ...] = field(default_factory=tuple)

    @property
    def codes(self) -> List[int]:
        return [n.code for n in self.notices]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "did_succeed": self.did_succeed,
            "notices": [n.to_dict() for n in self.notices],
        }
