from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterator

DAYS_IN_WEEK = 7
SUNDAY = 6  # date.weekday() value


@dataclass(frozen=True)
class WeekWindow:
    days: tuple[date, ...]

    def __post_init__(self) -> None:
        if len(self.days) != DAYS_IN_WEEK:
            raise ValueError(f"A week window needs {DAYS_IN_WEEK} days, got {len(self.days)}")
        if self.days[0].weekday() != SUNDAY:
            raise ValueError(f"A week window starts on Sunday, got {self.days[0].isoformat()}")

    @property
    def start(self) -> date:
        return self.days[0]

    @property
    def end(self) -> date:
        return self.days[-1]

    def __iter__(self) -> Iterator[date]:
        return iter(self.days)

    def __len__(self) -> int:
        return len(self.days)

    def __getitem__(self, index: int) -> date:
        return self.days[index]

    def __contains__(self, day: object) -> bool:
        return day in self.days

    def isoformat(self) -> list[str]:
        return [d.isoformat() for d in self.days]
