# utils/heatmap.py
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional

from models.progress import ProgressIndex
from models.task import Task
from utils.dates import DateLike, parse_date, trailing_days
from utils.stats import Stats, daily_stats

HEATMAP_DAYS = 365

# (minimum rate, level); checked in order, each match can only raise the level
LEVEL_THRESHOLDS = ((25, 2), (50, 3), (75, 4))


@dataclass(frozen=True)
class HeatmapDay:
    date: str
    count: int
    level: int


def heatmap_level(stats: Stats) -> int:
    level = 0
    if stats.total > 0:
        rate = stats.rate
        if rate > 0:
            level = 1
        for threshold, lvl in LEVEL_THRESHOLDS:
            if rate >= threshold:
                level = lvl
        if rate == 100:
            level = 5
    return level


def heatmap(tasks: Iterable[Task], progress=(), reference_date: Optional[DateLike] = None) -> List[HeatmapDay]:
    """One entry per day for the trailing year ending at `reference_date`, oldest first."""
    tasks = list(tasks)
    index = ProgressIndex.of(progress)
    end = parse_date(reference_date) if reference_date is not None else date.today()
    out = []
    for d in trailing_days(end, HEATMAP_DAYS):
        s = daily_stats(d, tasks, index)
        out.append(HeatmapDay(date=d.isoformat(), count=s.completed, level=heatmap_level(s)))
    return out
