"""Снимки состояния таблицы на разных уровнях заполнения."""

import sys
import numpy as np
from dataclasses import dataclass
from typing import List, Optional, TextIO
from hash_table import HashTable, STRATEGY_NAMES

DEFAULT_SNAPSHOTS = 10

RULE = "-" * 54


@dataclass
class Snapshot:
    percent_full: int
    current_entries: int
    at_home: float  # % слов без коллизий
    average_collisions: float
    max_collisions: int

    def format(self) -> str:
        return (f"{self.percent_full:4d} {self.current_entries:10d} "
                f"{self.at_home:11.1f} {self.average_collisions:10.2f} "
                f"{self.max_collisions:11d}")


def snapshot_at(table: HashTable, percent_full: int) -> Optional[Snapshot]:
    """Статистика по первым capacity * percent_full / 100 вставкам.

    Если столько слов еще не вставлено (или получается 0), возвращает None.
    """
    current_entries = table.capacity * percent_full // 100
    if not 0 < current_entries <= table.num_keys:
        return None
    costs = table.stats[:current_entries]
    return Snapshot(
        percent_full=percent_full,
        current_entries=current_entries,
        at_home=np.count_nonzero(costs == 0) * 100.0 / current_entries,
        average_collisions=float(np.sum(costs)) / current_entries,
        max_collisions=int(np.max(costs)),
    )


def take_snapshots(table: HashTable, num_stats: int = DEFAULT_SNAPSHOTS) -> List[Snapshot]:
    """Снимки для i = 1..num_stats, растущие префиксы журнала."""
    if num_stats < 1:
        raise ValueError("Need at least one snapshot")
    result = []
    for i in range(1, num_stats + 1):
        snap = snapshot_at(table, 100 * i // num_stats)
        if snap is not None:
            result.append(snap)
    return result


def print_stats(table: HashTable, stream: Optional[TextIO] = None,
                num_stats: int = DEFAULT_SNAPSHOTS) -> None:
    if stream is None:
        stream = sys.stdout
    print(f"\n{STRATEGY_NAMES[table.strategy]}\n", file=stream)
    print("Percent   Current    Percent    Average      Maximum", file=stream)
    print(" Full     Entries    At Home   Collisions   Collisions", file=stream)
    print(RULE, file=stream)
    for snap in take_snapshots(table, num_stats):
        print(snap.format(), file=stream)
    print(RULE, file=stream)
    print(file=stream)
