"""Hash Table - открытая адресация со счетчиками частот слов."""

from enum import Enum, auto
from typing import Iterator, Optional, TextIO, Tuple
from dataclasses import dataclass
import sys
import numpy as np


class Strategy(Enum):
    LINEAR_P = auto()  # шаг всегда 1
    DOUBLE_H = auto()  # шаг = 1 + hash % (capacity - 1)


STRATEGY_NAMES = {
    Strategy.LINEAR_P: "Linear Probing",
    Strategy.DOUBLE_H: "Double Hashing",
}


class AllocationFailure(MemoryError):
    """Не удалось выделить память под таблицу."""


@dataclass
class TableConfig:
    capacity: int  # фиксированный размер, не меняется
    strategy: Strategy = Strategy.LINEAR_P

    @property
    def step_modulus(self) -> int:
        """Модуль для шага двойного хеширования."""
        return self.capacity - 1


def word_to_int(word: str) -> int:
    """Полиномиальный хеш: result = c + 31 * result (unsigned 32 bit)."""
    result = 0
    for c in word.encode("utf-8"):
        result = (c + 31 * result) & 0xFFFFFFFF
    return result


class HashTable:
    """Таблица с фиксированной емкостью: linear probing или double hashing.

    Для каждого слота хранятся слово, частота и число коллизий при
    размещении. Отдельно ведется журнал коллизий в порядке вставки
    (stats): запись i делается один раз, когда вставлено i-е новое слово.
    """

    def __init__(self, config: TableConfig):
        if config.capacity < 1:
            raise ValueError("Capacity must be positive")
        if config.strategy is Strategy.DOUBLE_H and config.capacity < 2:
            raise ValueError("Double hashing needs capacity > 1")
        self.config = config
        self.capacity = config.capacity
        self.strategy = config.strategy
        try:
            self.keys = np.full(self.capacity, None, dtype=object)
            self.freqs = np.zeros(self.capacity, dtype=np.int64)
            self.costs = np.zeros(self.capacity, dtype=np.int64)
            self.stats = np.zeros(self.capacity, dtype=np.int64)
        except MemoryError as e:
            raise AllocationFailure("Memory allocation failed") from e
        self.num_keys = 0

    @classmethod
    def new(cls, strategy: Strategy, capacity: int) -> 'HashTable':
        return cls(TableConfig(capacity=capacity, strategy=strategy))

    def home(self, word: str) -> int:
        return word_to_int(word) % self.capacity

    def step(self, word: str) -> int:
        if self.strategy is Strategy.DOUBLE_H:
            return 1 + word_to_int(word) % self.config.step_modulus
        return 1

    def _probe(self, word: str) -> Iterator[Tuple[int, int]]:
        """Последовательность (индекс, коллизии), не длиннее capacity."""
        index = self.home(word)
        step = self.step(word)
        for collisions in range(self.capacity):
            yield index, collisions
            index = (index + step) % self.capacity

    def insert(self, word: str) -> int:
        """Вставка слова. Возвращает частоту после вставки, 0 если места нет."""
        for index, collisions in self._probe(word):
            if self.freqs[index] == 0:
                self.keys[index] = word
                self.freqs[index] = 1
                self.costs[index] = collisions
                self.stats[self.num_keys] = collisions
                self.num_keys += 1
                return 1
            if self.keys[index] == word:
                self.freqs[index] += 1
                return int(self.freqs[index])
        return 0

    def search(self, word: str) -> int:
        """Частота слова или 0, если его нет."""
        for index, _ in self._probe(word):
            if self.freqs[index] == 0:
                return 0
            if self.keys[index] == word:
                return int(self.freqs[index])
        return 0

    def __contains__(self, word: str) -> bool:
        return self.search(word) > 0

    def __len__(self) -> int:
        return self.num_keys

    @property
    def load_factor(self) -> float:
        return self.num_keys / self.capacity

    @property
    def placement_costs(self) -> np.ndarray:
        """Заполненная часть журнала коллизий (порядок вставки)."""
        return self.stats[:self.num_keys]

    def items(self) -> Iterator[Tuple[int, str]]:
        """Пары (частота, слово) в порядке слотов."""
        for index in np.flatnonzero(self.freqs):
            yield int(self.freqs[index]), self.keys[index]

    def print_table(self, stream: Optional[TextIO] = None) -> None:
        if stream is None:
            stream = sys.stdout
        for freq, word in self.items():
            print(f"{freq:<4d} {word}", file=stream)

    def print_entire_table(self, stream: Optional[TextIO] = None) -> None:
        """Отладочный вывод всех слотов.

        Колонка Stats - коллизии при размещении слова именно этого слота,
        для пустых слотов 0.
        """
        if stream is None:
            stream = sys.stderr
        print("  Pos  Freq  Stats  Word", file=stream)
        print("-" * 40, file=stream)
        for i in range(self.capacity):
            line = f"{i:5d} {self.freqs[i]:5d} {self.costs[i]:5d}"
            if self.keys[i] is not None:
                line += f"   {self.keys[i]}"
            print(line, file=stream)
