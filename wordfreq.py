"""
Подсчет частот слов в хеш-таблице.
    wordfreq < text.txt                  # частоты слов
    wordfreq -d -p -s 5 < text.txt       # статистика коллизий, double hashing
    wordfreq -e -t 1000 < text.txt       # вся таблица в stderr
"""

import argparse
import io
import sys
from typing import List, Optional, TextIO
from tqdm import tqdm
from hash_table import HashTable, Strategy, AllocationFailure
from primes import DEFAULT_TABLE_SIZE, table_size
from snapshots import DEFAULT_SNAPSHOTS, print_stats
from word_reader import words


class UsageParser(argparse.ArgumentParser):
    """Неизвестная опция: печатаем справку и выходим с ошибкой."""

    def error(self, message: str):
        self.print_help(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def nonnegative(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"{value} must be >= 0")
    return n


def build_parser() -> argparse.ArgumentParser:
    p = UsageParser(
        prog="wordfreq",
        add_help=False,
        description="Слова читаются из stdin, добавляются в хеш-таблицу "
                    "и печатаются вместе с частотами в stdout.",
    )
    p.add_argument("-d", dest="double", action="store_true",
                   help="Double hashing (по умолчанию linear probing)")
    p.add_argument("-e", dest="entire", action="store_true",
                   help="Вся таблица в stderr")
    p.add_argument("-p", dest="stats", action="store_true",
                   help="Статистика вместо частот")
    p.add_argument("-s", dest="snapshots", metavar="SNAPSHOTS", type=nonnegative,
                   default=DEFAULT_SNAPSHOTS,
                   help="Количество снимков статистики (с -p), 0 - без статистики")
    p.add_argument("-t", dest="tablesize", metavar="TABLESIZE", type=nonnegative,
                   default=None,
                   help="Размер таблицы: первое простое >= TABLESIZE")
    p.add_argument("--progress", action="store_true",
                   help="Показывать счетчик слов в stderr")
    p.add_argument("-h", dest="help", action="store_true",
                   help="Показать эту справку")
    return p


def byte_reader(stream) -> TextIO:
    """Байтовый поток как текст: latin-1 декодирует любой байт."""
    return io.TextIOWrapper(stream, encoding="latin-1")


def stdin_text() -> TextIO:
    buffer = getattr(sys.stdin, "buffer", None)
    return sys.stdin if buffer is None else byte_reader(buffer)


def run(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None) -> int:
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    parser = build_parser()
    args = parser.parse_args(argv)
    if args.help:
        parser.print_help(stdout)
        return 0

    stdin = stdin if stdin is not None else stdin_text()

    capacity = DEFAULT_TABLE_SIZE if args.tablesize is None else table_size(args.tablesize)
    strategy = Strategy.DOUBLE_H if args.double else Strategy.LINEAR_P

    try:
        table = HashTable.new(strategy, capacity)
        for word in tqdm(words(stdin), desc="words", unit="w",
                         file=stderr, disable=not args.progress):
            table.insert(word)
    except AllocationFailure as e:
        print(e, file=stderr)
        return 1

    if args.entire:
        table.print_entire_table(stderr)
    if not args.stats:
        table.print_table(stdout)
    elif args.snapshots != 0:
        print_stats(table, stdout, args.snapshots)
    return 0


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
