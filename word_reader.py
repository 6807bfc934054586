"""Чтение слов из потока."""

from typing import Iterator, TextIO

MAX_WORD = 256


def _is_word_char(c: str) -> bool:
    return c.isascii() and c.isalnum()


def words(stream: TextIO, limit: int = MAX_WORD) -> Iterator[str]:
    """Ленивый генератор слов в нижнем регистре.

    Слово - последовательность латинских букв и цифр. Апостроф внутри
    слова выбрасывается и не считается в длину, любой другой символ
    заканчивает слово. Сохраняется не больше limit - 1 символов,
    остаток длинного слова пропускается и не становится следующим
    словом.
    """
    if limit < 2:
        raise ValueError("limit must be at least 2")
    word = []
    while True:
        c = stream.read(1)
        if not c:
            break
        if _is_word_char(c):
            if len(word) < limit - 1:
                word.append(c.lower())
        elif c == "'" and word:
            continue
        elif word:
            yield "".join(word)
            word = []
    if word:
        yield "".join(word)
