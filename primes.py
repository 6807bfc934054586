"""Выбор размера таблицы: первое простое >= заданного."""

DEFAULT_TABLE_SIZE = 113


def is_prime(n: int) -> bool:
    """Проверка делением на 2..n/2 (наивно, но размеры таблиц маленькие)."""
    if n < 2:
        return False
    for i in range(2, n // 2 + 1):
        if n % i == 0:
            return False
    return True


def gen_prime(n: int) -> int:
    """Наименьшее простое >= n."""
    while not is_prime(n):
        n += 1
    return n


def table_size(t: int) -> int:
    # 0 и 1 - особые значения
    if t in (0, 1):
        return 2
    return gen_prime(t)
