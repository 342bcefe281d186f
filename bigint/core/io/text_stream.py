"""
Text Stream I/O — Чтение и запись BigInteger в текстовые потоки

Формат токена совпадает с десятичной записью BigInteger:
чтение берёт один токен, разделённый пробельными символами,
запись выводит str(value) без разделителей.
"""

from typing import Iterator, TextIO

from bigint.core.domain.big_integer import BigInteger


def _read_token(stream: TextIO) -> str:
    """Один токен: пропуск ведущих пробелов, чтение до пробела или EOF."""
    char = stream.read(1)
    while char and char.isspace():
        char = stream.read(1)

    chars = []
    while char and not char.isspace():
        chars.append(char)
        char = stream.read(1)

    return "".join(chars)


def read_big_integer(stream: TextIO) -> BigInteger:
    """
    Чтение одного BigInteger из текстового потока.

    Args:
        stream: Текстовый поток (файл, io.StringIO, sys.stdin)

    Returns:
        Разобранное значение

    Raises:
        ParseError: Если токен некорректен или поток исчерпан (пустой токен)
    """
    return BigInteger(_read_token(stream))


def iter_big_integers(stream: TextIO) -> Iterator[BigInteger]:
    """Все токены потока по очереди до EOF."""
    while True:
        token = _read_token(stream)
        if not token:
            return
        yield BigInteger(token)


def write_big_integer(stream: TextIO, value: BigInteger) -> None:
    """Запись BigInteger в текстовый поток (без перевода строки)."""
    stream.write(str(value))
