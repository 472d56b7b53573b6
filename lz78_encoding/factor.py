# factor.py

from typing import NamedTuple


class Phrase(NamedTuple):
    """
    Запис словника LZ78:
    - id: порядковий номер фрази (1, 2, 3, ...), 0 - порожня фраза
    - parent: номер фрази, яку ця фраза продовжує одним символом
    - char: байт, доданий до тексту parent
    """
    id: int
    parent: int
    char: int


class Factor(NamedTuple):
    """
    Пара (char, code) на виході кодера LZ78:
    - char: байт, яким нова фраза продовжує знайдений збіг
    - code: номер найдовшої знайденої фрази (0, якщо збігу немає)
    """
    char: int
    code: int

    def to_line(self) -> bytes:
        """
        Рядок вихідного формату: сирий байт, десятковий код, перевід рядка.
        """
        return bytes((self.char,)) + str(self.code).encode("ascii") + b"\n"

    def __repr__(self):
        shown = chr(self.char) if 32 <= self.char < 127 else f"\\x{self.char:02x}"
        return f"<Factor '{shown}'{self.code}>"
