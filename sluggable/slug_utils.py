# Путь: sluggable/slug_utils.py
# Назначение: Нормализация текста в slug (только ASCII, нижний регистр, дефисы)
#   и «следующая строка» для суффиксов уникальности (-0, -1, ... -9, -10).
# Примечания:
#   • normalize() — чистая функция, никогда не падает.
#   • transliterate=True сначала прогоняет текст через unidecode (кириллица → латиница),
#     иначе не-ASCII символы без разложения просто исчезают.

import re
import string
import unicodedata

from unidecode import unidecode

DEFAULT_SLUG_LENGTH = 50

_NON_ASCII_RE = re.compile(r"[^\x00-\x7F]")
_PUNCTUATION_RE = re.compile(r"[\'\"#$,.!?%@()]+")
# \W вместе с «_» (и «^», который и так не-словесный)
_NON_WORD_RE = re.compile(r"[\W_]+", re.ASCII)
_DASH_RUN_RE = re.compile(r"-{2,}")
_TRAILING_CHARS = "-" + string.whitespace


def normalize(text, max_length: int = DEFAULT_SLUG_LENGTH, transliterate: bool = False) -> str:
    """
    Примеры:
      'Héllo, World!' -> 'hello-world'
      'Rock & Roll'   -> 'rock-and-roll'
      'Лента новостей' -> ''                (transliterate=False)
      'Лента новостей' -> 'lenta-novostei'  (transliterate=True)
    """
    if max_length is None:
        max_length = DEFAULT_SLUG_LENGTH
    if not text or max_length <= 0:
        return ""

    value = str(text)
    if transliterate:
        value = unidecode(value)

    # 1) раскладываем символы и выбрасываем всё, что вне ASCII (é -> e)
    value = _NON_ASCII_RE.sub("", unicodedata.normalize("NFKD", value))
    value = value.lower()
    # 2) частая пунктуация просто удаляется, амперсанд превращается в слово
    value = _PUNCTUATION_RE.sub("", value)
    value = value.replace("&", "and")
    # 3) всё остальное не-словесное (включая «_») -> один дефис
    value = _NON_WORD_RE.sub("-", value)
    value = _DASH_RUN_RE.sub("-", value)
    if value.startswith("-"):
        value = value[1:]
    # 4) жёсткая обрезка, затем хвостовые дефисы/пробелы
    value = value[:max_length]
    return value.rstrip(_TRAILING_CHARS)


def _is_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def succ(value: str) -> str:
    """
    Следующая строка в смысле «строкового счётчика».
    Увеличивает самый правый буквенно-цифровой символ; перенос 9->0, z->a, Z->A
    уходит к следующему буквенно-цифровому слева, пропуская разделители.
    Если переносить некуда, слева вставляется '1' / 'a' / 'A'.

      '-0' -> '-1', '-9' -> '-10', '-99' -> '-100', 'az' -> 'ba', 'zz' -> 'aaa', '1.9' -> '2.0'
    """
    if not value:
        return ""

    chars = list(value)
    positions = [i for i, ch in enumerate(chars) if _is_alnum(ch)]

    if not positions:
        # без букв и цифр: просто следующий код у последнего символа
        chars[-1] = chr(ord(chars[-1]) + 1)
        return "".join(chars)

    carry = ""
    leftmost = positions[-1]
    for pos in reversed(positions):
        ch = chars[pos]
        if ch == "9":
            chars[pos], carry = "0", "1"
        elif ch == "z":
            chars[pos], carry = "a", "a"
        elif ch == "Z":
            chars[pos], carry = "A", "A"
        else:
            chars[pos] = chr(ord(ch) + 1)
            return "".join(chars)
        leftmost = pos

    chars.insert(leftmost, carry)
    return "".join(chars)
