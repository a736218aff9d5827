"""
Kana helpers for Musubi.

IPADIC readings are katakana; output models also expose a hiragana
rendering, produced here.
"""

# Katakana that have a hiragana counterpart: ァ (U+30A1) to ヶ (U+30F6)
KATAKANA_START = 0x30A1
KATAKANA_END = 0x30F6
KATAKANA_HIRAGANA_SHIFT = 0x60

# ヵ and ヶ are counters as often as kana and have no common hiragana form
NO_HIRAGANA_FORM = "ヵヶ"


def as_hiragana(text: str) -> str:
    """
    Convert katakana to hiragana.

    Characters without a hiragana counterpart (ー, ・, kanji, latin)
    are left unchanged.

    Example:
        >>> as_hiragana("タベタ")
        'たべた'
    """
    result = []
    for char in text:
        cp = ord(char)
        if KATAKANA_START <= cp <= KATAKANA_END and char not in NO_HIRAGANA_FORM:
            result.append(chr(cp - KATAKANA_HIRAGANA_SHIFT))
        else:
            result.append(char)
    return "".join(result)
