"""
IPADIC part-of-speech labels.

Every label the word grammar inspects is a member of PosTag, whose value
is the label exactly as it appears in a MeCab/IPADIC feature string.
Labels the grammar never looks at map to PosTag.UNKNOWN, and the
wildcard field '*' maps to PosTag.UNSET.
"""

from enum import Enum
from typing import Dict


class PosTag(Enum):
    """Part-of-speech, sub-category and inflection labels of IPADIC."""

    # Primary categories
    NOUN = "名詞"
    PREFIX = "接頭詞"
    VERB = "動詞"
    ADJECTIVE = "形容詞"
    ADVERB = "副詞"
    ADNOMINAL = "連体詞"
    CONJUNCTION = "接続詞"
    PARTICLE = "助詞"
    AUX_VERB = "助動詞"
    INTERJECTION = "感動詞"
    SYMBOL = "記号"
    FILLER = "フィラー"
    OTHER = "その他"

    # Sub-categories
    PROPER_NOUN = "固有名詞"
    PRONOUN = "代名詞"
    NUMERAL = "数"
    DEPENDENT = "非自立"
    SPECIAL = "特殊"
    SUFFIX = "接尾"
    ADVERBIAL_POSSIBLE = "副詞可能"
    SAHEN_CONNECTING = "サ変接続"
    ADJECTIVAL_STEM = "形容動詞語幹"
    NEGATIVE_ADJ_STEM = "ナイ形容詞語幹"
    AUX_STEM = "助動詞語幹"
    CONJUNCTIVE_SUFFIX = "接続詞的"
    VERBAL_INDEPENDENT_LIKE = "動詞非自立的"
    PERSON_NAME = "人名"
    CONJUNCTIVE_PARTICLE = "接続助詞"
    BINDING_PARTICLE = "係助詞"
    ADVERBIALIZING = "副詞化"
    ADNOMINAL_FORM = "連体化"

    # Inflection types
    SAHEN_SURU = "サ変・スル"
    PAST = "特殊・タ"
    NEGATIVE = "特殊・ナイ"
    DESIDERATIVE = "特殊・タイ"
    POLITE = "特殊・マス"
    CLASSICAL_NEGATIVE = "特殊・ヌ"
    COPULA_DA = "特殊・ダ"
    COPULA_DESU = "特殊・デス"
    INVARIABLE = "不変化型"

    # Inflection forms
    ADNOMINAL_CONNECTING = "体言接続"
    IMPERATIVE_I = "命令ｉ"

    # Sentinels
    UNSET = "*"
    UNKNOWN = "<unknown>"

    @classmethod
    def from_label(cls, label: str) -> "PosTag":
        """Map a feature field to its tag. Never fails."""
        return _LABEL_MAP.get(label.strip(), cls.UNKNOWN)

    @property
    def is_concrete(self) -> bool:
        """False for the UNSET and UNKNOWN sentinels."""
        return self not in (PosTag.UNSET, PosTag.UNKNOWN)


_LABEL_MAP: Dict[str, PosTag] = {
    tag.value: tag for tag in PosTag if tag is not PosTag.UNKNOWN
}
