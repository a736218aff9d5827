"""
Feature parsing for Musubi.

Turns the raw (surface, feature) pairs produced by MeCab into typed
tokens. The feature string must follow the IPADIC schema:

    pos,pos2,pos3,pos4,inflection type,inflection form,lemma,reading,pronunciation

Between six and nine fields are accepted. Unknown-word entries usually
stop after the lemma, so reading and pronunciation default to ''.
Longer feature strings come from other dictionaries (UniDic has 17 or
more fields, in a different order) and are rejected.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, NamedTuple, Tuple

from musubi.errors import MalformedFeature, UnrecognizedPrimaryPos
from musubi.pos import PosTag
from musubi.settings import (
    FEATURE_DELIMITER, MIN_FEATURE_FIELDS, MAX_FEATURE_FIELDS,
    LEMMA_FIELD, READING_FIELD, TRANSCRIPTION_FIELD,
)


class RawMorpheme(NamedTuple):
    """A morpheme as returned by the analyzer, before parsing."""
    surface: str
    feature: str


@dataclass(frozen=True)
class Token:
    """
    A parsed morpheme.

    The four POS levels and the inflection fields may be PosTag.UNSET or
    PosTag.UNKNOWN below the primary level; the primary ``pos`` is always
    a concrete tag when the token comes from parse_token().

    ``labels`` keeps the six label fields as the analyzer wrote them, so
    tags outside PosTag (自立, 一段, 連用形...) survive serialization.
    It takes no part in equality.
    """
    literal: str
    pos: PosTag
    pos2: PosTag = PosTag.UNSET
    pos3: PosTag = PosTag.UNSET
    pos4: PosTag = PosTag.UNSET
    inflection_type: PosTag = PosTag.UNSET
    inflection_form: PosTag = PosTag.UNSET
    lemma: str = ""
    reading: str = ""
    transcription: str = ""
    labels: Tuple[str, ...] = field(default=(), compare=False)


def _field(fields: List[str], index: int) -> str:
    return fields[index] if index < len(fields) else ""


def parse_token(raw: RawMorpheme) -> Token:
    """
    Parse a single raw morpheme.

    Args:
        raw: Surface form and comma-delimited feature string.

    Returns:
        The typed token.

    Raises:
        MalformedFeature: If there are fewer than six or more than
            nine feature fields.
        UnrecognizedPrimaryPos: If the main part of speech is '*' or a
            label outside the IPADIC tag set.
    """
    fields = raw.feature.split(FEATURE_DELIMITER)
    if not MIN_FEATURE_FIELDS <= len(fields) <= MAX_FEATURE_FIELDS:
        raise MalformedFeature(raw.surface, raw.feature, len(fields))

    pos, pos2, pos3, pos4, inflection_type, inflection_form = (
        PosTag.from_label(label) for label in fields[:MIN_FEATURE_FIELDS]
    )
    if not pos.is_concrete:
        raise UnrecognizedPrimaryPos(raw.surface, fields[0])

    return Token(
        literal=raw.surface,
        pos=pos,
        pos2=pos2,
        pos3=pos3,
        pos4=pos4,
        inflection_type=inflection_type,
        inflection_form=inflection_form,
        lemma=_field(fields, LEMMA_FIELD),
        reading=_field(fields, READING_FIELD),
        transcription=_field(fields, TRANSCRIPTION_FIELD),
        labels=tuple(fields[:MIN_FEATURE_FIELDS]),
    )


def parse_tokens(raw_morphemes: Iterable[RawMorpheme]) -> List[Token]:
    """Parse every morpheme in order. The first failure aborts the whole call."""
    return [parse_token(raw) for raw in raw_morphemes]
