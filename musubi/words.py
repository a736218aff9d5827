"""
Word aggregation for Musubi.

Folds the fine-grained IPADIC token stream into words: verb stems absorb
their auxiliaries, sahen nouns absorb する, adjectival stems absorb their
copula, numerals chain, noun suffixes join the noun they follow, and so on.

The grammar is one rule function per primary part of speech. Each rule
sees the current token, the token immediately before it, the token
immediately after it (lookahead, not yet consumed) and the last word
emitted so far, and returns a MergeRule describing what to do.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence

from musubi.errors import MissingLookaheadToken, UnresolvedPartOfSpeech
from musubi.features import Token
from musubi.pos import PosTag

logger = logging.getLogger(__name__)


# ============================================================================
# Word Types
# ============================================================================

class PartOfSpeech(Enum):
    """Coarse part of speech assigned to a whole word."""
    NOUN = "noun"
    PROPER_NOUN = "proper_noun"
    PRONOUN = "pronoun"
    ADJECTIVE = "adjective"
    ADVERB = "adverb"
    DETERMINER = "determiner"
    PREFIX = "prefix"
    POSTPOSITION = "postposition"
    VERB = "verb"
    SUFFIX = "suffix"
    CONJUNCTION = "conjunction"
    INTERJECTION = "interjection"
    NUMBER = "number"
    SYMBOL = "symbol"
    OTHER = "other"
    UNKNOWN = "unknown"


class Grammar(Enum):
    """Grammatical role of verbs formed from nominal material."""
    AUXILIARY = "auxiliary"
    NOMINAL = "nominal"


@dataclass
class Word:
    """
    A word built from one or more consecutive tokens.

    surface, reading and transcription are always the concatenation of the
    constituent tokens' fields. lemma starts as the first token's lemma and
    only grows when a rule asks for it.
    """
    surface: str
    lemma: str
    part_of_speech: PartOfSpeech
    constituent_tokens: List[Token] = field(default_factory=list)
    reading: str = ""
    transcription: str = ""
    grammar: Optional[Grammar] = None

    @classmethod
    def start(cls, token: Token, part_of_speech: PartOfSpeech,
              grammar: Optional[Grammar] = None) -> "Word":
        """Create a word holding a single token."""
        return cls(
            surface=token.literal,
            lemma=token.lemma,
            part_of_speech=part_of_speech,
            constituent_tokens=[token],
            reading=token.reading,
            transcription=token.transcription,
            grammar=grammar,
        )

    def attach(self, token: Token, extend_lemma: bool = False) -> None:
        """Append a token to the end of this word."""
        self.constituent_tokens.append(token)
        self.surface += token.literal
        self.reading += token.reading
        self.transcription += token.transcription
        if extend_lemma:
            self.lemma += token.lemma


# ============================================================================
# Merge Rules
# ============================================================================

# Literals the grammar keys on
NA = "な"
NI = "に"
NN = "ん"
SA = "さ"
CONJUNCTIVE_ATTACHING = ("て", "で", "ば")

# Noun sub-categories that turn into verbs, adjectives or adverbs
# depending on what follows them
NOMINAL_STEMS = frozenset([
    PosTag.ADVERBIAL_POSSIBLE,
    PosTag.SAHEN_CONNECTING,
    PosTag.ADJECTIVAL_STEM,
    PosTag.NEGATIVE_ADJ_STEM,
])

# Auxiliary inflections that fuse with the preceding word
FUSING_AUXILIARIES = frozenset([
    PosTag.PAST,
    PosTag.NEGATIVE,
    PosTag.DESIDERATIVE,
    PosTag.POLITE,
    PosTag.CLASSICAL_NEGATIVE,
])

COPULAS = frozenset([PosTag.COPULA_DA, PosTag.COPULA_DESU])


@dataclass
class MergeRule:
    """Outcome of the grammar for a single token."""
    part_of_speech: PartOfSpeech
    attach_to_previous: bool = False
    extend_lemma: bool = False
    override_pos: bool = False
    consume_lookahead: bool = False
    extend_lookahead_lemma: bool = False
    grammar: Optional[Grammar] = None


RuleFunction = Callable[
    [Token, Optional[Token], Optional[Token], Optional[Word]],
    Optional[MergeRule],
]


def _is_particle(token: Optional[Token], literal: str) -> bool:
    return token is not None and token.pos == PosTag.PARTICLE and token.literal == literal


def _is_adnominal_copula(token: Token) -> bool:
    return (token.inflection_type == PosTag.COPULA_DA
            and token.inflection_form == PosTag.ADNOMINAL_CONNECTING)


def _nominal_stem_rule(token: Token, following: Optional[Token]) -> MergeRule:
    """Sahen, adverbial and adjectival stems: 勉強+する, 静か+な, 大切+に."""
    if following is None:
        return MergeRule(PartOfSpeech.NOUN)

    if following.inflection_type == PosTag.SAHEN_SURU:
        return MergeRule(PartOfSpeech.VERB, consume_lookahead=True)
    if following.inflection_type == PosTag.COPULA_DA:
        return MergeRule(
            PartOfSpeech.ADJECTIVE,
            consume_lookahead=following.inflection_form == PosTag.ADNOMINAL_CONNECTING,
        )
    if following.inflection_type == PosTag.NEGATIVE:
        return MergeRule(PartOfSpeech.ADJECTIVE, consume_lookahead=True)
    if _is_particle(following, NI):
        return MergeRule(PartOfSpeech.ADVERB)
    return MergeRule(PartOfSpeech.NOUN)


def _dependent_noun_rule(token: Token, following: Optional[Token]) -> MergeRule:
    """Dependent and special nouns: よう+に, そう+な, みたい+だ."""
    if token.pos3 == PosTag.ADJECTIVAL_STEM:
        # An adjectival stem always takes a complement
        if following is None:
            return MergeRule(PartOfSpeech.ADJECTIVE, consume_lookahead=True)
        return MergeRule(
            PartOfSpeech.ADJECTIVE,
            consume_lookahead=(_is_adnominal_copula(following)
                               or following.pos2 == PosTag.ADNOMINAL_FORM),
        )

    if following is None:
        return MergeRule(PartOfSpeech.NOUN)

    if token.pos3 == PosTag.ADVERBIAL_POSSIBLE:
        if _is_particle(following, NI):
            return MergeRule(PartOfSpeech.ADVERB, consume_lookahead=True)
    elif token.pos3 == PosTag.AUX_STEM:
        if following.inflection_type == PosTag.COPULA_DA:
            return MergeRule(
                PartOfSpeech.VERB,
                consume_lookahead=following.inflection_form == PosTag.ADNOMINAL_CONNECTING,
                grammar=Grammar.AUXILIARY,
            )
        if following.pos == PosTag.PARTICLE and following.pos2 == PosTag.ADVERBIALIZING:
            return MergeRule(PartOfSpeech.ADVERB, consume_lookahead=True)
    return MergeRule(PartOfSpeech.NOUN)


def _noun_suffix_rule(token: Token) -> MergeRule:
    """Noun suffixes: 田中+さん stays apart, 子ども+たち and 高+さ join."""
    if token.pos3 == PosTag.PERSON_NAME:
        return MergeRule(PartOfSpeech.SUFFIX)
    if token.pos3 == PosTag.SPECIAL and token.lemma == SA:
        return MergeRule(PartOfSpeech.NOUN, attach_to_previous=True, override_pos=True)
    return MergeRule(PartOfSpeech.NOUN, attach_to_previous=True, extend_lemma=True)


def noun_rule(token: Token, previous: Optional[Token], following: Optional[Token],
              last_word: Optional[Word]) -> Optional[MergeRule]:
    """名詞"""
    if token.pos2 == PosTag.PROPER_NOUN:
        return MergeRule(PartOfSpeech.PROPER_NOUN)
    if token.pos2 == PosTag.PRONOUN:
        return MergeRule(PartOfSpeech.PRONOUN)
    if token.pos2 in NOMINAL_STEMS:
        return _nominal_stem_rule(token, following)
    if token.pos2 in (PosTag.DEPENDENT, PosTag.SPECIAL):
        return _dependent_noun_rule(token, following)
    if token.pos2 == PosTag.NUMERAL:
        chained = last_word is not None and last_word.part_of_speech == PartOfSpeech.NUMBER
        return MergeRule(PartOfSpeech.NUMBER, attach_to_previous=chained, extend_lemma=chained)
    if token.pos2 == PosTag.SUFFIX:
        return _noun_suffix_rule(token)
    if token.pos2 == PosTag.CONJUNCTIVE_SUFFIX:
        return MergeRule(PartOfSpeech.CONJUNCTION)
    if token.pos2 == PosTag.VERBAL_INDEPENDENT_LIKE:
        return MergeRule(PartOfSpeech.VERB, grammar=Grammar.NOMINAL)
    return MergeRule(PartOfSpeech.NOUN)


def aux_verb_rule(token: Token, previous: Optional[Token], following: Optional[Token],
                  last_word: Optional[Word]) -> Optional[MergeRule]:
    """
    助動詞

    た/ない/たい/ます/ぬ fuse with the preceding word unless it is a binding
    particle (は, も). Copulas other than な start a verb of their own.
    """
    after_binding_particle = previous is not None and previous.pos2 == PosTag.BINDING_PARTICLE
    if token.inflection_type in FUSING_AUXILIARIES and not after_binding_particle:
        return MergeRule(PartOfSpeech.POSTPOSITION, attach_to_previous=True)
    if token.inflection_type == PosTag.INVARIABLE and token.lemma == NN:
        return MergeRule(PartOfSpeech.POSTPOSITION, attach_to_previous=True)
    if token.inflection_type in COPULAS and token.literal != NA:
        return MergeRule(PartOfSpeech.VERB)
    return MergeRule(PartOfSpeech.POSTPOSITION)


def verb_rule(token: Token, previous: Optional[Token], following: Optional[Token],
              last_word: Optional[Word]) -> Optional[MergeRule]:
    """動詞: suffix verbs and non-imperative dependent verbs join the previous word."""
    attaches = (token.pos2 == PosTag.SUFFIX
                or (token.pos2 == PosTag.DEPENDENT
                    and token.inflection_form != PosTag.IMPERATIVE_I))
    return MergeRule(PartOfSpeech.VERB, attach_to_previous=attaches)


def particle_rule(token: Token, previous: Optional[Token], following: Optional[Token],
                  last_word: Optional[Word]) -> Optional[MergeRule]:
    """助詞: conjunctive て/で/ば join the previous word."""
    attaches = (token.pos2 == PosTag.CONJUNCTIVE_PARTICLE
                and token.literal in CONJUNCTIVE_ATTACHING)
    return MergeRule(PartOfSpeech.POSTPOSITION, attach_to_previous=attaches)


def _standalone(part_of_speech: PartOfSpeech) -> RuleFunction:
    def rule(token, previous, following, last_word):
        return MergeRule(part_of_speech)
    rule.__name__ = f"{part_of_speech.value}_rule"
    return rule


RULE_FUNCTIONS: Dict[PosTag, RuleFunction] = {
    PosTag.NOUN: noun_rule,
    PosTag.PREFIX: _standalone(PartOfSpeech.PREFIX),
    PosTag.AUX_VERB: aux_verb_rule,
    PosTag.VERB: verb_rule,
    PosTag.ADJECTIVE: _standalone(PartOfSpeech.ADJECTIVE),
    PosTag.PARTICLE: particle_rule,
    PosTag.ADNOMINAL: _standalone(PartOfSpeech.DETERMINER),
    PosTag.CONJUNCTION: _standalone(PartOfSpeech.CONJUNCTION),
    PosTag.ADVERB: _standalone(PartOfSpeech.ADVERB),
    PosTag.SYMBOL: _standalone(PartOfSpeech.SYMBOL),
    PosTag.FILLER: _standalone(PartOfSpeech.INTERJECTION),
    PosTag.INTERJECTION: _standalone(PartOfSpeech.INTERJECTION),
    PosTag.OTHER: _standalone(PartOfSpeech.OTHER),
}


def resolve_rule(token: Token, previous: Optional[Token] = None,
                 following: Optional[Token] = None,
                 last_word: Optional[Word] = None) -> MergeRule:
    """
    Run the grammar for one token.

    Raises:
        UnresolvedPartOfSpeech: If no rule covers the token's primary tag.
    """
    rule_function = RULE_FUNCTIONS.get(token.pos)
    rule = rule_function(token, previous, following, last_word) if rule_function else None
    if rule is None:
        raise UnresolvedPartOfSpeech(token.literal)
    return rule


# ============================================================================
# Aggregation
# ============================================================================

def aggregate_words(tokens: Sequence[Token]) -> List[Word]:
    """
    Fold a token sequence into words.

    Args:
        tokens: Parsed tokens of one sentence, in text order.

    Returns:
        Words in text order. Concatenating their surfaces reproduces the
        concatenated token literals.

    Raises:
        UnresolvedPartOfSpeech: If a token's primary tag has no rule.
        MissingLookaheadToken: If a rule needs a following token at the
            end of the sequence.

    A dependent noun with an adjectival stem (みたい) always takes a complement, so
    text ending on one (猫みたい with no final 。 or だ) raises
    MissingLookaheadToken instead of returning words. Callers analyzing
    fragments should keep sentence-final punctuation on the input.

    Example:
        >>> from musubi.features import parse_tokens, RawMorpheme
        >>> tokens = parse_tokens([
        ...     RawMorpheme("食べ", "動詞,自立,*,*,一段,連用形,食べる,タベ,タベ"),
        ...     RawMorpheme("た", "助動詞,*,*,*,特殊・タ,基本形,た,タ,タ"),
        ... ])
        >>> [w.surface for w in aggregate_words(tokens)]
        ['食べた']
    """
    words: List[Word] = []
    index = 0

    while index < len(tokens):
        token = tokens[index]
        previous = tokens[index - 1] if index > 0 else None
        following = tokens[index + 1] if index + 1 < len(tokens) else None
        rule = resolve_rule(token, previous, following, words[-1] if words else None)
        index += 1

        if rule.attach_to_previous and words:
            last = words[-1]
            last.attach(token, extend_lemma=rule.extend_lemma)
            if rule.override_pos:
                last.part_of_speech = rule.part_of_speech
            logger.debug(f"Attached '{token.literal}' to '{last.surface}'")
            continue

        word = Word.start(token, rule.part_of_speech, rule.grammar)
        if rule.consume_lookahead:
            if following is None:
                raise MissingLookaheadToken(token.literal)
            word.attach(following, extend_lemma=rule.extend_lookahead_lemma)
            index += 1

        logger.debug(f"New word '{word.surface}' ({word.part_of_speech.value})")
        words.append(word)

    return words
