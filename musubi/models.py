"""
Pydantic models for Musubi output.

These models give words a stable, JSON-serializable shape for the CLI
and for applications that pass results across a process boundary.

Usage:
    from musubi import analyze
    from musubi.models import SentenceResult, VocabularyResult

    words = analyze("子どもたちが本を読んだ")
    print(SentenceResult.from_words(words).model_dump_json())
"""

from typing import Any, List, Optional, Sequence, Set

from pydantic import BaseModel, Field

from musubi.characters import as_hiragana
from musubi.words import PartOfSpeech, Word


# =============================================================================
# Constants for Filtering
# =============================================================================

# Parts of speech that carry lexical content
CONTENT_WORD_POS: Set[str] = {
    PartOfSpeech.NOUN.value,
    PartOfSpeech.PROPER_NOUN.value,
    PartOfSpeech.VERB.value,
    PartOfSpeech.ADJECTIVE.value,
    PartOfSpeech.ADVERB.value,
    PartOfSpeech.NUMBER.value,
}


class TokenResult(BaseModel):
    """A single analyzer morpheme inside a word."""
    literal: str = Field(..., description="Surface text of the morpheme")
    pos: List[str] = Field(..., description="IPADIC POS hierarchy, '*' for unset levels")
    inflection_type: str = Field("*", description="IPADIC inflection type")
    inflection_form: str = Field("*", description="IPADIC inflection form")
    lemma: str = Field("", description="Dictionary form of the morpheme")
    reading: str = Field("", description="Katakana reading")

    class Config:
        from_attributes = True

    @classmethod
    def from_token(cls, token: Any) -> "TokenResult":
        """
        Create TokenResult from a parsed Token.

        Uses the analyzer's own labels when the token carries them, so
        tags PosTag doesn't model are kept. Tokens built by hand fall back
        to the enum values.
        """
        labels = token.labels or tuple(tag.value for tag in (
            token.pos, token.pos2, token.pos3, token.pos4,
            token.inflection_type, token.inflection_form,
        ))
        return cls(
            literal=token.literal,
            pos=list(labels[:4]),
            inflection_type=labels[4],
            inflection_form=labels[5],
            lemma=token.lemma,
            reading=token.reading,
        )


class WordResult(BaseModel):
    """A word as produced by aggregate_words()."""
    surface: str = Field(..., description="Surface text as it appears in input")
    lemma: str = Field(..., description="Dictionary form")
    pos: str = Field(..., description="Coarse part of speech (e.g. 'verb')")
    reading: str = Field("", description="Katakana reading")
    kana: str = Field("", description="Hiragana reading")
    transcription: str = Field("", description="Pronunciation as given by the dictionary")
    grammar: Optional[str] = Field(None, description="'auxiliary' or 'nominal' for verbs built from nouns")
    tokens: List[TokenResult] = Field(default_factory=list, description="Constituent morphemes")

    class Config:
        from_attributes = True

    @classmethod
    def from_word(cls, word: Word) -> "WordResult":
        """Create WordResult from a Word."""
        return cls(
            surface=word.surface,
            lemma=word.lemma,
            pos=word.part_of_speech.value,
            reading=word.reading,
            kana=as_hiragana(word.reading),
            transcription=word.transcription,
            grammar=word.grammar.value if word.grammar else None,
            tokens=[TokenResult.from_token(t) for t in word.constituent_tokens],
        )

    def is_content_word(self) -> bool:
        """Check if this word is a content word (not a particle/grammatical word)."""
        return self.pos in CONTENT_WORD_POS


class SentenceResult(BaseModel):
    """All words of one sentence."""
    text: str = Field(..., description="Sentence text, reconstructed from the words")
    words: List[WordResult] = Field(..., description="Words in text order")

    @classmethod
    def from_words(cls, words: Sequence[Word]) -> "SentenceResult":
        """Create SentenceResult from aggregate_words() output."""
        return cls(
            text="".join(w.surface for w in words),
            words=[WordResult.from_word(w) for w in words],
        )


# =============================================================================
# Simplified Vocabulary Models (for search indexing and glossing)
# =============================================================================

class VocabularyItem(BaseModel):
    """
    Minimal vocabulary entry: the word as seen, its dictionary form,
    its hiragana reading and its coarse part of speech.
    """
    word: str = Field(..., description="Word as it appears in text")
    base: str = Field(..., description="Dictionary form of the word")
    reading: str = Field(..., description="Reading in hiragana")
    pos: str = Field(..., description="Coarse part of speech")

    @classmethod
    def from_word_result(cls, w: WordResult) -> "VocabularyItem":
        """Create VocabularyItem from a WordResult."""
        return cls(word=w.surface, base=w.lemma or w.surface, reading=w.kana, pos=w.pos)


class VocabularyResult(BaseModel):
    """
    Content words of one or more sentences, one entry per dictionary form.

    Example response:
        {
            "vocabulary": [
                {"word": "子どもたち", "base": "子どもたち", "reading": "こどもたち", "pos": "noun"},
                {"word": "本", "base": "本", "reading": "ほん", "pos": "noun"},
                {"word": "読んだ", "base": "読む", "reading": "よんだ", "pos": "verb"}
            ],
            "count": 3
        }
    """
    vocabulary: List[VocabularyItem] = Field(..., description="List of vocabulary items")
    count: int = Field(..., description="Number of vocabulary items")

    @classmethod
    def from_sentences(cls, sentences: Sequence[Sequence[Word]]) -> "VocabularyResult":
        """
        Collect content words, keeping the first occurrence of each lemma.

        Args:
            sentences: Output of aggregate_words() for each sentence.
        """
        seen: Set[str] = set()
        vocabulary = []
        for words in sentences:
            for word in words:
                result = WordResult.from_word(word)
                if not result.is_content_word():
                    continue
                item = VocabularyItem.from_word_result(result)
                if item.base in seen:
                    continue
                seen.add(item.base)
                vocabulary.append(item)

        return cls(vocabulary=vocabulary, count=len(vocabulary))
