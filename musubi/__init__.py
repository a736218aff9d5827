"""
Musubi: groups MeCab/IPADIC morphemes into Japanese words.

    raw morphemes -> parse_tokens() -> tokens -> aggregate_words() -> words
"""

from typing import Iterable, List

__version__ = "0.1.0"


def convert(raw_morphemes: Iterable) -> List:
    """
    Parse raw (surface, feature) morphemes and fold them into words.

    Args:
        raw_morphemes: RawMorpheme pairs from the analyzer, in text order.

    Returns:
        List of Word objects.

    Raises:
        ParseError: If a feature string doesn't follow the IPADIC schema.
        AggregationError: If the tokens can't be grouped into words.

    Example:
        >>> from musubi.features import RawMorpheme
        >>> words = convert([
        ...     RawMorpheme("勉強", "名詞,サ変接続,*,*,*,*,勉強,ベンキョウ,ベンキョー"),
        ...     RawMorpheme("する", "動詞,自立,*,*,サ変・スル,基本形,する,スル,スル"),
        ... ])
        >>> words[0].surface, words[0].part_of_speech.value
        ('勉強する', 'verb')
    """
    from musubi.features import parse_tokens
    from musubi.words import aggregate_words

    return aggregate_words(parse_tokens(raw_morphemes))


def analyze(text: str, tagger=None) -> List:
    """
    Analyze one Japanese sentence and return its words.

    Args:
        text: Sentence to analyze.
        tagger: Optional fugashi tagger. If None, the cached IPADIC tagger is used.

    Example:
        >>> import musubi
        >>> for w in musubi.analyze("子どもたちが本を読んだ"):
        ...     print(w.surface, w.part_of_speech.value, w.lemma)
    """
    from musubi.analyzer import tokenize

    return convert(tokenize(text, tagger=tagger))


def analyze_lines(text: str, tagger=None) -> List[List]:
    """Analyze every non-blank line of text as an independent sentence."""
    from musubi.analyzer import split_sentences

    return [analyze(sentence, tagger=tagger) for sentence in split_sentences(text)]
