"""
MeCab wrapper for Musubi.

The analyzer is an external collaborator: fugashi drives MeCab over the
IPADIC dictionary shipped by the ``ipadic`` package and hands back one
node per morpheme. Only the surface and raw feature string are kept.
"""

import logging
from functools import lru_cache
from typing import List, Optional

from musubi.errors import AnalyzerUnavailable
from musubi.features import RawMorpheme
from musubi.settings import MECAB_ARGS

logger = logging.getLogger(__name__)


@lru_cache(maxsize=4)
def get_tagger(mecab_args: Optional[str] = None):
    """
    Build (once per argument string) a fugashi tagger over IPADIC.

    Args:
        mecab_args: MeCab command-line arguments. Defaults to
            settings.MECAB_ARGS, or to the ipadic package when that is empty.

    Raises:
        AnalyzerUnavailable: If fugashi or the dictionary can't be loaded.
    """
    try:
        import fugashi
    except ImportError as e:
        raise AnalyzerUnavailable("fugashi is not installed") from e

    if mecab_args is None:
        mecab_args = MECAB_ARGS
    if not mecab_args:
        try:
            import ipadic
        except ImportError as e:
            raise AnalyzerUnavailable("ipadic is not installed; set MUSUBI_MECAB_ARGS instead") from e
        mecab_args = ipadic.MECAB_ARGS

    logger.info(f"Loading MeCab tagger ({mecab_args})")
    try:
        return fugashi.GenericTagger(mecab_args)
    except RuntimeError as e:
        raise AnalyzerUnavailable(f"Couldn't initialize MeCab with '{mecab_args}': {e}") from e


def tokenize(text: str, tagger=None) -> List[RawMorpheme]:
    """
    Run the analyzer over one sentence.

    Args:
        text: Sentence to analyze. Whitespace is skipped by MeCab.
        tagger: Optional tagger; the cached default tagger otherwise.

    Returns:
        Raw morphemes in text order.
    """
    if tagger is None:
        tagger = get_tagger()
    return [RawMorpheme(node.surface, node.feature_raw) for node in tagger(text)]


def split_sentences(text: str) -> List[str]:
    """Split text into one sentence per non-blank line."""
    return [line.strip() for line in text.splitlines() if line.strip()]
