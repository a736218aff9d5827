"""
Command line interface for musubi.

Usage:
    python -m musubi.cli "日本語テキスト"
    python -m musubi.cli -i "日本語テキスト"     # one line per word
    python -m musubi.cli -f "日本語テキスト"     # full JSON
    python -m musubi.cli --vocab "日本語テキスト" # content words as JSON
    python -m musubi.cli -r "日本語テキスト"     # raw MeCab morphemes
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from musubi import __version__
from musubi.analyzer import split_sentences, tokenize
from musubi.errors import MusubiError
from musubi.features import parse_tokens
from musubi.models import SentenceResult, VocabularyResult
from musubi.settings import DEBUG
from musubi.words import Word, aggregate_words


def format_word_info_text(words: List[Word]) -> str:
    """Format words as one 'surface [reading] pos lemma' line each."""
    lines = []
    for word in words:
        grammar = f" ({word.grammar.value})" if word.grammar else ""
        lines.append(
            f"{word.surface} [{word.reading}] {word.part_of_speech.value}{grammar} {word.lemma}"
        )
    return '\n'.join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Group MeCab/IPADIC morphemes into Japanese words',
        prog='musubi',
    )

    parser.add_argument(
        'text',
        nargs='*',
        help='Japanese text to analyze (one sentence per line)',
    )

    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        '-i', '--with-info',
        action='store_true',
        help='Print reading, part of speech and lemma for each word',
    )
    output.add_argument(
        '-f', '--full',
        action='store_true',
        help='Full word info as JSON',
    )
    output.add_argument(
        '--vocab',
        action='store_true',
        help='Content words as JSON, one entry per lemma',
    )
    output.add_argument(
        '-r', '--raw',
        action='store_true',
        help='Print the raw analyzer morphemes instead of words',
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Log rule decisions to stderr',
    )

    parser.add_argument(
        '-v', '--version',
        action='store_true',
        help='Show version information',
    )
    return parser


def main(args: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    parsed = parser.parse_args(args)

    if parsed.version:
        print(f'musubi {__version__}')
        return 0

    if parsed.debug or DEBUG:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    sentences = split_sentences('\n'.join(parsed.text))
    if not sentences:
        parser.print_help()
        return 1

    try:
        raw_sentences = [tokenize(sentence) for sentence in sentences]

        if parsed.raw:
            for raw in raw_sentences:
                print('\n'.join(f"{m.surface}\t{m.feature}" for m in raw))
            return 0

        results = [aggregate_words(parse_tokens(raw)) for raw in raw_sentences]
    except MusubiError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    if parsed.full:
        output = [SentenceResult.from_words(words).model_dump() for words in results]
        print(json.dumps(output, ensure_ascii=False))
    elif parsed.vocab:
        print(json.dumps(VocabularyResult.from_sentences(results).model_dump(), ensure_ascii=False))
    elif parsed.with_info:
        print('\n\n'.join(format_word_info_text(words) for words in results))
    else:
        for words in results:
            print(' '.join(w.surface for w in words))

    return 0


if __name__ == '__main__':
    sys.exit(main())
