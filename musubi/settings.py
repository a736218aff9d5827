"""
Settings and configuration for Musubi.

Values are read once from the environment at import time.
"""

import os

# Debug mode
DEBUG = os.environ.get("MUSUBI_DEBUG", "").lower() in ("1", "true", "yes")

# Extra MeCab arguments (e.g. '-d /usr/lib/mecab/dic/ipadic').
# Empty means the bundled ipadic package is used.
MECAB_ARGS = os.environ.get("MUSUBI_MECAB_ARGS", "")

# IPADIC feature schema:
# pos,pos2,pos3,pos4,inflection type,inflection form,lemma,reading,pronunciation
FEATURE_DELIMITER = ","
MIN_FEATURE_FIELDS = 6
MAX_FEATURE_FIELDS = 9
LEMMA_FIELD = 6
READING_FIELD = 7
TRANSCRIPTION_FIELD = 8
