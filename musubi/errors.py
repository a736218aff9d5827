"""
Exceptions raised by Musubi.

Every error names the surface form of the morpheme that caused it.
Errors are terminal for the call that raised them: no partial result
is returned.
"""


class MusubiError(Exception):
    """Base class for all Musubi errors."""


class AnalyzerUnavailable(MusubiError):
    """Raised when the MeCab tagger cannot be constructed."""


# ============================================================================
# Feature Parsing
# ============================================================================

class ParseError(MusubiError):
    """Raised when a raw morpheme cannot be turned into a token."""

    def __init__(self, surface: str, reason: str):
        self.surface = surface
        self.reason = reason
        super().__init__(f"Couldn't parse token '{surface}': {reason}")


class MalformedFeature(ParseError):
    """Raised when a feature string doesn't have the field count of the IPADIC schema."""

    def __init__(self, surface: str, feature: str, field_count: int):
        self.feature = feature
        self.field_count = field_count
        super().__init__(
            surface,
            f"expected 6 to 9 feature fields, got {field_count} "
            f"({feature!r}). Make sure you're using an IPADIC dictionary",
        )


class UnrecognizedPrimaryPos(ParseError):
    """Raised when the top-level part of speech is unknown or unset."""

    def __init__(self, surface: str, label: str):
        self.label = label
        super().__init__(surface, f"main part of speech {label!r} couldn't be identified")


# ============================================================================
# Word Aggregation
# ============================================================================

class AggregationError(MusubiError):
    """Raised when a token sequence cannot be folded into words."""

    def __init__(self, surface: str, reason: str):
        self.surface = surface
        self.reason = reason
        super().__init__(f"{reason} for token '{surface}'")


class UnresolvedPartOfSpeech(AggregationError):
    """Raised when no rule assigns a part of speech to a token."""

    def __init__(self, surface: str):
        super().__init__(surface, "Part of speech couldn't be recognized")


class MissingLookaheadToken(AggregationError):
    """Raised when a rule needs to consume a following token that doesn't exist."""

    def __init__(self, surface: str):
        super().__init__(surface, "A following token was required but the sequence ended")
