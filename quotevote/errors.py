"""Exception types raised outside the rendering core."""


class QuoteVoteError(Exception):
    """Base class for quotevote errors."""


class VoteFormatError(QuoteVoteError, ValueError):
    """A raw vote record could not be turned into a Vote."""


class ConfigError(QuoteVoteError, ValueError):
    """Highlight configuration is present but invalid."""
