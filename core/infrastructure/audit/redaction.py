"""
Secret redaction for audit output.

Credential-shaped substrings are masked before text reaches the sink.
"""
import re
from dataclasses import dataclass
from typing import Iterable, Optional

DEFAULT_HEX_MIN_LENGTH = 32

MASK = "***"
# Matches at or below this length are masked entirely
SHORT_MATCH_LENGTH = 8
VISIBLE_PREFIX_LENGTH = 4


@dataclass(frozen=True)
class RedactionRule:
    """A named credential pattern."""

    name: str
    pattern: re.Pattern


def default_rules(hex_min_length: int = DEFAULT_HEX_MIN_LENGTH) -> list[RedactionRule]:
    """
    Build the standard rule list, in application order.

    Args:
        hex_min_length: Minimum length of a bare hex run treated as a secret

    Returns:
        Ordered redaction rules
    """
    # A kept prefix must never match the hex rule again
    if hex_min_length <= VISIBLE_PREFIX_LENGTH:
        raise ValueError(
            f"hex_min_length must exceed {VISIBLE_PREFIX_LENGTH}, got: {hex_min_length}"
        )
    return [
        RedactionRule("github_pat", re.compile(r"ghp_[a-zA-Z0-9]{10,}")),
        RedactionRule("github_oauth", re.compile(r"gho_[a-zA-Z0-9]{10,}")),
        RedactionRule("github_fine_grained", re.compile(r"github_pat_[a-zA-Z0-9_]{10,}")),
        RedactionRule("openai_key", re.compile(r"sk-[a-zA-Z0-9-]{8,}")),
        RedactionRule("notion_secret", re.compile(r"secret_[a-zA-Z0-9]{10,}")),
        RedactionRule(
            "hex_token",
            re.compile(r"[a-f0-9]{%d,}" % hex_min_length, re.IGNORECASE),
        ),
    ]


def _mask_match(match: re.Match) -> str:
    secret = match.group(0)
    if len(secret) <= SHORT_MATCH_LENGTH:
        return MASK
    return secret[:VISIBLE_PREFIX_LENGTH] + MASK


class RedactionEngine:
    """
    Masks credential-shaped substrings.

    Rules run in order over the progressively masked text, so a secret
    already masked by an earlier rule is not matched again. Long matches keep
    their first four characters to show which key was involved.
    """

    def __init__(
        self,
        rules: Optional[Iterable[RedactionRule]] = None,
        hex_min_length: int = DEFAULT_HEX_MIN_LENGTH,
    ):
        self._rules = list(rules) if rules is not None else default_rules(hex_min_length)

    @property
    def rules(self) -> tuple[RedactionRule, ...]:
        return tuple(self._rules)

    def mask(self, text: str) -> str:
        """Return ``text`` with every rule match masked."""
        masked = text
        for rule in self._rules:
            masked = rule.pattern.sub(_mask_match, masked)
        return masked
