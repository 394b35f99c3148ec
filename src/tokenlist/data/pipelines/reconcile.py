"""
Reconciliation of a freshly built token list against the published one.

A run publishes at most one new version. It does so only when the previous
document could be read, the token list actually changed, and the new list
is not empty. ``ReconcilePolicy.bootstrap_missing`` relaxes the first
condition: an unreadable previous document then counts as version 0, so a
missing or corrupt ``tokenlist.json`` gets rewritten as version 1.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from ..config import ChainConfig
from ..models import Token, TokenListDocument, Version


class MergeAction(Enum):
    WRITE = "write"
    SKIP_NO_PREVIOUS = "skip_no_previous"
    SKIP_UNCHANGED = "skip_unchanged"
    SKIP_EMPTY = "skip_empty"


@dataclass(frozen=True)
class ReconcilePolicy:
    bootstrap_missing: bool = False
    list_logo_uri: str = ""
    time_format: str = "%Y-%m-%dT%H:%M:%S.%f"


@dataclass(frozen=True)
class MergeDecision:
    action: MergeAction
    reason: str
    document: Optional[TokenListDocument] = None

    @property
    def should_write(self) -> bool:
        return self.action is MergeAction.WRITE


def list_name(chain: ChainConfig) -> str:
    return f"Trust Wallet: {chain.name}"


def reconcile(
    tokens: List[Token],
    previous: Optional[TokenListDocument],
    chain: ChainConfig,
    policy: ReconcilePolicy = ReconcilePolicy(),
    now: Optional[datetime] = None,
) -> MergeDecision:
    """Decide whether ``tokens`` (already sorted) become a new published version."""
    if previous is None:
        if not policy.bootstrap_missing:
            return MergeDecision(MergeAction.SKIP_NO_PREVIOUS, "previous token list is missing or unreadable")
        if not tokens:
            return MergeDecision(MergeAction.SKIP_EMPTY, "refusing to publish an empty token list")
        previous = TokenListDocument()

    if tokens == previous.tokens:
        return MergeDecision(MergeAction.SKIP_UNCHANGED, f"token list unchanged at version {previous.version.major}")

    if not tokens:
        return MergeDecision(MergeAction.SKIP_EMPTY, "refusing to publish an empty token list")

    now = now or datetime.now(timezone.utc)
    major = previous.version.major + 1
    document = TokenListDocument(
        name=list_name(chain),
        logo_uri=policy.list_logo_uri,
        timestamp=now.strftime(policy.time_format),
        tokens=list(tokens),
        version=Version(major=major),
    )
    return MergeDecision(MergeAction.WRITE, f"publishing version {major}", document)
