"""Typed errors raised by the seeding toolkit when strict mode is enabled.

The generators are lenient by default: unknown ids are ignored and missing
template data degrades to filler text. Callers that need correctness over
uninterrupted batch completion pass ``strict=True`` (or set
``SEED_STRICT_MODE``) and get one of these instead.
"""

from __future__ import annotations


class SeedError(Exception):
    """Base class for every error raised by ``demo_seed``."""


class UnknownPoolMemberError(SeedError, KeyError):
    def __init__(self, member_id: str) -> None:
        super().__init__(member_id)
        self.member_id = member_id

    def __str__(self) -> str:
        return f"'{self.member_id}' is not a member of this pool"


class PoolQuotaExceededError(SeedError):
    def __init__(self, member_id: str, target_quota: int) -> None:
        super().__init__(f"Pool member '{member_id}' already reached its quota of {target_quota}")
        self.member_id = member_id
        self.target_quota = target_quota


class UnknownChainError(SeedError, KeyError):
    def __init__(self, origin_id: str) -> None:
        super().__init__(origin_id)
        self.origin_id = origin_id

    def __str__(self) -> str:
        return f"No retaliation chain originates from case '{self.origin_id}'"


class ChainAlreadyFulfilledError(SeedError):
    def __init__(self, origin_id: str, follow_up_id: str) -> None:
        super().__init__(
            f"Chain for case '{origin_id}' is already fulfilled by '{follow_up_id}'; "
            "pass overwrite=True to replace it"
        )
        self.origin_id = origin_id
        self.follow_up_id = follow_up_id
