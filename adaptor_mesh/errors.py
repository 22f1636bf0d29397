"""Exceptions raised by adaptor mesh operations."""

from typing import Optional


class AdaptorMeshError(Exception):
    """Base class for all adaptor mesh errors."""


class ConfigurationError(AdaptorMeshError):
    """Static configuration is invalid or inconsistent."""


class ConfigNotFound(ConfigurationError):
    """A required configuration entry is missing."""


class AdaptorMismatch(AdaptorMeshError):
    """
    On-chain trusted peer address disagrees with the configured one.

    Raised as soon as the drift is detected. Work already confirmed for
    earlier peers stays applied; the operator has to resolve the conflict
    before running again.
    """

    def __init__(self, peer, expected: str, found: str, local_adaptor: Optional[str] = None):
        self.peer = peer
        self.expected = expected
        self.found = found
        self.local_adaptor = local_adaptor
        location = f" on adaptor {local_adaptor}" if local_adaptor else ""
        super().__init__(
            f"Adaptor mismatch for peer {peer}{location}: "
            f"expected {expected}, found {found}"
        )


class ContractCallReverted(AdaptorMeshError):
    """A contract call reverted."""

    def __init__(self, function: str, reason: str = ""):
        self.function = function
        self.reason = reason
        super().__init__(f"Call to {function} reverted: {reason or 'no reason given'}")
