from __future__ import annotations


class StudioError(Exception):
    """Base class for all studiosim errors."""


class ValidationError(StudioError):
    """A player action was rejected. The channel was not modified."""


class UploadError(ValidationError):
    """An upload precondition failed."""


class InvalidTitle(UploadError):
    def __init__(self) -> None:
        super().__init__("Video title cannot be empty")


class InvalidGenre(UploadError):
    def __init__(self, genre: str | None) -> None:
        self.genre = genre
        if genre:
            super().__init__(f"Unknown genre: {genre!r}")
        else:
            super().__init__("A genre must be selected")


class InvalidSubGenre(UploadError):
    def __init__(self, genre: str, sub_genre: str | None) -> None:
        self.genre = genre
        self.sub_genre = sub_genre
        if sub_genre:
            super().__init__(f"{sub_genre!r} is not a sub-genre of {genre!r}")
        else:
            super().__init__(f"Genre {genre!r} requires a sub-genre")


class InvalidRecordingMethod(UploadError):
    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Unknown recording method: {method!r}")


class InsufficientEnergy(UploadError):
    def __init__(self, required: float, available: float) -> None:
        self.required = required
        self.available = available
        super().__init__(f"Not enough energy: need {required:g}, have {available:g}")


class InsufficientFunds(ValidationError):
    def __init__(self, required: float, available: float) -> None:
        self.required = required
        self.available = available
        super().__init__(f"Cannot afford: costs ${required:,.2f}, have ${available:,.2f}")


class MaxLevelReached(ValidationError):
    def __init__(self, slot: str) -> None:
        self.slot = slot
        super().__init__(f"{slot} is already at max level")


class NotEligible(ValidationError):
    """Monetization was requested before the channel met the requirements."""


class AlreadyPlayedToday(ValidationError):
    def __init__(self, kind: str, day: int) -> None:
        self.kind = kind
        self.day = day
        super().__init__(f"{kind} minigame was already played on day {day}")


class ChannelLimitReached(ValidationError):
    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"Channel limit of {limit} reached")


class UnknownChannel(ValidationError):
    def __init__(self, channel_id: str) -> None:
        self.channel_id = channel_id
        super().__init__(f"Unknown channel: {channel_id!r}")


class SessionStateError(StudioError):
    """A minigame session was driven in a way its current phase does not allow."""
