"""Run error module
Defines the error taxonomy of the card engine. Engine operations catch these
at their boundary and turn them into ``ActionResult`` records.
"""

from i18n import t as _t

from .results import ActionStatus


class GameError(Exception):
    """Base class for all engine errors

    Every error carries the ``ActionStatus`` it is reported as, so the
    engine can convert it without a lookup table.
    """

    status: ActionStatus = ActionStatus.ENGINE_ERROR

    def __init__(self, message: str, details: dict | None = None):
        """Initialize the error

        Args:
            message: error message
            details: extra structured details (optional)
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# ==================== Player errors ====================


class PlayerNotFoundError(GameError):
    """Raised when an operation names a player without an active run"""

    status = ActionStatus.UNKNOWN_PLAYER

    def __init__(self, message: str | None = None, player_id: object = None):
        if message is None:
            message = _t("exc.player_not_found", player=player_id)
        details = {}
        if player_id is not None:
            details["player_id"] = player_id
        super().__init__(message, details)
        self.player_id = player_id


# ==================== Card errors ====================


class InvalidIndexError(GameError):
    """Raised when a hand instance index falls outside the hand"""

    status = ActionStatus.INVALID_INDEX

    def __init__(
        self,
        message: str | None = None,
        index: int | None = None,
        hand_size: int = 0,
    ):
        if message is None:
            message = _t("exc.invalid_index", index=index, size=hand_size)
        details = {"hand_size": hand_size}
        if index is not None:
            details["index"] = index
        super().__init__(message, details)
        self.index = index
        self.hand_size = hand_size


class CardNotFoundError(GameError):
    """Raised when a card id has no registry entry"""

    status = ActionStatus.UNKNOWN_CARD

    def __init__(self, message: str | None = None, card_id: str | None = None):
        if message is None:
            message = _t("exc.card_not_found", card=card_id)
        details = {}
        if card_id:
            details["card_id"] = card_id
        super().__init__(message, details)
        self.card_id = card_id


class InsufficientResourcesError(GameError):
    """Raised when a player cannot pay for an acquisition"""

    status = ActionStatus.INSUFFICIENT_RESOURCES

    def __init__(
        self,
        message: str | None = None,
        resource: str | None = None,
        required: int = 0,
        available: int = 0,
    ):
        if message is None:
            message = _t(
                "exc.insufficient_resources",
                resource=resource,
                required=required,
                available=available,
            )
        details = {
            "required": required,
            "available": available,
        }
        if resource:
            details["resource"] = resource
        super().__init__(message, details)
        self.resource = resource
        self.required = required
        self.available = available


# ==================== Data / config errors ====================


class ConfigurationError(GameError):
    """Raised for an invalid run configuration"""

    def __init__(self, message: str | None = None, config_key: str | None = None):
        if message is None:
            message = _t("exc.configuration_error")
        details = {}
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details)
        self.config_key = config_key


class DataLoadError(GameError):
    """Raised when the card table cannot be read or is malformed"""

    def __init__(
        self,
        message: str | None = None,
        file_path: str | None = None,
        reason: str | None = None,
    ):
        if message is None:
            message = _t("exc.data_load_error")
        details = {}
        if file_path:
            details["file_path"] = file_path
        if reason:
            details["reason"] = reason
        super().__init__(message, details)
        self.file_path = file_path
        self.reason = reason


def raise_if_unaffordable(resource: str, required: int, available: int) -> None:
    """Raise InsufficientResourcesError when ``available < required``

    Args:
        resource: resource name
        required: cost
        available: current amount
    """
    if available < required:
        raise InsufficientResourcesError(
            resource=resource, required=required, available=available
        )
