from enum import Enum

from challonge.core.errors import UnknownVariantError


class RankedBy(str, Enum):
    """Tournament ranking order."""
    MATCH_WINS = "match wins"
    GAME_WINS = "game wins"
    POINTS_SCORED = "points scored"
    POINTS_DIFFERENCE = "points difference"
    CUSTOM = "custom"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "RankedBy":
        # "match_wins" and "match wins" name the same variant
        spaced = text.replace("_", " ")
        for member in cls:
            if member.value == spaced:
                return member
        raise UnknownVariantError(cls.__name__, text)


class TournamentType(str, Enum):
    """A type of a tournament.

    The value is the parameter sent to the remote service; ``str()`` gives
    the display form returned in its responses.
    """
    SINGLE_ELIMINATION = "single_elimination"
    DOUBLE_ELIMINATION = "double_elimination"
    ROUND_ROBIN = "round_robin"
    SWISS = "swiss"

    def __str__(self) -> str:
        return self.value.replace("_", " ")

    @property
    def display(self) -> str:
        return str(self)

    def to_get_param(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "TournamentType":
        """Accepts both "round_robin" and "round robin" style spellings."""
        for member in cls:
            if text == member.value or text == member.display:
                return member
        raise UnknownVariantError(cls.__name__, text)


class TournamentState(str, Enum):
    # Only used as an outbound filter, never decoded
    ALL = "all"
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    ENDED = "ended"

    def __str__(self) -> str:
        return self.value
