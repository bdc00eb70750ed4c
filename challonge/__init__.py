from challonge.core.errors import DecodeError, UnknownVariantError
from challonge.models import (
    Index,
    RankedBy,
    Tournament,
    TournamentId,
    TournamentState,
    TournamentType,
)
from challonge.schemas.tournament_schemas import TournamentCreate
from challonge.services.tournament_decoder import (
    decode_index,
    decode_tournament,
    decode_tournaments,
)

decode = decode_tournament
decode_many = decode_tournaments
