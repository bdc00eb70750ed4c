from .enums import RankedBy, TournamentType, TournamentState
from .tournament_id import TournamentId
from .tournament_model import Tournament, Index
