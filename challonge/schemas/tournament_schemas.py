from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field

from challonge.models.enums import RankedBy, TournamentType


class TournamentCreate(BaseModel):
    """Settings for creating a tournament.

    Pure data: serializing it into request parameters is left to the HTTP
    client, which sends ``tournament_type.to_get_param()`` for the type.
    """

    name: str = Field(max_length=60)  # event name/title
    tournament_type: TournamentType = TournamentType.SINGLE_ELIMINATION
    url: str = Field(pattern=r"^[A-Za-z0-9_]+$")  # challonge.com/url
    # subdomain.challonge.com/url, needs write access to the subdomain
    subdomain: str = ""
    description: str = ""  # shown above the bracket
    open_signup: bool = False  # host a sign-up page
    hold_third_place_match: bool = False  # single elimination only

    # Swiss only
    pts_for_match_win: float = 1.0
    pts_for_match_tie: float = 0.5
    pts_for_game_win: float = 0.0
    pts_for_game_tie: float = 0.0
    pts_for_bye: float = 1.0
    swiss_rounds: int = Field(default=0, ge=0)
    ranked_by: RankedBy = RankedBy.MATCH_WINS

    # Round robin only
    rr_pts_for_match_win: float = 1.0
    rr_pts_for_match_tie: float = 0.5
    rr_pts_for_game_win: float = 0.0
    rr_pts_for_game_tie: float = 0.0

    show_rounds: bool = False  # single & double elimination only
    private: bool = False
    notify_users_when_matches_open: bool = False
    notify_users_when_the_tournament_ends: bool = False
    # Pair straight down the participant list instead of by seed
    sequential_pairings: bool = False
    # Participants past the cap go on a waiting list
    signup_cap: int = Field(default=0, ge=0)
    start_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    check_in_duration: int = Field(default=0, ge=0)  # minutes
    # Double elimination only: None, "single match" or "skip"
    grand_finals_modifier: Optional[str] = None
