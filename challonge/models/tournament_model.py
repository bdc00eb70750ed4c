from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .enums import TournamentType


class Tournament(BaseModel):
    """A tournament as returned by the remote service.

    Built by ``challonge.services.tournament_decoder``; the field set mirrors
    the keys of the response payload. ``ranked_by`` is present in payloads
    but is not carried here.
    """

    accept_attachments: bool = False
    allow_participant_match_reporting: bool = False
    anonymous_voting: bool = False
    created_at: datetime
    created_by_api: bool = False
    credit_capped: bool = False
    description: str = ""
    game_id: int = Field(default=0, ge=0)
    group_stages_enabled: bool = False
    hide_forum: bool = False
    hide_seeds: bool = False
    hold_third_place_match: bool = False
    id: int = Field(default=0, ge=0)
    max_predictions_per_user: int = Field(default=0, ge=0)
    name: str = ""
    notify_users_when_matches_open: bool = False
    notify_users_when_the_tournament_ends: bool = False
    open_signup: bool = False
    participants_count: int = Field(default=0, ge=0)
    prediction_method: int = Field(default=0, ge=0)
    private: bool = False
    progress_meter: int = Field(default=0, ge=0)

    # Swiss scoring, sent by the service as quoted numbers
    pts_for_bye: float = 0.0
    pts_for_game_tie: float = 0.0
    pts_for_game_win: float = 0.0
    pts_for_match_tie: float = 0.0
    pts_for_match_win: float = 0.0

    quick_advance: bool = False
    require_score_agreement: bool = False

    # Round robin scoring
    rr_pts_for_game_tie: float = 0.0
    rr_pts_for_game_win: float = 0.0
    rr_pts_for_match_tie: float = 0.0
    rr_pts_for_match_win: float = 0.0

    sequential_pairings: bool = False
    show_rounds: bool = False
    started_at: Optional[datetime] = None
    swiss_rounds: int = Field(default=0, ge=0)
    teams: bool = False
    tournament_type: TournamentType = TournamentType.SINGLE_ELIMINATION
    updated_at: datetime
    url: str = ""
    description_source: str = ""
    full_challonge_url: str = ""
    live_image_url: str = ""
    review_before_finalizing: bool = False
    accepting_predictions: bool = False
    participants_locked: bool = False
    game_name: str = ""
    participants_swappable: bool = False
    team_convertable: bool = False
    group_stages_were_started: bool = False

    class Config:
        frozen = True


class Index(BaseModel):
    """A list of tournaments of the account/organization."""
    tournaments: List[Tournament] = Field(default_factory=list)

    class Config:
        frozen = True
