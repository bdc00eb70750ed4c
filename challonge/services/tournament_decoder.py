"""Turns tournament response payloads into ``Tournament`` records.

Single records are decoded strictly at the envelope and for the mandatory
timestamps, and leniently everywhere else: a field of the wrong shape takes
its zero value. Lists are decoded best-effort, dropping elements that fail.
"""
import logging
from datetime import datetime
from typing import Any, Callable, List, Optional, Tuple

from challonge.core.config import Settings, settings as default_settings
from challonge.core.errors import DecodeError, UnknownVariantError
from challonge.models.enums import TournamentType
from challonge.models.tournament_model import Index, Tournament
from challonge.services.json_access import (
    as_object,
    read_bool,
    read_quoted_float,
    read_str,
    read_u64,
    take_required,
)
from challonge.services.timestamps import read_timestamp

logger = logging.getLogger(__name__)

ENVELOPE_KEY = "tournament"


def _boolean(raw: Any) -> bool:
    value = read_bool(raw)
    return False if value is None else value


def _unsigned(raw: Any) -> int:
    value = read_u64(raw)
    return 0 if value is None else value


def _quoted_float(raw: Any) -> float:
    value = read_quoted_float(raw)
    return 0.0 if value is None else value


def _text(raw: Any) -> str:
    value = read_str(raw)
    return "" if value is None else value


def _required_timestamp(raw: Any) -> datetime:
    value = read_timestamp(raw)
    if value is None:
        raise DecodeError("Expected RFC 3339 timestamp", raw)
    return value


def _tournament_type(raw: Any) -> TournamentType:
    text = _text(raw)
    try:
        return TournamentType.parse(text)
    except UnknownVariantError:
        logger.debug("Unknown tournament type %r, using single elimination", text)
        return TournamentType.SINGLE_ELIMINATION


# Every key listed here must be present in the payload. started_at is read
# separately because it may be missing.
TOURNAMENT_FIELDS: Tuple[Tuple[str, Callable[[Any], Any]], ...] = (
    ("accept_attachments", _boolean),
    ("allow_participant_match_reporting", _boolean),
    ("anonymous_voting", _boolean),
    ("created_at", _required_timestamp),
    ("created_by_api", _boolean),
    ("credit_capped", _boolean),
    ("description", _text),
    ("game_id", _unsigned),
    ("id", _unsigned),
    ("name", _text),
    ("group_stages_enabled", _boolean),
    ("hide_forum", _boolean),
    ("hide_seeds", _boolean),
    ("hold_third_place_match", _boolean),
    ("max_predictions_per_user", _unsigned),
    ("notify_users_when_matches_open", _boolean),
    ("notify_users_when_the_tournament_ends", _boolean),
    ("open_signup", _boolean),
    ("participants_count", _unsigned),
    ("prediction_method", _unsigned),
    ("private", _boolean),
    ("progress_meter", _unsigned),
    ("pts_for_bye", _quoted_float),
    ("pts_for_game_tie", _quoted_float),
    ("pts_for_game_win", _quoted_float),
    ("pts_for_match_tie", _quoted_float),
    ("pts_for_match_win", _quoted_float),
    ("quick_advance", _boolean),
    ("require_score_agreement", _boolean),
    ("rr_pts_for_game_tie", _quoted_float),
    ("rr_pts_for_game_win", _quoted_float),
    ("rr_pts_for_match_tie", _quoted_float),
    ("rr_pts_for_match_win", _quoted_float),
    ("sequential_pairings", _boolean),
    ("show_rounds", _boolean),
    ("swiss_rounds", _unsigned),
    ("teams", _boolean),
    ("tournament_type", _tournament_type),
    ("updated_at", _required_timestamp),
    ("url", _text),
    ("description_source", _text),
    ("full_challonge_url", _text),
    ("live_image_url", _text),
    ("review_before_finalizing", _boolean),
    ("accepting_predictions", _boolean),
    ("participants_locked", _boolean),
    ("game_name", _text),
    ("participants_swappable", _boolean),
    ("team_convertable", _boolean),
    ("group_stages_were_started", _boolean),
)


def decode_tournament(value: Any) -> Tournament:
    """Decodes a ``{"tournament": {...}}`` payload.

    Raises DecodeError if the payload is not wrapped in the envelope object,
    if a known key is missing, or if created_at/updated_at are not RFC 3339
    strings. Other malformed fields fall back to their zero value.
    """
    envelope = as_object(value)
    fields = as_object(take_required(envelope, ENVELOPE_KEY))

    raw_started_at = fields.pop("started_at", None)
    started_at = read_timestamp(raw_started_at)
    if started_at is None and raw_started_at is not None:
        logger.debug("Ignoring unparsable started_at %r", raw_started_at)

    record = {"started_at": started_at}
    for key, coerce in TOURNAMENT_FIELDS:
        record[key] = coerce(take_required(fields, key))
    return Tournament(**record)


def decode_tournaments(value: Any, settings: Optional[Settings] = None) -> List[Tournament]:
    """Decodes a bare array of tournament payloads.

    Elements that fail to decode are skipped; anything other than a list
    yields an empty result.
    """
    settings = settings or default_settings
    if not isinstance(value, (list, tuple)):
        if settings.LOG_DECODE_FAILURES:
            logger.debug("Expected a list of tournaments, got %s", type(value).__name__)
        return []

    tournaments: List[Tournament] = []
    for index, item in enumerate(value):
        try:
            tournaments.append(decode_tournament(item))
        except DecodeError as e:
            if settings.LOG_DECODE_FAILURES:
                logger.log(
                    logging.getLevelName(settings.DROPPED_RECORD_LOG_LEVEL),
                    "Dropping tournament at position %d: %s", index, e,
                )
    return tournaments


def decode_index(value: Any, settings: Optional[Settings] = None) -> Index:
    return Index(tournaments=decode_tournaments(value, settings))
