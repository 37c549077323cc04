"""Telepath game core: dial geometry, round scoring and the game state machine."""

__version__ = "0.1.0"

from .errors import (
    TelepathError,
    InvalidTransitionError,
    InvalidInputError,
    ExhaustedDeckError,
    DeckValidationError,
    SnapshotError,
)
from .geometry import (
    ARC_START_DEGREES,
    ARC_SWEEP_DEGREES,
    ARC_END_DEGREES,
    ARC_MID_DEGREES,
    BULLSEYE_MAX,
    ADJACENT_MAX,
    OUTER_MAX,
    ZoneSegment,
    clamp_dial_value,
    clamp_dial_angle,
    value_to_angle,
    angle_to_value,
    pointer_value_from_center,
    point_on_circle,
    get_score_zone_segments,
)
from .deck import (
    SpectrumCard,
    SpectrumDeck,
    default_deck,
    validate_spectrum_deck,
    is_spectrum_deck,
    load_spectrum_deck,
    shuffle_spectrum_cards,
    build_shuffled_deck,
)
from .state import (
    Phase,
    Mode,
    Team,
    Personality,
    ScoreZone,
    BonusDirection,
    ActualDirection,
    BonusGuess,
    ScoreBreakdown,
    RoundResult,
    Round,
    GameScore,
    GameSettings,
    GameState,
)
from .scoring import (
    BONUS_POINT_VALUE,
    resolve_score_zone,
    get_base_points,
    calculate_round_score,
    calculate_coop_round_score,
    get_coop_rating,
)
from .game import (
    COOP_DECK_SIZE,
    create_initial_game_state,
    start_game,
    start_coop_game,
    submit_psychic_clue,
    submit_human_guess,
    submit_team_guess,
    submit_bonus_guess,
    reveal_round,
    score_round,
    score_coop_round,
    start_next_round,
)
