"""
Pydantic schemas for API request/response validation.

Cards travel as short strings ("As", "10h", "K♥"). Card counts are not
checked here; the core reports wrong counts itself so the API returns the
same error the Python API would raise.
"""

from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from pokersettle.core.rules import DEFAULT_MIN_RAISE


# ============= Request Schemas =============

class CardsRequest(BaseModel):
    """Cards to evaluate."""
    cards: List[str] = Field(..., description="Cards like 'As', '10h', 'K♥'")


class CompareRequest(BaseModel):
    """Two hands (5 to 7 cards each) to compare."""
    first: List[str]
    second: List[str]


class PlayerSchema(BaseModel):
    """A player's settlement-relevant state."""
    id: str
    name: Optional[str] = None
    seat: int = Field(ge=0, default=0)
    chips: int = Field(ge=0, default=0)
    current_bet: int = Field(ge=0, default=0)
    total_bet: int = Field(ge=0, default=0)
    folded: bool = False
    all_in: bool = False
    cards: List[str] = Field(default_factory=list, description="No cards, or exactly two hole cards")


class SidePotsRequest(BaseModel):
    """Players whose total bets are split into pots."""
    players: List[PlayerSchema]


class ShowdownRequest(BaseModel):
    """Players (with hole cards) and the board to settle."""
    players: List[PlayerSchema]
    community_cards: List[str]
    strict: bool = False


class TableSchema(BaseModel):
    """Table state the decision engine reads."""
    community_cards: List[str] = []
    current_bet: int = Field(ge=0, default=0)
    pot: int = Field(ge=0, default=0)
    min_raise: int = Field(gt=0, default=DEFAULT_MIN_RAISE)


class DecideRequest(BaseModel):
    """Request for an AI decision."""
    player: PlayerSchema
    table: TableSchema
    difficulty: str = "medium"
    seed: Optional[int] = Field(default=None, description="Seed for a reproducible decision")


class AdviceRequest(BaseModel):
    """Request for beginner advice."""
    hole_cards: List[str] = Field(..., description="No cards, or exactly two hole cards")
    community_cards: List[str] = []
    current_bet: int = Field(ge=0, default=0)
    player_bet: int = Field(ge=0, default=0)
    pot: int = Field(ge=0, default=0)
    phase: Optional[str] = Field(default=None, description="pre-flop, flop, turn or river")


# ============= Response Schemas =============

class CardSchema(BaseModel):
    """Card representation."""
    rank: str
    suit: str
    text: str
    color: str


class EvaluationSchema(BaseModel):
    """An evaluated 5-card hand."""
    hand_class: str
    hand_value: int
    name: str
    cards: List[CardSchema]
    values: List[int]
    description: str


class CompareResponse(BaseModel):
    """Comparison outcome: 1 if first wins, -1 if second wins, 0 on tie."""
    result: int
    first: EvaluationSchema
    second: EvaluationSchema


class PotSchema(BaseModel):
    """A main or side pot."""
    amount: int
    eligible_player_ids: List[str]
    is_side_pot: bool


class SidePotsResponse(BaseModel):
    pots: List[PotSchema]
    total: int


class PotResultSchema(BaseModel):
    """The settled outcome of one pot."""
    amount: int
    winner_ids: List[str]
    winner_names: List[str]
    is_side_pot: bool


class StackSchema(BaseModel):
    id: str
    chips: int


class ShowdownResponse(BaseModel):
    """Result of settling a hand."""
    winners: List[str]
    pot_results: List[PotResultSchema]
    stacks: List[StackSchema]
    hands: Dict[str, EvaluationSchema]
    skipped_pots: List[PotSchema] = []


class DecisionSchema(BaseModel):
    """An AI decision."""
    action: str
    amount: Optional[int] = None
    hand_strength: float


class DifficultySchema(BaseModel):
    """A named difficulty tier."""
    name: str
    label: str
    description: str
    fold_threshold: float
    call_threshold: float
    raise_threshold: float
    variance_min: float
    variance_range: float
    pot_odds_threshold: float


class AdviceResponse(BaseModel):
    advice: str


class ErrorSchema(BaseModel):
    """Error response."""
    error: str
    detail: Optional[str] = None
