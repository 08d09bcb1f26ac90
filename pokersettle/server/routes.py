"""
HTTP API Routes for PokerSettle.

Every route is stateless: players and cards arrive with the request, are
turned into core objects, and the settled result goes back in the response.
"""

import random
from itertools import chain
from typing import Any, Dict, List, Sequence

from fastapi import APIRouter, HTTPException

from pokersettle import __version__
from pokersettle.agents.heuristic import calculate_hand_strength, make_decision
from pokersettle.core.card import Card
from pokersettle.core.hand import best_available_hand, compare_hands, evaluate_hand, get_best_hand
from pokersettle.core.player import Player, PlayerState
from pokersettle.core.pots import calculate_side_pots
from pokersettle.core.rules import (
    DIFFICULTY_CONFIG, DIFFICULTY_DESCRIPTIONS, DIFFICULTY_LABELS,
    HOLE_CARDS, GamePhase, TableState, get_difficulty_config,
)
from pokersettle.core.showdown import settle_hand
from pokersettle.core.strength import get_strategic_advice
from pokersettle.server.schemas import (
    AdviceRequest, AdviceResponse, CardsRequest, CompareRequest, CompareResponse,
    DecideRequest, DecisionSchema, DifficultySchema, ErrorSchema, EvaluationSchema,
    PlayerSchema, ShowdownRequest, ShowdownResponse, SidePotsRequest, SidePotsResponse,
)


router = APIRouter()


def parse_card_list(cards: List[str]) -> List[Card]:
    """Parse card strings, rejecting bad notation and repeated cards with a 422."""
    try:
        parsed = [Card.from_string(c) for c in cards]
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    ensure_distinct(parsed)
    return parsed


def parse_hole_cards(cards: List[str]) -> List[Card]:
    """Hole cards are either unknown (none) or exactly two."""
    if len(cards) not in (0, HOLE_CARDS):
        raise HTTPException(
            status_code=422,
            detail=f"Expected 0 or {HOLE_CARDS} hole cards, got {len(cards)}",
        )
    return parse_card_list(cards)


def ensure_distinct(*groups: Sequence[Card]) -> None:
    """Reject a card that appears twice across the given groups."""
    seen = set()
    for card in chain.from_iterable(groups):
        if card in seen:
            raise HTTPException(status_code=422, detail=f"Duplicate card: {card.short_str}")
        seen.add(card)


def to_player(schema: PlayerSchema) -> Player:
    """Build a core Player from its request schema."""
    if schema.folded:
        state = PlayerState.FOLDED
    elif schema.all_in:
        state = PlayerState.ALL_IN
    else:
        state = PlayerState.ACTIVE

    return Player(
        player_id=schema.id,
        name=schema.name or schema.id,
        seat=schema.seat,
        chips=schema.chips,
        current_bet=schema.current_bet,
        total_bet=schema.total_bet,
        state=state,
        hole_cards=parse_hole_cards(schema.cards),
    )


@router.get("/health")
async def health() -> Dict[str, Any]:
    """Liveness check."""
    return {"status": "ok", "version": __version__}


@router.post("/evaluate", response_model=EvaluationSchema, responses={400: {"model": ErrorSchema}})
async def evaluate(req: CardsRequest) -> Dict[str, Any]:
    """Evaluate exactly five cards."""
    return evaluate_hand(parse_card_list(req.cards)).to_dict()


@router.post("/best_hand", response_model=EvaluationSchema, responses={400: {"model": ErrorSchema}})
async def best_hand(req: CardsRequest) -> Dict[str, Any]:
    """Find the best five-card hand among six or seven cards."""
    return get_best_hand(parse_card_list(req.cards)).to_dict()


@router.post("/compare", response_model=CompareResponse, responses={400: {"model": ErrorSchema}})
async def compare(req: CompareRequest) -> Dict[str, Any]:
    """Compare two hands of 5 to 7 cards each."""
    first = best_available_hand(parse_card_list(req.first))
    second = best_available_hand(parse_card_list(req.second))
    comparison = compare_hands(first, second)
    return {
        "result": (comparison > 0) - (comparison < 0),
        "first": first.to_dict(),
        "second": second.to_dict(),
    }


@router.post("/side_pots", response_model=SidePotsResponse)
async def side_pots(req: SidePotsRequest) -> Dict[str, Any]:
    """Split the players' total bets into main and side pots."""
    pots = calculate_side_pots([to_player(p) for p in req.players])
    return {
        "pots": [pot.to_dict() for pot in pots],
        "total": sum(pot.amount for pot in pots),
    }


@router.post(
    "/showdown",
    response_model=ShowdownResponse,
    responses={400: {"model": ErrorSchema}, 500: {"model": ErrorSchema}},
)
async def showdown(req: ShowdownRequest) -> Dict[str, Any]:
    """
    Settle a hand.

    Evaluates each live player's hand, awards every pot and returns the
    updated stacks.
    """
    players = [to_player(p) for p in req.players]
    board = parse_card_list(req.community_cards)
    ensure_distinct(board, *(p.hole_cards for p in players))

    result = settle_hand(players, board, strict=req.strict)

    return {
        "winners": result.winner_ids,
        "pot_results": [r.to_dict() for r in result.pot_results],
        "stacks": [{"id": p.player_id, "chips": p.chips} for p in players],
        "hands": {pid: ev.to_dict() for pid, ev in result.evaluations.items()},
        "skipped_pots": [pot.to_dict() for pot in result.skipped_pots],
    }


@router.post("/decide", response_model=DecisionSchema)
async def decide(req: DecideRequest) -> Dict[str, Any]:
    """Ask the heuristic AI for a betting decision."""
    try:
        config = get_difficulty_config(req.difficulty)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    player = to_player(req.player)
    table = TableState(
        community_cards=parse_card_list(req.table.community_cards),
        current_bet=req.table.current_bet,
        pot=req.table.pot,
        min_raise=req.table.min_raise,
    )
    ensure_distinct(player.hole_cards, table.community_cards)

    strength = calculate_hand_strength(player.hole_cards, table.community_cards)
    rng = random.Random(req.seed) if req.seed is not None else None
    decision = make_decision(player, table, config, rng=rng, hand_strength=strength)

    return {**decision.to_dict(), "hand_strength": strength}


@router.get("/difficulties", response_model=List[DifficultySchema])
async def difficulties() -> List[Dict[str, Any]]:
    """List the AI difficulty tiers."""
    return [
        {
            "name": level.value,
            "label": DIFFICULTY_LABELS[level],
            "description": DIFFICULTY_DESCRIPTIONS[level],
            **config.to_dict(),
        }
        for level, config in DIFFICULTY_CONFIG.items()
    ]


@router.post("/advice", response_model=AdviceResponse)
async def advice(req: AdviceRequest) -> Dict[str, Any]:
    """Beginner advice for the current decision."""
    phase = None
    if req.phase is not None:
        try:
            phase = GamePhase(req.phase)
        except ValueError:
            raise HTTPException(status_code=400, detail=f"Invalid phase: {req.phase}")

    hole_cards = parse_hole_cards(req.hole_cards)
    community_cards = parse_card_list(req.community_cards)
    ensure_distinct(hole_cards, community_cards)

    text = get_strategic_advice(
        hole_cards,
        community_cards,
        current_bet=req.current_bet,
        player_bet=req.player_bet,
        pot=req.pot,
        phase=phase,
    )
    return {"advice": text}
