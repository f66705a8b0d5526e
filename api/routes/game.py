"""Game API endpoints."""

from random import Random

from fastapi import APIRouter, HTTPException

from api.schemas import EventResponse, PlayGameRequest, PlayGameResponse, StrategySpec
from twentyone.cards import CardSource
from twentyone.game import TwentyOneGame
from twentyone.strategy import Strategy, UnknownStrategyError, resolve_strategy

router = APIRouter()


def strategy_from_spec(spec: StrategySpec) -> Strategy:
    """Resolve a requested strategy, turning lookup failures into 400s."""
    try:
        return resolve_strategy(spec.name, spec.limit)
    except UnknownStrategyError:
        raise HTTPException(status_code=400, detail=f"Unknown strategy: {spec.name}")
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


@router.post("/play")
async def play(request: PlayGameRequest) -> PlayGameResponse:
    """Play one game between two named strategies."""
    player = strategy_from_spec(request.player)
    house = strategy_from_spec(request.house)

    game = TwentyOneGame(house, player, cards=CardSource(Random(request.seed)))
    outcome = game.play()

    return PlayGameResponse(
        outcome=outcome.value,
        player_wins=outcome.is_player_win,
        player_up_card=game.player.up_card,
        house_up_card=game.house.up_card,
        player_tally=game.player.tally,
        house_tally=game.house.tally,
        events=[
            EventResponse(event_type=e.event_type.name, data=e.data)
            for e in game.events.history
        ],
    )
