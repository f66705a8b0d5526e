"""Trial batch API endpoints."""

from random import Random

from fastapi import APIRouter, HTTPException

from api.routes.game import strategy_from_spec
from api.schemas import StrategyListResponse, TrialsRequest, TrialsResponse
from config import config
from twentyone.cards import CardSource
from twentyone.game import Outcome
from twentyone.statistics import summarize_trials
from twentyone.strategy import strategy_names

router = APIRouter()


@router.get("/strategies")
async def list_strategies() -> StrategyListResponse:
    """List strategies that can be requested by name."""
    return StrategyListResponse(strategies=strategy_names())


@router.post("/run")
def run(request: TrialsRequest) -> TrialsResponse:
    """Run a batch of games and report the player's results."""
    if request.count > config.simulation.max_trials:
        raise HTTPException(
            status_code=400,
            detail=f"count must not exceed {config.simulation.max_trials}",
        )

    player = strategy_from_spec(request.player)
    house = strategy_from_spec(request.house)

    # Fresh stream per request keeps batches independent
    cards = CardSource(Random(request.seed))
    summary = summarize_trials(player, house, request.count, cards=cards)

    return TrialsResponse(
        games=summary.games,
        wins=summary.wins,
        win_rate=summary.win_rate,
        outcomes={outcome.value: summary.count(outcome) for outcome in Outcome},
    )
