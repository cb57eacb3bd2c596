from fastapi import APIRouter, Depends, HTTPException, Query
from ..core.exceptions import StoreError
from ..core.security import require_api_key
from ..models.score import ScoreRequest
from ..models.response import PersonNameResponse, ScoreResponse, TopScoresResponse
from ..models.data import ScoreRecord
from ..database import DatabaseManager
from ..services import ScoreService
from ..logger import get_logger

logger = get_logger()
router = APIRouter(
    prefix="/api/v1/scores",
    tags=["scores"],
    dependencies=[Depends(require_api_key)]
)

async def get_score_service() -> ScoreService:
    # Get the singleton instance
    db = await DatabaseManager.get_instance()

    # Ensure database is initialized
    if not db.initialized:
        await db.initialize()

    return ScoreService(db.store)

@router.post("", response_model=ScoreResponse, status_code=201)
async def create_score(data: ScoreRequest, service: ScoreService = Depends(get_score_service)):
    """
    Store a score for a person.

    - **firstName**: First name, up to 100 characters
    - **secondName**: Second name, up to 200 characters
    - **score**: Non-negative score value
    """
    rec = ScoreRecord(data.first_name, data.second_name, data.score)
    try:
        await service.ingest([rec])
        return ScoreResponse(first_name=rec.first_name, second_name=rec.second_name, score=rec.score)
    except StoreError as e:
        logger.error(f"Database error while creating score: {e}")
        raise HTTPException(status_code=500, detail="An error occurred while saving the score.")
    except Exception as e:
        logger.error(f"Unexpected error while creating score: {e}")
        raise HTTPException(status_code=500, detail="An unexpected error occurred.")

@router.get("", response_model=ScoreResponse)
async def get_score(
    first_name: str = Query(..., alias="firstName"),
    second_name: str = Query(..., alias="secondName"),
    service: ScoreService = Depends(get_score_service)
):
    """
    Get the score stored for a person. Names match case-insensitively.

    - **firstName**: First name of the person
    - **secondName**: Second name of the person
    """
    if not first_name.strip() or not second_name.strip():
        raise HTTPException(
            status_code=400,
            detail="Both firstName and secondName are required and cannot be empty."
        )

    try:
        result = await service.lookup(first_name, second_name)
    except Exception as e:
        logger.error(f"Error retrieving score for {first_name} {second_name}: {e}")
        raise HTTPException(status_code=500, detail="An error occurred while retrieving the score.")

    if result is None:
        logger.warning(f"No score found for {first_name} {second_name}")
        raise HTTPException(status_code=404, detail=f"No score found for {first_name} {second_name}.")

    return ScoreResponse(first_name=result.first_name, second_name=result.second_name, score=result.score)

@router.get("/top", response_model=TopScoresResponse)
async def get_top_scores(service: ScoreService = Depends(get_score_service)):
    """Get everyone tied for the highest score, ordered alphabetically"""
    try:
        top = await service.top_scorers()
    except Exception as e:
        logger.error(f"Error retrieving top scores: {e}")
        raise HTTPException(status_code=500, detail="An error occurred while retrieving top scores.")

    people = [
        PersonNameResponse(first_name=person.first_name, second_name=person.second_name)
        for person in top.people
    ]
    return TopScoresResponse(score=top.score if top.score is not None else 0, people=people)
