"""Race catalog endpoints for the V1 API."""

from fastapi import APIRouter, Depends

from ...config.settings import get_settings
from ...models.races import ListRacesRequest, ListRacesResponse, RaceRead
from ...services.catalog import races_repo

router = APIRouter(tags=["races"])


@router.post("/list", response_model=ListRacesResponse)
def list_races(request: ListRacesRequest, settings=Depends(get_settings)):
    """
    List races, optionally filtered and ordered.

    Args: \n
        request: Optional filter with meeting ids, a visible-only flag and an
            order by expression such as "meeting_id, advertised_start_time desc"
        settings: Application settings (injected)

    Returns: \n
        ListRacesResponse with the matching races. Without an order by
        expression races are ordered by advertised start time, latest first.

    Raises: \n
        InvalidOrderByField: If the order by expression is malformed or names an unknown field
        DatabaseError: If the query fails
    """
    races = races_repo.list(request.filter, settings.database_path)
    return ListRacesResponse(races=races)


@router.get("/{race_id}", response_model=RaceRead)
def get_race(race_id: int, settings=Depends(get_settings)):
    """
    Get a single race by id.

    Raises: \n
        EntityNotFound: If no race has the given id
    """
    return races_repo.get(race_id, settings.database_path)
