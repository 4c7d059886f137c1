"""routes/cities.py – City reference data endpoints.

  GET /cities          → id / name / state of every known city
  GET /cities/{name}   → full detail for one city (case-insensitive name)
"""
import logging

from fastapi import APIRouter, HTTPException, status

from ..deps import get_city_handler
from ..models import CityInfo, CitySummary

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cities", tags=["Cities"])


@router.get(
    "",
    response_model=list[CitySummary],
    summary="List all cities",
)
async def list_cities():
    """Every city in the data file, in file order. Empty list if none loaded."""
    try:
        return await get_city_handler().list_cities()
    except Exception as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.get(
    "/{name}",
    response_model=CityInfo,
    summary="Get one city by name",
    responses={
        400: {"description": "City name is empty"},
        404: {"description": "City not found"},
    },
)
async def get_city(name: str):
    """
    Lookup is **case-insensitive** (`new york city` == `NEW YORK CITY`).
    `currentTimeLocal` is computed at request time in the city's time zone.
    """
    if not name.strip():
        logger.warning("City name parameter was empty or whitespace.")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="City name cannot be empty.")

    logger.info(f"Attempting to retrieve information for city: {name}")
    try:
        info = await get_city_handler().get_city_info(name)
    except Exception as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

    if info is None:
        logger.warning(f"City not found: {name}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Information for city '{name}' not found.",
        )
    return info
