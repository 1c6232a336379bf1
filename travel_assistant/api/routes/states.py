"""
State API routes.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import HTMLResponse

from travel_assistant.api.dependencies import get_settings_dep, get_state_directory
from travel_assistant.api.schemas.common import ErrorResponse
from travel_assistant.api.schemas.state import CodeOptionResponse, ListingResponse, StateResponse
from travel_assistant.core.config import Settings
from travel_assistant.directory import NotFound, StateDirectory
from travel_assistant.directory.markup import build_dropdown, render_listing_html

router = APIRouter()


@router.get("", response_model=ListingResponse)
def list_states(
    column_size: Optional[int] = Query(None, description="States per column"),
    directory: StateDirectory = Depends(get_state_directory),
    settings: Settings = Depends(get_settings_dep),
):
    """
    List all states with their open ride needs and shares, in columns.
    """
    if column_size is None:
        column_size = settings.column_size
    listing = directory.activity_listing(column_size=column_size)
    return ListingResponse.from_listing(listing)


@router.get("/codes", response_model=List[CodeOptionResponse])
def list_codes(
    selected: Optional[str] = Query(None, description="Code to mark as selected"),
    directory: StateDirectory = Depends(get_state_directory),
):
    """
    List state codes for a dropdown menu.
    """
    return [
        CodeOptionResponse(code=code, selected=is_selected)
        for code, is_selected in directory.list_codes(selected)
    ]


@router.get("/dropdown", response_class=HTMLResponse)
def state_dropdown(
    selected: Optional[str] = Query(None, description="Code to mark as selected"),
    directory: StateDirectory = Depends(get_state_directory),
):
    """
    <option> elements for a state code <select>.
    """
    return HTMLResponse(build_dropdown(directory.list_codes(selected)))


@router.get("/listing.html", response_class=HTMLResponse)
def state_listing_html(
    column_size: Optional[int] = Query(None, description="States per column"),
    directory: StateDirectory = Depends(get_state_directory),
    settings: Settings = Depends(get_settings_dep),
):
    """
    The state listing as HTML.
    """
    if column_size is None:
        column_size = settings.column_size
    listing = directory.activity_listing(column_size=column_size)
    return HTMLResponse(render_listing_html(listing))


@router.get("/{slug}", response_model=StateResponse, responses={404: {"model": ErrorResponse}})
def get_state(slug: str, directory: StateDirectory = Depends(get_state_directory)):
    """
    Get state information by URL slug (e.g., "new-york").
    """
    region = directory.find_by_slug(slug)
    if isinstance(region, NotFound):
        raise HTTPException(status_code=404, detail=region.message)

    return StateResponse.from_region(region)
