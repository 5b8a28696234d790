"""
Recordings API: Album Route Handlers
=====================================

What:  Handles POST /albums, GET /albums/artist and GET /albums/get.
How:   Parses the body or query string, delegates to the injected
       AlbumStore, returns JSON. Store exceptions propagate to the global
       handlers in main.py, which choose the status code.

Status codes:
    POST /albums          200 id | 400 bad JSON | 405 wrong method | 500 store
    GET  /albums/artist   200 [album, ...] | 400 missing name | 500 store
    GET  /albums/get      200 album | 400 bad id | 404 unknown id | 500 store

Only POST is registered on /albums, so any other method is answered with
405 by the router before a handler runs.
"""

import logging
import re
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from recordings.exceptions import ValidationError
from recordings.schemas.album import AlbumCreate, AlbumResponse, ErrorResponse
from recordings.services.album_store import AlbumStore, get_album_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Albums"])

# Signed 64-bit range accepted for albumId
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# Optional sign followed by ASCII digits; no whitespace, underscores or prefixes
_DECIMAL_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_album_id(raw: Optional[str]) -> int:
    """
    Parse the albumId query parameter as a base-10 signed 64-bit integer.

    Raises:
        ValidationError: Missing, non-decimal or out-of-range value (→ 400)
    """
    if raw is None or not _DECIMAL_INTEGER.fullmatch(raw):
        raise ValidationError(
            message="Invalid album ID",
            field="albumId",
            context={"value": raw},
        )
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValidationError(
            message="Invalid album ID",
            field="albumId",
            context={"value": raw},
        )
    return value


@router.post(
    "/albums",
    response_model=int,
    responses={
        200: {"description": "ID assigned to the new album"},
        400: {"description": "Malformed JSON body", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Add an album",
)
async def add_album(
    album: AlbumCreate,
    store: AlbumStore = Depends(get_album_store),
) -> int:
    """
    Insert an album and return only its new ID.

    Body validation runs before this function is entered, so a malformed
    body never reaches the store.
    """
    return await store.create(album)


@router.get(
    "/albums/artist",
    response_model=List[AlbumResponse],
    responses={
        400: {"description": "Artist name missing", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="List albums by artist",
)
async def get_albums_by_artist(
    name: Optional[str] = Query(default=None, description="Exact artist name"),
    store: AlbumStore = Depends(get_album_store),
) -> List[AlbumResponse]:
    if not name:
        raise ValidationError(message="Artist name missing", field="name")
    return await store.list_by_artist(name)


@router.get(
    "/albums/get",
    response_model=AlbumResponse,
    responses={
        400: {"description": "Invalid album ID", "model": ErrorResponse},
        404: {"description": "Album not found", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Get an album by ID",
)
async def get_album_by_id(
    album_id: Optional[str] = Query(
        default=None,
        alias="albumId",
        description="Album ID (base-10 integer)",
    ),
    store: AlbumStore = Depends(get_album_store),
) -> AlbumResponse:
    """
    Look up one album.

    The ID is parsed by hand rather than declared as `int` so that values
    outside the 64-bit range, or with spacing, are rejected with 400
    before the store is consulted.
    """
    return await store.get_by_id(parse_album_id(album_id))
