"""Movie-info service endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from movie_services.catalog import MovieInfoService
from movie_services.domain import MovieInfo, MovieInfoId

from .deps import get_movie_info_service

router = APIRouter(prefix="/v1", tags=["movieinfos"])


@router.get("/movieinfos", response_model=list[MovieInfo])
async def list_movie_infos(
    year: int | None = Query(None, description="Only return movies released in this year"),
    service: MovieInfoService = Depends(get_movie_info_service),
) -> list[MovieInfo]:
    if year is not None:
        return list(await service.get_by_year(year))
    return list(await service.get_all())


@router.get("/movieinfos/{movie_info_id}", response_model=MovieInfo)
async def get_movie_info(
    movie_info_id: str,
    service: MovieInfoService = Depends(get_movie_info_service),
) -> MovieInfo:
    return await service.get_by_id(MovieInfoId(movie_info_id))


@router.post("/movieinfos", response_model=MovieInfo, status_code=status.HTTP_201_CREATED)
async def add_movie_info(
    movie_info: MovieInfo,
    service: MovieInfoService = Depends(get_movie_info_service),
) -> MovieInfo:
    return await service.add(movie_info)


@router.put("/movieinfos/{movie_info_id}", response_model=MovieInfo)
async def update_movie_info(
    movie_info_id: str,
    movie_info: MovieInfo,
    service: MovieInfoService = Depends(get_movie_info_service),
) -> MovieInfo:
    return await service.update(movie_info, MovieInfoId(movie_info_id))


@router.delete("/movieinfos/{movie_info_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_movie_info(
    movie_info_id: str,
    service: MovieInfoService = Depends(get_movie_info_service),
) -> Response:
    await service.delete(MovieInfoId(movie_info_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
