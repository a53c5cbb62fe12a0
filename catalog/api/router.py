"""
API Router
/api 하위에 리소스별 라우터 등록
"""

from typing import Tuple

from fastapi import APIRouter

from catalog.features.books.definition import BOOK
from catalog.features.movies.definition import MOVIE
from catalog.features.paintings.definition import PAINTING
from catalog.features.resources.definition import EntityDefinition
from catalog.features.resources.router import build_resource_router

RESOURCES: Tuple[EntityDefinition, ...] = (BOOK, MOVIE, PAINTING)

api_router = APIRouter()

for _definition in RESOURCES:
    api_router.include_router(build_resource_router(_definition))
