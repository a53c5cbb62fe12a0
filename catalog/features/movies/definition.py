from catalog.domain.models.movie import Movie
from catalog.features.resources.definition import EntityDefinition, KeyAssignment
from .repository import MovieRepository
from .schemas import MovieCreate, MovieFields, MovieResponse

MOVIE = EntityDefinition(
    name="Movie",
    path="movies",
    label="movie",
    plural="movies",
    model=Movie,
    key_field="id",
    key_type=str,
    key_assignment=KeyAssignment.CALLER,
    fields_schema=MovieFields,
    response_schema=MovieResponse,
    store_factory=MovieRepository,
    create_schema=MovieCreate,
)
