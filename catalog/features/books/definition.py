from catalog.core.database.base import INT64_MAX, INT64_MIN
from catalog.domain.models.book import Book
from catalog.features.resources.definition import EntityDefinition, KeyAssignment
from .repository import BookRepository
from .schemas import BookFields, BookResponse

BOOK = EntityDefinition(
    name="Book",
    path="books",
    label="book",
    plural="books",
    model=Book,
    key_field="id",
    key_type=int,
    key_assignment=KeyAssignment.STORE,
    fields_schema=BookFields,
    response_schema=BookResponse,
    store_factory=BookRepository,
    key_bounds=(INT64_MIN, INT64_MAX),
)
