from catalog.domain.models.painting import Painting
from catalog.features.resources.definition import EntityDefinition, KeyAssignment
from .repository import PaintingRepository
from .schemas import PaintingCreate, PaintingFields, PaintingResponse

PAINTING = EntityDefinition(
    name="Painting",
    path="painting",
    label="painting",
    plural="paintings",
    model=Painting,
    key_field="code",
    key_type=str,
    key_assignment=KeyAssignment.CALLER,
    fields_schema=PaintingFields,
    response_schema=PaintingResponse,
    store_factory=PaintingRepository,
    create_schema=PaintingCreate,
)
