import base64
import json
import logging
from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from fastapi.responses import Response
from sqlalchemy.orm import Session
from typing import List, Optional

from golfcartly.core.config import settings
from golfcartly.core.database import get_db
from golfcartly.core.errors import ApiError, ErrorKind, handle_errors
from golfcartly.schemas.wiring import WiringDiagramCreate, WiringDiagramResponse
from golfcartly.services import catalog

logger = logging.getLogger(__name__)

router = APIRouter()

UPLOAD_FAILED = "Failed to upload wiring diagram"
DEFAULT_IMAGE_TYPE = "image/png"


def parse_optional_int(field: str, value: Optional[str]) -> Optional[int]:
    """Form values arrive as text; blank means absent."""
    if value is None or not value.strip():
        return None
    try:
        return int(value)
    except ValueError:
        raise ApiError(ErrorKind.VALIDATION, UPLOAD_FAILED, detail=f"{field} must be an integer")


def parse_tags(value: Optional[str]) -> Optional[List[str]]:
    """Tags arrive as a JSON-encoded array of strings."""
    if not value:
        return None
    try:
        tags = json.loads(value)
    except json.JSONDecodeError:
        raise ApiError(ErrorKind.VALIDATION, UPLOAD_FAILED, detail="tags must be a JSON array")
    if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
        raise ApiError(ErrorKind.VALIDATION, UPLOAD_FAILED, detail="tags must be a JSON array of strings")
    return tags


@router.get("", response_model=List[WiringDiagramResponse])
def list_wiring_diagrams(
    brand_id: Optional[int] = Query(None, alias="brandId"),
    model_id: Optional[int] = Query(None, alias="modelId"),
    db: Session = Depends(get_db),
):
    """Get wiring diagrams matching every supplied filter."""
    with handle_errors("fetch wiring diagrams"):
        return catalog.list_wiring_diagrams(db, brand_id=brand_id, model_id=model_id)


@router.get("/{diagram_id}", response_model=WiringDiagramResponse)
def get_wiring_diagram(diagram_id: int, db: Session = Depends(get_db)):
    with handle_errors("fetch wiring diagram"):
        diagram = catalog.get_wiring_diagram(db, diagram_id)
        if not diagram:
            raise ApiError(ErrorKind.NOT_FOUND, "Wiring diagram not found")
        return diagram


@router.post("", response_model=WiringDiagramResponse, status_code=201)
async def upload_wiring_diagram(
    title: str = Form(...),
    file: Optional[UploadFile] = File(None),
    model_id: Optional[str] = Form(None, alias="modelId"),
    brand_id: Optional[str] = Form(None, alias="brandId"),
    description: Optional[str] = Form(None),
    year: Optional[str] = Form(None),
    image_url: Optional[str] = Form(None, alias="imageUrl"),
    is_custom_drawing: Optional[str] = Form(None, alias="isCustomDrawing"),
    tags: Optional[str] = Form(None),
    db: Session = Depends(get_db),
):
    """Upload a wiring diagram. The file, if any, is stored inline as base64."""
    with handle_errors("upload wiring diagram"):
        image_data = file_name = file_type = file_size = None

        if file is not None and file.filename:
            # One byte past the limit is enough to reject
            content = await file.read(settings.MAX_UPLOAD_SIZE + 1)
            if len(content) > settings.MAX_UPLOAD_SIZE:
                raise ApiError(
                    ErrorKind.VALIDATION,
                    UPLOAD_FAILED,
                    detail=f"File too large. Maximum size: {settings.MAX_UPLOAD_SIZE // (1024 * 1024)}MB",
                )
            image_data = base64.b64encode(content).decode("ascii")
            file_name = file.filename
            file_type = file.content_type
            file_size = len(content)

        data = WiringDiagramCreate(
            title=title,
            model_id=parse_optional_int("modelId", model_id),
            brand_id=parse_optional_int("brandId", brand_id),
            description=description or None,
            year=parse_optional_int("year", year),
            image_data=image_data,
            file_name=file_name,
            file_type=file_type,
            file_size=file_size,
            image_url=image_url or None,
            is_custom_drawing=is_custom_drawing == "true",
            tags=parse_tags(tags),
        )
        return catalog.create_wiring_diagram(db, data)


@router.get("/{diagram_id}/image")
def get_wiring_diagram_image(diagram_id: int, db: Session = Depends(get_db)):
    """Serve the stored file as raw bytes with its stored content type."""
    with handle_errors("fetch image"):
        diagram = catalog.get_wiring_diagram(db, diagram_id)
        if not diagram:
            raise ApiError(ErrorKind.NOT_FOUND, "Wiring diagram not found")
        if not diagram.image_data:
            raise ApiError(ErrorKind.NOT_FOUND, "No image data available")

        content = base64.b64decode(diagram.image_data)
        return Response(content=content, media_type=diagram.file_type or DEFAULT_IMAGE_TYPE)
