"""View API routes: list views, project documents, render the design document."""

import logging
from typing import Any

from fastapi import APIRouter, Body, HTTPException, status

from docviews.projections.design import render_design_document
from docviews.projections.errors import (
    InvalidFieldError,
    MissingFieldError,
    ViewNotFoundError,
)
from docviews.projections.registry import ViewRegistry
from docviews.schemas.views import (
    DesignDocument,
    EmittedRow,
    ProjectResponse,
    ViewListResponse,
    ViewSummary,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/views", tags=["views"])


@router.get("", response_model=ViewListResponse)
async def list_views() -> ViewListResponse:
    """List registered views."""
    return ViewListResponse(
        views=[
            ViewSummary(
                name=config.name,
                description=config.description,
                has_map_source=config.map_source is not None,
            )
            for config in ViewRegistry.all_views().values()
        ]
    )


@router.get("/design", response_model=DesignDocument)
async def get_design_document() -> dict:
    """Render the design document for all registered views."""
    return render_design_document(ViewRegistry.all_views().values())


@router.post("/{name}/project", response_model=ProjectResponse)
async def project_document(
    name: str,
    document: dict[str, Any] = Body(...),
) -> ProjectResponse:
    """Run one view over a posted document.

    Args:
        name: Registered view name.
        document: The document to decompose.

    Returns:
        All rows the view emits, in emission order.

    Raises:
        HTTPException: 404 if the view is unknown, 422 if the document is
            missing a field the view reads or has a malformed collection.
    """
    try:
        config = ViewRegistry.require(name)
    except ViewNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    try:
        rows = [EmittedRow(key=pair.key, value=pair.value) for pair in config.project(document)]
    except (MissingFieldError, InvalidFieldError) as e:
        logger.warning("Projection of view %s failed: %s", name, e)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )

    return ProjectResponse(view=name, rows=rows, total_rows=len(rows))
