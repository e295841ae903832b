from typing import Iterator

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from madlib.api.core.container import get_container
from madlib.api.schemas import MadlibList
from madlib.core.errors import StorageError
from madlib.domain.templates import TemplateRepository

router = APIRouter(prefix="/madlibs", tags=["Madlibs"])


def get_db(container=Depends(get_container)) -> Iterator[Session]:
    """Dependency to provide DB session."""
    db = container.plugin.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_template_repo(
    db: Session = Depends(get_db),
) -> TemplateRepository:
    return TemplateRepository(db)


@router.get(
    "",
    summary="List madlibs",
    description="Returns the names of all stored madlibs in storage order.",
    response_model=MadlibList,
)
async def list_madlibs(
    templates: TemplateRepository = Depends(get_template_repo),
):
    try:
        return MadlibList(names=templates.list())
    except StorageError:
        raise HTTPException(status_code=503, detail="Madlib storage unavailable")
