import logging

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from bar_admin import schemas
from bar_admin.db import get_db
from bar_admin.domain.bar.tags import normalize_option_name
from bar_admin.services.options import get_option, list_option_names, list_options, option_model

router = APIRouter(prefix="/admin/options", tags=["admin-options"])

logger = logging.getLogger("bar_admin.options")


@router.get("", response_model=schemas.OptionsOut)
def get_all_options(db: Session = Depends(get_db)):
    return schemas.OptionsOut(
        activities=list_option_names(db, "activities"),
        servings=list_option_names(db, "servings"),
    )


@router.get("/{kind}", response_model=list[schemas.OptionOut])
def get_options(kind: schemas.OptionKind, db: Session = Depends(get_db)):
    return list_options(db, kind)


@router.post("/{kind}", response_model=schemas.OptionOut, status_code=201)
def create_option(
    kind: schemas.OptionKind,
    payload: schemas.OptionCreate,
    db: Session = Depends(get_db),
):
    try:
        name = normalize_option_name(payload.name)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    if get_option(db, kind, name):
        raise HTTPException(status_code=409, detail="Option already exists")
    option = option_model(kind)(name=name, display_order=payload.display_order)
    db.add(option)
    db.commit()
    db.refresh(option)
    logger.info("option created kind=%s name=%s", kind, name)
    return option


@router.delete("/{kind}/{name}", status_code=204)
def delete_option(kind: schemas.OptionKind, name: str, db: Session = Depends(get_db)):
    option = get_option(db, kind, name)
    if not option:
        raise HTTPException(status_code=404, detail="Option not found")
    db.delete(option)
    db.commit()
    logger.info("option deleted kind=%s name=%s", kind, name)
    return Response(status_code=204)
