import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from bar_admin import models, schemas
from bar_admin.db import get_db
from bar_admin.domain.bar.location import location_wkt, parse_coordinate
from bar_admin.domain.bar.opening_hours import (
    dump_opening_hours,
    format_opening_hours,
    hydrate,
    initialize_empty,
    load_opening_hours,
    set_boundary,
)
from bar_admin.domain.bar.tags import dump_tags, load_tags, normalize_tags
from bar_admin.services.options import list_option_names

router = APIRouter(prefix="/admin/bars", tags=["admin-bars"])

logger = logging.getLogger("bar_admin.bars")

TOGGLEABLE_FLAGS = ("is_facilitated", "is_active")


def _normalize_optional_text(value: str | None) -> str | None:
    if value is None:
        return None
    cleaned = value.strip()
    return cleaned or None


def _opening_hours_text(bar: models.Bar) -> str:
    if bar.opening_hours is None:
        return format_opening_hours(None)
    return format_opening_hours(load_opening_hours(bar.opening_hours))


def _bar_out_payload(bar: models.Bar) -> dict:
    return {
        "id": bar.id,
        "name": bar.name,
        "website": bar.website,
        "featured_image": bar.featured_image,
        "logo": bar.logo,
        "price": bar.price,
        "age_restriction": int(bar.age_restriction or 0),
        "is_facilitated": bool(bar.is_facilitated),
        "is_active": bool(bar.is_active),
        "address": bar.address,
        "activities": load_tags(bar.activities),
        "servings": load_tags(bar.servings),
        "opening_hours": load_opening_hours(bar.opening_hours),
        "opening_hours_text": _opening_hours_text(bar),
        "lat": float(bar.lat) if bar.lat is not None else None,
        "lon": float(bar.lon) if bar.lon is not None else None,
        "location": location_wkt(bar.lat, bar.lon),
        "created_at": bar.created_at,
        "updated_at": bar.updated_at,
    }


def _get_bar_or_404(db: Session, bar_id: str) -> models.Bar:
    bar = db.get(models.Bar, bar_id)
    if not bar:
        raise HTTPException(status_code=404, detail="Bar not found")
    return bar


def _tags_or_400(db: Session, kind: str, values: list[str], current: list[str] | None = None) -> str:
    allowed = list_option_names(db, kind)
    if current:
        allowed.extend(current)
    try:
        return dump_tags(normalize_tags(values, allowed=allowed))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def _coordinate_or_400(value, kind: str) -> float | None:
    try:
        return parse_coordinate(value, kind=kind)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def _opening_hours_payload(payload: schemas.BarCreate | schemas.BarUpdate) -> dict:
    return hydrate({day: item.model_dump() for day, item in (payload.opening_hours or {}).items()})


@router.get("", response_model=list[schemas.BarOut])
def list_bars(db: Session = Depends(get_db)):
    bars = db.query(models.Bar).order_by(models.Bar.name.asc()).all()
    return [_bar_out_payload(bar) for bar in bars]


@router.get("/new", response_model=schemas.BarDraft)
def new_bar_draft(db: Session = Depends(get_db)):
    return schemas.BarDraft(
        opening_hours=initialize_empty(),
        available_activities=list_option_names(db, "activities"),
        available_servings=list_option_names(db, "servings"),
    )


@router.post("", response_model=schemas.BarOut, status_code=201)
def create_bar(payload: schemas.BarCreate, db: Session = Depends(get_db)):
    name = payload.name.strip()
    if not name:
        raise HTTPException(status_code=400, detail="name is required")
    opening_hours = _opening_hours_payload(payload) if payload.opening_hours is not None else initialize_empty()
    bar = models.Bar(
        id=str(uuid.uuid4()),
        name=name,
        website=_normalize_optional_text(payload.website),
        featured_image=_normalize_optional_text(payload.featured_image),
        logo=_normalize_optional_text(payload.logo),
        price=_normalize_optional_text(payload.price),
        age_restriction=payload.age_restriction,
        is_facilitated=payload.is_facilitated,
        is_active=payload.is_active,
        address=_normalize_optional_text(payload.address),
        activities=_tags_or_400(db, "activities", payload.activities),
        servings=_tags_or_400(db, "servings", payload.servings),
        opening_hours=dump_opening_hours(opening_hours),
        lat=_coordinate_or_400(payload.lat, "lat"),
        lon=_coordinate_or_400(payload.lon, "lon"),
    )
    db.add(bar)
    db.commit()
    db.refresh(bar)
    logger.info("bar created id=%s name=%s", bar.id, bar.name)
    return _bar_out_payload(bar)


@router.get("/{bar_id}", response_model=schemas.BarOut)
def get_bar(bar_id: str, db: Session = Depends(get_db)):
    return _bar_out_payload(_get_bar_or_404(db, bar_id))


@router.patch("/{bar_id}", response_model=schemas.BarOut)
def update_bar(bar_id: str, payload: schemas.BarUpdate, db: Session = Depends(get_db)):
    bar = _get_bar_or_404(db, bar_id)

    if payload.name is not None:
        name = payload.name.strip()
        if not name:
            raise HTTPException(status_code=400, detail="name is required")
        bar.name = name
    if payload.website is not None:
        bar.website = _normalize_optional_text(payload.website)
    if payload.featured_image is not None:
        bar.featured_image = _normalize_optional_text(payload.featured_image)
    if payload.logo is not None:
        bar.logo = _normalize_optional_text(payload.logo)
    if payload.price is not None:
        bar.price = _normalize_optional_text(payload.price)
    if payload.age_restriction is not None:
        bar.age_restriction = payload.age_restriction
    if payload.is_facilitated is not None:
        bar.is_facilitated = payload.is_facilitated
    if payload.is_active is not None:
        bar.is_active = payload.is_active
    if payload.address is not None:
        bar.address = _normalize_optional_text(payload.address)
    if payload.activities is not None:
        bar.activities = _tags_or_400(db, "activities", payload.activities, current=load_tags(bar.activities))
    if payload.servings is not None:
        bar.servings = _tags_or_400(db, "servings", payload.servings, current=load_tags(bar.servings))
    if payload.opening_hours is not None:
        # whole-snapshot replace, never merged with what is stored
        bar.opening_hours = dump_opening_hours(_opening_hours_payload(payload))
    if "lat" in payload.model_fields_set:
        bar.lat = _coordinate_or_400(payload.lat, "lat")
    if "lon" in payload.model_fields_set:
        bar.lon = _coordinate_or_400(payload.lon, "lon")

    db.commit()
    db.refresh(bar)
    logger.info("bar updated id=%s", bar.id)
    return _bar_out_payload(bar)


@router.delete("/{bar_id}", status_code=204)
def delete_bar(bar_id: str, db: Session = Depends(get_db)):
    bar = _get_bar_or_404(db, bar_id)
    db.delete(bar)
    db.commit()
    logger.info("bar deleted id=%s", bar_id)
    return Response(status_code=204)


@router.post("/{bar_id}/flags/{flag}/toggle", response_model=schemas.BarOut)
def toggle_bar_flag(bar_id: str, flag: schemas.BarFlag, db: Session = Depends(get_db)):
    if flag not in TOGGLEABLE_FLAGS:
        raise HTTPException(status_code=400, detail="Invalid flag")
    bar = _get_bar_or_404(db, bar_id)
    setattr(bar, flag, not bool(getattr(bar, flag)))
    db.commit()
    db.refresh(bar)
    logger.info("bar flag toggled id=%s flag=%s value=%s", bar.id, flag, getattr(bar, flag))
    return _bar_out_payload(bar)


@router.put("/{bar_id}/opening-hours/{day}/{boundary}", response_model=schemas.BarOut)
def update_opening_hours_boundary(
    bar_id: str,
    day: str,
    boundary: schemas.OpeningHoursBoundary,
    payload: schemas.OpeningHoursBoundaryUpdate,
    db: Session = Depends(get_db),
):
    bar = _get_bar_or_404(db, bar_id)
    hours = set_boundary(load_opening_hours(bar.opening_hours), day, boundary, payload.value)
    bar.opening_hours = dump_opening_hours(hours)
    db.commit()
    db.refresh(bar)
    return _bar_out_payload(bar)


@router.get("/{bar_id}/opening-hours/summary", response_model=schemas.OpeningHoursSummary)
def get_opening_hours_summary(bar_id: str, db: Session = Depends(get_db)):
    bar = _get_bar_or_404(db, bar_id)
    return schemas.OpeningHoursSummary(text=_opening_hours_text(bar))
