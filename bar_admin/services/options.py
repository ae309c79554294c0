from sqlalchemy import select
from sqlalchemy.orm import Session

from bar_admin import models
from bar_admin.domain.bar.tags import normalize_option_name


def option_model(kind: str):
    model = models.OPTION_MODELS.get(kind)
    if model is None:
        raise ValueError("Invalid option kind")
    return model


def list_options(db: Session, kind: str) -> list:
    model = option_model(kind)
    return list(db.scalars(select(model).order_by(model.display_order.asc(), model.name.asc())))


def list_option_names(db: Session, kind: str) -> list[str]:
    return [option.name for option in list_options(db, kind)]


def get_option(db: Session, kind: str, name: str):
    model = option_model(kind)
    return db.scalar(select(model).where(model.name == name))


def get_or_create_option(db: Session, kind: str, name: str, display_order: int = 0):
    cleaned = normalize_option_name(name)
    option = get_option(db, kind, cleaned)
    if option:
        option.display_order = display_order
        return option
    option = option_model(kind)(name=cleaned, display_order=display_order)
    db.add(option)
    db.flush()
    return option
