import os
import uuid

from sqlalchemy import select
from sqlalchemy.orm import Session

from bar_admin import models
from bar_admin.db import SessionLocal
from bar_admin.domain.bar.opening_hours import dump_opening_hours, initialize_empty, set_boundary
from bar_admin.domain.bar.tags import dump_tags
from bar_admin.services.options import get_or_create_option

DEFAULT_ACTIVITIES = ["Quiz", "Live music", "Karaoke", "Billiards", "Darts", "Shuffleboard"]
DEFAULT_SERVINGS = ["Beer", "Wine", "Cocktails", "Food", "Non-alcoholic"]


def uid() -> str:
    return str(uuid.uuid4())


def demo_opening_hours() -> dict:
    hours = initialize_empty()
    for day in ("wednesday", "thursday", "sunday"):
        hours = set_boundary(hours, day, "open", "16:00")
        hours = set_boundary(hours, day, "close", "01:00")
    for day in ("friday", "saturday"):
        hours = set_boundary(hours, day, "open", "14:00")
        hours = set_boundary(hours, day, "close", "03:00")
    return hours


def get_or_create_bar(
    db: Session,
    name: str,
    address: str | None = None,
    activities: list[str] | None = None,
    servings: list[str] | None = None,
    lat: float | None = None,
    lon: float | None = None,
) -> models.Bar:
    bar = db.scalar(select(models.Bar).where(models.Bar.name == name))
    if bar:
        if address is not None:
            bar.address = address
        return bar
    bar = models.Bar(
        id=uid(),
        name=name,
        address=address,
        activities=dump_tags(activities),
        servings=dump_tags(servings),
        opening_hours=dump_opening_hours(demo_opening_hours()),
        lat=lat,
        lon=lon,
    )
    db.add(bar)
    return bar


def main() -> None:
    db: Session = SessionLocal()
    try:
        for order, name in enumerate(DEFAULT_ACTIVITIES, start=1):
            get_or_create_option(db, "activities", name, display_order=order)
        for order, name in enumerate(DEFAULT_SERVINGS, start=1):
            get_or_create_option(db, "servings", name, display_order=order)

        if os.getenv("SEED_DEMO_BAR", "1") == "1":
            get_or_create_bar(
                db,
                "Demo Bar",
                address="Storgata 1, 0155 Oslo",
                activities=["Quiz", "Live music"],
                servings=["Beer", "Cocktails"],
                lat=59.913868,
                lon=10.752245,
            )
        db.commit()
        print("Seed complete")
    finally:
        db.close()


if __name__ == "__main__":
    main()
