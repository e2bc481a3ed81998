from typing import Mapping

from flask import current_app


def load_catalog() -> dict[int, str]:
    """Hobby catalog of the running app (id -> label)."""
    return dict(current_app.config["HOBBIES"])


def hobby_choices(catalog: Mapping[int, str]) -> list[dict]:
    """Return catalog entries as [{"id": 1, "label": "Reading"}, ...] ordered by id."""
    return [{"id": hobby_id, "label": label} for hobby_id, label in sorted(catalog.items())]
