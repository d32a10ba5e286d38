"""
Weekly mission template catalog.

The 12-week curriculum ships as a versioned JSON asset under
``app/booster/data``.  Each week exists in two variants (``male`` /
``female``) that differ only in grammatical gender.  The catalog is
loaded once and never mutated; tasks copy its text at generation time,
so editing the asset does not touch existing schedules.
"""

from __future__ import annotations

import json
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.booster.errors import ValidationError
from app.core.config import settings

DATA_DIR = Path(__file__).parent / "data"

PROGRAM_WEEKS = 12


class TemplateVariant(str, Enum):
    MALE = "male"
    FEMALE = "female"


class MissionTemplate(BaseModel):
    """Content for one program week."""

    model_config = ConfigDict(frozen=True)

    week: int = Field(..., ge=1, le=PROGRAM_WEEKS)
    title: str
    mission_text: str
    tip_text: str
    booster_text: str


class TemplateCatalog(BaseModel):
    """Immutable ``(variant, week) -> MissionTemplate`` lookup."""

    model_config = ConfigDict(frozen=True)

    version: str
    variants: dict[TemplateVariant, list[MissionTemplate]]

    def template(self, variant: TemplateVariant, week: int) -> MissionTemplate:
        if not 1 <= week <= PROGRAM_WEEKS:
            raise ValidationError(f"Week {week} is outside 1..{PROGRAM_WEEKS}")
        for entry in self.variants[variant]:
            if entry.week == week:
                return entry
        raise ValidationError(f"No template for week {week} in variant '{variant.value}'")

    def weeks(self, variant: TemplateVariant) -> list[MissionTemplate]:
        """All templates of a variant, ordered by week."""
        return sorted(self.variants[variant], key=lambda t: t.week)


def variant_for_gender(gender: Optional[str]) -> TemplateVariant:
    """Pick the template variant for a trainee.

    ``female`` selects the female variant; absent or unrecognised values
    fall back to ``settings.BOOSTER_DEFAULT_VARIANT``.
    """
    if gender and gender.strip().lower() == TemplateVariant.FEMALE.value:
        return TemplateVariant.FEMALE
    if gender and gender.strip().lower() == TemplateVariant.MALE.value:
        return TemplateVariant.MALE
    return TemplateVariant(settings.BOOSTER_DEFAULT_VARIANT)


def load_catalog(path: Path) -> TemplateCatalog:
    """Parse and validate a catalog file.

    Raises :class:`ValueError` when a variant does not cover weeks
    1..12 exactly once.
    """
    raw = json.loads(path.read_text(encoding="utf-8"))
    catalog = TemplateCatalog(version=str(raw["version"]), variants=raw["variants"])
    for variant in TemplateVariant:
        weeks = sorted(t.week for t in catalog.variants.get(variant, []))
        if weeks != list(range(1, PROGRAM_WEEKS + 1)):
            raise ValueError(f"Catalog {path.name}: variant '{variant.value}' covers weeks {weeks}")
    return catalog


@lru_cache()
def get_catalog() -> TemplateCatalog:
    """The configured catalog (cached)."""
    return load_catalog(DATA_DIR / settings.BOOSTER_TEMPLATE_FILE)
