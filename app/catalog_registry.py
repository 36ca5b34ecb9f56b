"""
Catalog registry for the Streamlit home screen.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from core import catalog_repo
from core.schemas import CatalogItem


@dataclass(frozen=True)
class CatalogSpec:
    """
    A catalog the learner can pick from the home screen.
    """
    catalog_type: str
    label: str
    glyph: str
    unit: str
    setup_prompt: str
    load: Callable[[], list[CatalogItem]]


CATALOG_SPECS: dict[str, CatalogSpec] = {
    "kanji": CatalogSpec(
        catalog_type="kanji",
        label="Kanji",
        glyph="漢字",
        unit="characters",
        setup_prompt="How many kanji do you want to study?",
        load=lambda: catalog_repo.load_catalog("kanji"),
    ),
    "vocab": CatalogSpec(
        catalog_type="vocab",
        label="Vocabulary",
        glyph="言葉",
        unit="words",
        setup_prompt="How many words do you want to study?",
        load=lambda: catalog_repo.load_catalog("vocab"),
    ),
}


def get_catalog_spec(catalog_type: str) -> CatalogSpec:
    return CATALOG_SPECS[catalog_type]
