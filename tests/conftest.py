"""Shared fixtures: sample places and the bundled page templates."""
import json
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def make_place_payload(**overrides) -> dict:
    """Place record as served by the data service (camelCase wire format)."""
    payload = {
        "id": 1,
        "slug": "cristo-redentor",
        "name": "Cristo Redentor",
        "description": "Estátua no topo do Corcovado.",
        "thumbnail": "https://example.com/cristo.jpg",
        "info": {
            "openingHours": "8h às 19h",
            "address": "Parque Nacional da Tijuca",
            "contact": "(21) 2558-1329",
            "priceRange": "R$ 50 - R$ 100",
            "website": "https://cristo.example.com",
            "amenities": ["Estacionamento", "Banheiros"],
            "activities": ["Passeio de trem"],
        },
        "highlights": ["Sete Maravilhas", "Vista da baía"],
        "location": {"latitude": -22.951916, "longitude": -43.210487},
        "highlight": True,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def place_payload():
    return make_place_payload()


@pytest.fixture
def nested_places() -> list[dict]:
    """Nested source data bundled with the project."""
    with open(PROJECT_ROOT / "resources" / "places.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def home_template() -> str:
    return (PROJECT_ROOT / "public" / "index.html").read_text(encoding="utf-8")


@pytest.fixture
def detail_template() -> str:
    return (PROJECT_ROOT / "public" / "detalhe.html").read_text(encoding="utf-8")
