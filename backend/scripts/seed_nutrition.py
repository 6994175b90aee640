"""Create the nutrition tables and run every seed pass.

Usage: python scripts/seed_nutrition.py [path/to/fooddata.json]
"""
from __future__ import annotations

import sys
from pathlib import Path

from sqlmodel import Session

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from sazonly.core.config import get_settings  # noqa: E402
from sazonly.core.database import engine, init_db  # noqa: E402
from sazonly.nutrition.fooddata import FoodDataIndex  # noqa: E402
from sazonly.nutrition.seeding import seed_all  # noqa: E402


def main(argv: list[str]) -> None:
    path = Path(argv[1]) if len(argv) > 1 else get_settings().fooddata_path
    init_db()
    with Session(engine) as session:
        counts = seed_all(session, FoodDataIndex(path))
    for name, inserted in counts.items():
        print(f"{name}: {inserted} inserted")


if __name__ == "__main__":
    main(sys.argv)
