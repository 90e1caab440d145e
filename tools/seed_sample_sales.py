from __future__ import annotations

from datetime import date, timedelta
from pathlib import Path
import sys

# Ensure project root is on sys.path when running this script directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from saleshistory.core.settings import load_settings
from saleshistory.data.db import configure_engine, create_db_and_tables
from saleshistory.data.repo import record_sale

SAMPLE_SALES = [
    [
        {"medicine_name": "Paracetamol 500mg", "quantity": 2, "price": 3.25},
        {"medicine_name": "Cough Syrup 100ml", "quantity": 1, "price": 6.4},
    ],
    [
        {"medicine_name": "Amoxicillin 250mg", "quantity": 1, "price": 12.0},
    ],
    [
        {"medicine_name": "Vitamin C 1000mg", "quantity": 3, "price": 4.99},
        {"medicine_name": "Ibuprofen 200mg", "quantity": 1, "price": 5.5},
        {"medicine_name": "Bandage Roll", "quantity": 4, "price": 1.2},
    ],
]


def main() -> None:
    engine = configure_engine(load_settings().database_url())
    create_db_and_tables(engine)
    today = date.today()
    for offset, lines in enumerate(SAMPLE_SALES):
        inv = record_sale(today - timedelta(days=offset), lines, engine=engine)
        print("CREATED:", inv.id, inv.sale_date, f"{inv.total:.2f}")


if __name__ == "__main__":
    main()
