from pathlib import Path
import sys

# Ensure project root is on sys.path when running directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from saleshistory.core.settings import load_settings
from saleshistory.data.db import configure_engine, create_db_and_tables

if __name__ == "__main__":
    engine = configure_engine(load_settings().database_url())
    create_db_and_tables(engine)
    print("Tables ensured at", engine.url)
