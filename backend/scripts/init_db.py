"""Create every table the portfolio API needs (safe to re-run)."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.database import engine, Base
import app.models  # noqa: F401 - registers all models


def init_db():
    print(f"Creating tables on {engine.url.render_as_string(hide_password=True)} ...")
    Base.metadata.create_all(bind=engine)
    print("Tables: " + ", ".join(sorted(Base.metadata.tables)))


if __name__ == "__main__":
    init_db()
