"""Create the forum tables, optionally dropping existing ones first."""
import argparse
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from forum.config import settings
from forum.database import engine, Base
import forum.models  # noqa: F401 - registers all models


def init_db(reset: bool = False):
    if reset:
        print(f"Dropping forum tables on {settings.DATABASE_URL} ...")
        Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    tables = ", ".join(sorted(Base.metadata.tables))
    print(f"Forum schema ready: {tables}")


def main():
    parser = argparse.ArgumentParser(description="Create the student forum schema.")
    parser.add_argument("--reset", action="store_true", help="drop all forum tables before creating them")
    args = parser.parse_args()
    init_db(reset=args.reset)


if __name__ == "__main__":
    main()
