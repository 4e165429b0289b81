import sys
import pathlib

sys.path.append(str(pathlib.Path(__file__).resolve().parent))

from availabilities.config import settings
from availabilities.database import migrate


def apply_migrations():
    print(f"Using DB: {settings.resolved_database_url}")
    migrate()
    print("All migrations applied.")


if __name__ == "__main__":
    apply_migrations()
