from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.school_attendance.school_attendance.database.bootstrap import (
    apply_schema,
    apply_seed_sql,
    ensure_demo_users,
)


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    database_dir = REPO_ROOT / "database"
    apply_schema(db_config, schema_path=database_dir / "schema.sql")
    apply_seed_sql(db_config, seed_path=database_dir / "seed.sql")
    ensure_demo_users(db_config)

    print(
        "OK: Seeded schools and demo logins (teacher1/password123, admin/admin123) -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    )


if __name__ == "__main__":
    main()
