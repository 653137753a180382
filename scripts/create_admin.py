"""
Grant the admin role to an account, creating the account if needed.
Run from the repository root with .env loaded.

Usage:
  python scripts/create_admin.py                         # INITIAL_ADMIN_EMAIL / INITIAL_ADMIN_PASSWORD
  python scripts/create_admin.py owner@example.com S3cret!
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.core.config import settings
from app.db.session import SessionLocal, create_tables
from app.services.bootstrap_service import grant_admin


def main():
    email = settings.INITIAL_ADMIN_EMAIL
    password = settings.INITIAL_ADMIN_PASSWORD
    if len(sys.argv) > 1:
        email = sys.argv[1]
    if len(sys.argv) > 2:
        password = sys.argv[2]

    create_tables()
    db = SessionLocal()
    try:
        user = grant_admin(db, email, password)
        print(f"Admin ready: {user.email} (id={user.id})")
    finally:
        db.close()


if __name__ == "__main__":
    main()
