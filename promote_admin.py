"""
Grant admin panel access to an existing account.
Usage: python promote_admin.py someone@badgerpadel.co.za
"""
import sys
from dotenv import load_dotenv

load_dotenv()

from app.database import SessionLocal  # noqa: E402  settings read the .env above
from app.models import User  # noqa: E402


def promote(email: str) -> bool:
    db = SessionLocal()
    try:
        user = db.query(User).filter(User.email == email.strip().lower()).first()
        if not user:
            return False
        user.is_admin = True
        db.commit()
        return True
    finally:
        db.close()


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: python promote_admin.py <email>")
        sys.exit(1)
    if promote(sys.argv[1]):
        print(f"✅ {sys.argv[1]} is now an admin")
    else:
        print(f"❌ No account for {sys.argv[1]}")
        sys.exit(1)
