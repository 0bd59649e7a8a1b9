"""
Dev helper: make sure a staff user exists and print a bearer token for it.

    python issue_token.py admin@example.com --role admin
"""
import argparse

from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.core.security import create_access_token
from app.models.user import User


def issue_token(email: str, role: str, first_name: str, last_name: str) -> str:
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        user = db.query(User).filter(User.email == email).first()
        if not user:
            user = User(email=email, role=role, first_name=first_name, last_name=last_name)
            db.add(user)
            db.commit()
            db.refresh(user)
            print(f"Created {role} user {email} ({user.id}).")
        elif user.role != role:
            print(f"Note: {email} already exists with role {user.role!r}; role left unchanged.")
        return create_access_token(subject=str(user.id))
    finally:
        db.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("email")
    parser.add_argument("--role", choices=["employee", "admin"], default="employee")
    parser.add_argument("--first-name", default="")
    parser.add_argument("--last-name", default="")
    args = parser.parse_args()
    print(issue_token(args.email, args.role, args.first_name, args.last_name))
