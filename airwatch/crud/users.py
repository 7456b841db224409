from sqlalchemy.orm import Session

from airwatch.models.user import User


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


def find_conflict(db: Session, email: str, username: str, phone_number: str) -> str | None:
    """Return the message for the first identity field already in use.

    Checked in a fixed order (email, username, phone) and stops at the
    first hit.
    """
    if db.query(User).filter(User.email == email).first():
        return "Email is already registered"

    if db.query(User).filter(User.username == username).first():
        return "Username is already taken"

    if db.query(User).filter(User.phoneNumber == phone_number).first():
        return "Phone number is already registered"

    return None


def create_user(
    db: Session,
    name: str,
    username: str,
    hashed_password: str,
    email: str,
    phone_number: str,
) -> User:
    user = User(
        name=name,
        username=username,
        password=hashed_password,
        email=email,
        phoneNumber=phone_number,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def update_password(db: Session, username: str, hashed_password: str) -> int:
    updated = db.query(User).filter(User.username == username).update(
        {User.password: hashed_password}, synchronize_session=False
    )
    db.commit()
    return updated


def set_password_hash(db: Session, user: User, hashed_password: str) -> None:
    user.password = hashed_password
    db.commit()
