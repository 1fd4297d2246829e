import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy import literal_column
from sqlalchemy.orm import Session

from app.models.resume import SavedResume
from app.utils.hashing import sha256_text

logger = logging.getLogger("app.services.resume")


def list_resumes(db: Session, user_id: str) -> list[SavedResume]:
    """A user's saved resumes in the order they were saved."""
    return (
        db.query(SavedResume)
        .filter(SavedResume.user_id == user_id)
        .order_by(SavedResume.created_at, literal_column("rowid"))
        .all()
    )


def save_resume(db: Session, user_id: str, content: str, name: str | None = None) -> SavedResume:
    """Append a resume to the user's list. Content is stored verbatim."""
    if not name or not name.strip():
        existing = db.query(SavedResume).filter(SavedResume.user_id == user_id).count()
        name = f"Resume {existing + 1}"

    now = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    resume = SavedResume(
        id=str(uuid.uuid4()),
        user_id=user_id,
        name=name,
        content=content,
        content_hash=sha256_text(content),
        created_at=now,
    )
    db.add(resume)
    db.commit()
    db.refresh(resume)
    logger.info("Saved resume %r for user %s", name, user_id)
    return resume


def get_resume(db: Session, user_id: str, index: int) -> SavedResume | None:
    resumes = list_resumes(db, user_id)
    if index < 0 or index >= len(resumes):
        return None
    return resumes[index]


def delete_resume(db: Session, user_id: str, index: int) -> str | None:
    """Remove the resume at `index` and return its name."""
    resume = get_resume(db, user_id, index)
    if resume is None:
        return None
    name = resume.name
    db.delete(resume)
    db.commit()
    logger.info("Deleted resume %r for user %s", name, user_id)
    return name
