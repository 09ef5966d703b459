"""
Submission repository.

Handles database operations for :class:`Submission`, including the
history ordering and the unreviewed-video count used by admins.
"""

import datetime
from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from app.models.submission import Submission


class SubmissionRepository:
    """Repository for Submission database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: Submission) -> Submission:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_id(self, entry_id: int) -> Optional[Submission]:
        return self.session.get(Submission, entry_id)

    def get_all_by_user(self, user_id: str) -> list[Submission]:
        """All submissions of a user, newest first."""
        statement = (select(Submission).where(Submission.user_id == user_id).order_by(Submission.created_at.desc(),
                                                                                      Submission.id.desc()))
        return list(self.session.exec(statement).all())

    def get_history(self, user_id: str) -> list[Submission]:
        """Submissions ordered by target date, then creation (both descending)."""
        statement = (select(Submission).where(Submission.user_id == user_id).order_by(Submission.target_date.desc(),
                                                                                      Submission.created_at.desc(),
                                                                                      Submission.id.desc()))
        return list(self.session.exec(statement).all())

    def get_by_user_date_range(self, user_id: str, start: datetime.date, end: datetime.date, ) -> list[Submission]:
        statement = (select(Submission).where(Submission.user_id == user_id, Submission.target_date >= start,
                                              Submission.target_date <= end, ).order_by(Submission.target_date,
                                                                                        Submission.created_at))
        return list(self.session.exec(statement).all())

    def exists_for_item(self, item_id: int) -> bool:
        statement = select(Submission.id).where(Submission.submission_item_id == item_id).limit(1)
        return self.session.exec(statement).first() is not None

    # ------------------------------------------------------------------
    # Admin queries
    # ------------------------------------------------------------------

    def count_unreviewed_videos(self) -> int:
        statement = (select(func.count()).select_from(Submission).where(Submission.reviewed_at.is_(None),
                                                                        Submission.type == "video", ))
        return self.session.exec(statement).first() or 0

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def update(self, entry: Submission) -> Submission:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def delete(self, entry_id: int) -> bool:
        entry = self.get_by_id(entry_id)
        if entry:
            self.session.delete(entry)
            self.session.commit()
            return True
        return False
