"""
Submission item repository.
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.submission_item import SubmissionItem


class SubmissionItemRepository:
    """Repository for SubmissionItem database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, item: SubmissionItem) -> SubmissionItem:
        self.session.add(item)
        self.session.commit()
        self.session.refresh(item)
        return item

    def get_by_id(self, item_id: int) -> Optional[SubmissionItem]:
        return self.session.get(SubmissionItem, item_id)

    def get_all_by_user(self, user_id: str) -> list[SubmissionItem]:
        """All items of a user, oldest first."""
        statement = (select(SubmissionItem).where(SubmissionItem.user_id == user_id).order_by(SubmissionItem.created_at,
                                                                                            SubmissionItem.id))
        return list(self.session.exec(statement).all())

    def update(self, item: SubmissionItem) -> SubmissionItem:
        self.session.add(item)
        self.session.commit()
        self.session.refresh(item)
        return item

    def delete(self, item_id: int) -> bool:
        item = self.get_by_id(item_id)
        if item:
            self.session.delete(item)
            self.session.commit()
            return True
        return False
