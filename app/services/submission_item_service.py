"""
Submission item service.

Items are never rewritten in place: removing an item that already has
submissions ends its effective range instead of deleting the row, so
past calendar days keep their history.
"""

import datetime

from fastapi import HTTPException, status
from loguru import logger
from sqlmodel import Session

from app.db.repositories.submission import SubmissionRepository
from app.db.repositories.submission_item import SubmissionItemRepository
from app.models.submission_item import SubmissionItem
from app.schemas.submission_item import SubmissionItemCreate
from app.services.profile_service import ProfileService


class SubmissionItemService:
    """Service for submission item business logic."""

    def __init__(self, session: Session):
        self.repository = SubmissionItemRepository(session)
        self.submission_repo = SubmissionRepository(session)
        self.profiles = ProfileService(session)

    def list_items(self, user_id: str) -> list[SubmissionItem]:
        return self.repository.get_all_by_user(user_id)

    def create(self, user_id: str, data: SubmissionItemCreate) -> SubmissionItem:
        self.profiles.get(user_id)
        item = SubmissionItem(user_id=user_id, name=data.name,
                              effective_from=data.effective_from or datetime.date.today(),
                              effective_to=data.effective_to, )
        return self.repository.create(item)

    def remove(self, user_id: str, item_id: int, today: datetime.date) -> None:
        """Delete an unused item, or end a used one on *today*."""
        item = self.get_owned(user_id, item_id)

        if not self.submission_repo.exists_for_item(item_id):
            self.repository.delete(item_id)
            logger.info(f"Deleted unused item {item_id} of {user_id}")
            return

        if item.effective_to is None or item.effective_to > today:
            item.effective_to = max(today, item.effective_from)
            self.repository.update(item)
            logger.info(f"Ended item {item_id} of {user_id} on {item.effective_to}")

    def get_owned(self, user_id: str, item_id: int) -> SubmissionItem:
        item = self.repository.get_by_id(item_id)
        if not item or item.user_id != user_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Submission item not found", )
        return item
