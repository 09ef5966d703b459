"""
Submission rule repository.
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.submission_rule import SubmissionRule


class SubmissionRuleRepository:
    """Repository for SubmissionRule database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, rule: SubmissionRule) -> SubmissionRule:
        self.session.add(rule)
        self.session.commit()
        self.session.refresh(rule)
        return rule

    def create_many(self, rules: list[SubmissionRule]) -> list[SubmissionRule]:
        """Insert several rows in one transaction (group and rest-day rules)."""
        self.session.add_all(rules)
        self.session.commit()
        for rule in rules:
            self.session.refresh(rule)
        return rules

    def get_by_id(self, rule_id: int) -> Optional[SubmissionRule]:
        return self.session.get(SubmissionRule, rule_id)

    def get_all_by_user(self, user_id: str) -> list[SubmissionRule]:
        """All rules of a user, newest first."""
        statement = (select(SubmissionRule).where(SubmissionRule.user_id == user_id).order_by(
            SubmissionRule.created_at.desc(), SubmissionRule.id.desc()))
        return list(self.session.exec(statement).all())

    def get_by_group(self, user_id: str, group_id: str) -> list[SubmissionRule]:
        statement = select(SubmissionRule).where(SubmissionRule.user_id == user_id,
                                                 SubmissionRule.group_id == group_id, )
        return list(self.session.exec(statement).all())

    def delete(self, rule_id: int) -> bool:
        rule = self.get_by_id(rule_id)
        if rule:
            self.session.delete(rule)
            self.session.commit()
            return True
        return False

    def delete_group(self, user_id: str, group_id: str) -> int:
        """Delete every row of a group.  Returns the number of rows removed."""
        rows = self.get_by_group(user_id, group_id)
        for row in rows:
            self.session.delete(row)
        self.session.commit()
        return len(rows)
