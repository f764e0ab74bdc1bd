"""
Seed document written the first time the store is read.
"""

from __future__ import annotations

from amama.config import Settings
from amama.schemas import Document, DocumentSettings, Member

SEED_JOIN_DATE = "2019-01-01"
SEED_MEMBERS = (
    (1, "Member 1"),
    (2, "Member 2"),
    (3, "Member 3"),
)


def empty_balances(periods: int) -> list[float]:
    return [0] * periods


def default_document(settings: Settings) -> dict:
    """Three active members, zeroed balances and empty ledgers."""
    members = [
        Member(id=member_id, name=name, joinDate=SEED_JOIN_DATE, active=True)
        for member_id, name in SEED_MEMBERS
    ]
    doc = Document(
        members=members,
        balances={
            str(member.id): empty_balances(settings.balance_periods)
            for member in members
        },
        settings=DocumentSettings(
            currency=settings.currency,
            version=settings.document_version,
            lastBackup=None,
        ),
    )
    return doc.model_dump(mode="json")
