"""SQLAlchemy 2.0 ORM models for the rosters feature.

A roster is the set of accounts shown for one channel identifier. Account
references are stored in their flat ``shard---puuid`` form.
"""

from datetime import datetime

from sqlalchemy import (
    DateTime as SQLDateTime,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from elo_api.core.models import Base


class RosterORM(Base):
    """Channel identifier owning a set of account references."""

    __tablename__ = "rosters"

    identifier: Mapped[str] = mapped_column(
        String(64),
        primary_key=True,
        comment="Channel identifier, immutable once created",
    )

    created_at: Mapped[datetime] = mapped_column(
        SQLDateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    accounts: Mapped[list["RosterAccountORM"]] = relationship(
        back_populates="roster",
        cascade="all, delete-orphan",
        order_by="RosterAccountORM.id",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<RosterORM(identifier='{self.identifier}')>"


class RosterAccountORM(Base):
    """One account reference within a roster."""

    __tablename__ = "roster_accounts"
    __table_args__ = (
        UniqueConstraint(
            "roster_identifier", "reference", name="uq_roster_accounts_reference"
        ),
    )

    # Surrogate key keeps insertion order
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    roster_identifier: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("rosters.identifier", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    reference: Mapped[str] = mapped_column(
        String(128),
        nullable=False,
        comment="Serialized player reference (shard---puuid)",
    )

    created_at: Mapped[datetime] = mapped_column(
        SQLDateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    roster: Mapped[RosterORM] = relationship(back_populates="accounts")

    def __repr__(self) -> str:
        return (
            f"<RosterAccountORM(roster='{self.roster_identifier}', "
            f"reference='{self.reference}')>"
        )
