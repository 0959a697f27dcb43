"""
Campus reference data.
"""

from sqlalchemy import Column, Float, Index, String

from freeeats.models.base import BaseModel


class Campus(BaseModel):
    """
    A university campus. Seeded once from the static directory and never
    modified afterwards.
    """

    __tablename__ = "campuses"

    name = Column(String(255), nullable=False, comment="Campus display name")
    city = Column(String(100), nullable=False)
    state = Column(String(2), nullable=False, index=True, comment="US state code")
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)

    __table_args__ = (
        Index("ix_campuses_name", "name"),
    )
