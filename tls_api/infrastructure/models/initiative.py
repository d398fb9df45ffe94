"""SQLAlchemy model for initiatives."""

from sqlalchemy import Column, DateTime, Integer, String, Text, func

from tls_api.infrastructure.database import Base


class InitiativeModel(Base):
    """Database representation of an initiative run by one of the bureaus.

    ``images_count`` and ``primary_image_url`` mirror the ``initiative_image``
    rows and are only written by the image use cases.
    """

    __tablename__ = "initiative"

    id = Column(Integer, primary_key=True, index=True)
    title_en = Column(String(200), nullable=False)
    title_ta = Column(String(200), nullable=True)
    slug = Column(String(100), nullable=False, unique=True, index=True)
    bureau = Column(String(50), nullable=False, index=True)
    description_en = Column(Text, nullable=False)
    description_ta = Column(Text, nullable=True)
    director_name = Column(String(100), nullable=False)
    director_email = Column(String(255), nullable=False)
    director_phone = Column(String(20), nullable=True)
    status = Column(String(20), nullable=False, default="draft", index=True)
    primary_image_url = Column(String(500), nullable=True)
    images_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, server_default=func.now(), index=True)
    updated_at = Column(DateTime, nullable=True, onupdate=func.now())


__all__ = ["InitiativeModel"]
