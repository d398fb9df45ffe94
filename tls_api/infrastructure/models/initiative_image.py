"""SQLAlchemy model for images attached to an initiative."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, Integer, String, func

from tls_api.infrastructure.database import Base


class InitiativeImageModel(Base):
    """Database representation of one uploaded initiative image."""

    __tablename__ = "initiative_image"
    __table_args__ = (
        Index("ix_initiative_image_initiative_sort", "initiative_id", "sort_order"),
        Index("ix_initiative_image_initiative_primary", "initiative_id", "is_primary"),
    )

    id = Column(Integer, primary_key=True, index=True)
    initiative_id = Column(
        Integer, ForeignKey("initiative.id", ondelete="CASCADE"), nullable=False
    )
    file_path = Column(String(500), nullable=False)
    is_primary = Column(Boolean, nullable=False, default=False)
    sort_order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=True, onupdate=func.now())


__all__ = ["InitiativeImageModel"]
