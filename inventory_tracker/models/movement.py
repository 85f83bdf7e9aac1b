from datetime import date, datetime

from sqlalchemy import Date, DateTime, Enum, ForeignKey, Index, Integer, String, Text, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from inventory_tracker.db.session import Base
from inventory_tracker.domain.enums import MovementType


# staff_id carries no foreign key: staff rows may be deleted while ledger rows keep the id.
class InboundRecord(Base):
    __tablename__ = "inbound_records"
    __table_args__ = (
        Index("ix_inbound_records_date_id", "inbound_date", "id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[str] = mapped_column(
        String(100), ForeignKey("products.product_id", ondelete="RESTRICT"), nullable=False, index=True
    )
    staff_id: Mapped[int] = mapped_column(Integer, nullable=False)
    inbound_number: Mapped[str] = mapped_column(String(13), nullable=False, index=True)
    inbound_date: Mapped[date] = mapped_column(Date, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class OutboundRecord(Base):
    __tablename__ = "outbound_records"
    __table_args__ = (
        Index("ix_outbound_records_date_id", "outbound_date", "id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[str] = mapped_column(
        String(100), ForeignKey("products.product_id", ondelete="RESTRICT"), nullable=False, index=True
    )
    staff_id: Mapped[int] = mapped_column(Integer, nullable=False)
    outbound_number: Mapped[str] = mapped_column(String(13), nullable=False, index=True)
    outbound_date: Mapped[date] = mapped_column(Date, nullable=False)
    customer_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    customer_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    purchaser_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    purchaser_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class MovementDocument(Base):
    """One row per issued document number; the unique key rejects a concurrent duplicate."""

    __tablename__ = "movement_documents"
    __table_args__ = (
        UniqueConstraint("movement_type", "document_number", name="uq_movement_documents_type_number"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    movement_type: Mapped[MovementType] = mapped_column(
        Enum(MovementType, name="movement_type", native_enum=False, length=16), nullable=False
    )
    document_number: Mapped[str] = mapped_column(String(13), nullable=False)
    issued_on: Mapped[date] = mapped_column(Date, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
