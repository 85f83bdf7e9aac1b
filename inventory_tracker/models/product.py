from datetime import date, datetime

from sqlalchemy import Date, DateTime, Enum, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inventory_tracker.db.session import Base
from inventory_tracker.domain.enums import ProductCategory, ProductStatus


class ProductType(Base):
    __tablename__ = "product_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    category: Mapped[ProductCategory] = mapped_column(
        Enum(ProductCategory, name="product_category", native_enum=False, length=32),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(120), nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    products: Mapped[list["Product"]] = relationship("Product", back_populates="type")


class Product(Base):
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[str] = mapped_column(String(100), unique=True, index=True, nullable=False)
    type_id: Mapped[int] = mapped_column(Integer, ForeignKey("product_types.id", ondelete="RESTRICT"), nullable=False, index=True)
    lot_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    inbound_number: Mapped[str] = mapped_column(String(13), nullable=False, index=True)
    status: Mapped[ProductStatus] = mapped_column(
        Enum(ProductStatus, name="product_status"),
        default=ProductStatus.in_stock,
        nullable=False,
        index=True,
    )

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    type: Mapped[ProductType] = relationship("ProductType", back_populates="products")
    pc_details: Mapped["PcDetails | None"] = relationship("PcDetails", back_populates="product", uselist=False)


class PcDetails(Base):
    __tablename__ = "pc_details"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[str] = mapped_column(
        String(100), ForeignKey("products.product_id", ondelete="CASCADE"), unique=True, nullable=False
    )
    model_number: Mapped[str] = mapped_column(String(100), nullable=False)
    serial_number: Mapped[str] = mapped_column(String(100), nullable=False)
    purchase_date: Mapped[date] = mapped_column(Date, nullable=False)
    warranty_period: Mapped[int | None] = mapped_column(Integer, nullable=True)

    product: Mapped[Product] = relationship("Product", back_populates="pc_details")


class PcModelNumber(Base):
    __tablename__ = "pc_model_numbers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    model_number: Mapped[str] = mapped_column(String(100), unique=True, index=True, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
