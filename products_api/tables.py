from __future__ import annotations

from sqlalchemy import Float, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from products_api.object_ids import new_object_id


class Base(DeclarativeBase):
    pass


class CategoriesTable(Base):
    __tablename__ = "categories"

    id: Mapped[str] = mapped_column(String(24), primary_key=True, default=new_object_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)


class ProductsTable(Base):
    __tablename__ = "products"

    id: Mapped[str] = mapped_column(String(24), primary_key=True, default=new_object_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    # Plain column, not a foreign key: deleting a category leaves its
    # products in place.
    category_id: Mapped[str] = mapped_column(String(24), nullable=False, index=True)
