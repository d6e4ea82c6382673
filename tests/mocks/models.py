"""
SQLModel tables shared by the pagination tests.

Author/Book form a one-to-many relation used to exercise join fan-out;
Receipt mirrors the structured receipt query legacy callers build.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import Column, Integer, MetaData, String, Table
from sqlmodel import Field, Relationship, SQLModel


class Author(SQLModel, table=True):
    __tablename__ = "pager_author"

    id: int | None = Field(default=None, primary_key=True)
    name: str

    books: list["Book"] = Relationship(back_populates="author")


class Book(SQLModel, table=True):
    __tablename__ = "pager_book"

    id: int | None = Field(default=None, primary_key=True)
    title: str
    author_id: int = Field(foreign_key="pager_author.id")

    author: Author = Relationship(back_populates="books")


class Receipt(SQLModel, table=True):
    __tablename__ = "pager_receipt"

    id: int | None = Field(default=None, primary_key=True)
    rfc_emitter: str
    rfc_receiver: str
    receipt_serie: str
    receipt_folio: str
    issue_date: datetime
    receipt_type: str
    total: Decimal


# Table without primary key, outside SQLModel.metadata
keyless_metadata = MetaData()
audit_trail = Table(
    "pager_audit_trail",
    keyless_metadata,
    Column("entry", Integer),
    Column("message", String),
)
