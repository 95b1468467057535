import datetime
from typing import Optional

from sqlalchemy import DateTime, Index, Integer, PrimaryKeyConstraint, String, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class Task(Base):
    __tablename__ = 'tasks'
    __table_args__ = (
        PrimaryKeyConstraint('id', name='tasks_pk'),
        Index('tasks_status_idx', 'status'),
        Index('tasks_due_date_idx', 'due_date'),
        {'comment': 'Committee tasks assigned to parents and committee members.'}
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    priority: Mapped[str] = mapped_column(String(20), nullable=False, default='normal', comment='Coded: low, normal, high, urgent.')
    status: Mapped[str] = mapped_column(String(20), nullable=False, default='pending', comment='Coded: pending, in_progress, completed, cancelled.')
    owner_name: Mapped[str] = mapped_column(String(100), nullable=False, comment='Name of the person responsible for the task.')
    owner_phone: Mapped[Optional[str]] = mapped_column(String(30))
    due_date: Mapped[datetime.datetime] = mapped_column(DateTime, nullable=False)
    reminder_date: Mapped[Optional[datetime.datetime]] = mapped_column(DateTime)
    assigned_by: Mapped[str] = mapped_column(String(50), nullable=False, default='admin', comment='Role that created the task.')
    created_at: Mapped[datetime.datetime] = mapped_column(DateTime, nullable=False, server_default=func.now())
    updated_at: Mapped[Optional[datetime.datetime]] = mapped_column(DateTime)


class Vendor(Base):
    __tablename__ = 'vendors'
    __table_args__ = (
        PrimaryKeyConstraint('id', name='vendors_pk'),
        Index('vendors_name_idx', 'name'),
        {'comment': 'Suppliers used by the committee for events.'}
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    category: Mapped[str] = mapped_column(String(30), nullable=False, comment='Coded: catering, equipment, entertainment, transportation, venue, photography, printing, other.')
    contact_person: Mapped[Optional[str]] = mapped_column(String(100))
    phone: Mapped[Optional[str]] = mapped_column(String(30))
    email: Mapped[Optional[str]] = mapped_column(String(200))
    website: Mapped[Optional[str]] = mapped_column(String(300))
    address: Mapped[Optional[str]] = mapped_column(String(300))
    notes: Mapped[Optional[str]] = mapped_column(Text)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default='active', comment='Coded: active, inactive.')
    created_at: Mapped[datetime.datetime] = mapped_column(DateTime, nullable=False, server_default=func.now())
    updated_at: Mapped[Optional[datetime.datetime]] = mapped_column(DateTime)
