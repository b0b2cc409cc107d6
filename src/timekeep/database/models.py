"""SQLAlchemy models for timekeep database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    Boolean,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Employee(Base):
    """Employee model."""

    __tablename__ = "employees"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    email = Column(String, nullable=True)
    employment_date = Column(Date, nullable=True)
    termination_date = Column(Date, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    leave_requests = relationship("LeaveRequest", back_populates="employee", cascade="all, delete-orphan")
    task_assignments = relationship("TaskAssignment", back_populates="employee", cascade="all, delete-orphan")
    time_slots = relationship("TimeSlot", back_populates="employee", cascade="all, delete-orphan")


class LeaveRequest(Base):
    """Leave request model."""

    __tablename__ = "leave_requests"

    id = Column(Integer, primary_key=True)
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False)
    type = Column(String, nullable=False, default="vacation")
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    days_count = Column(Integer, nullable=False)
    reason = Column(String, nullable=True)
    status = Column(String, nullable=False, default="pending")
    approved_by = Column(String, nullable=True)
    approved_at = Column(DateTime, nullable=True)
    notes = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    employee = relationship("Employee", back_populates="leave_requests")


class TaskAssignment(Base):
    """Task hours allocated to an employee."""

    __tablename__ = "task_assignments"

    id = Column(Integer, primary_key=True)
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False)
    task = Column(String, nullable=False)
    allocated_hours = Column(Numeric(10, 2), nullable=False)
    actual_hours = Column(Numeric(10, 2), nullable=False, default=0)
    deadline = Column(Date, nullable=True)
    deadline_type = Column(String, nullable=True)
    priority = Column(String, nullable=False, default="medium")
    completed_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    employee = relationship("Employee", back_populates="task_assignments")


class TimeSlot(Base):
    """Time slot model."""

    __tablename__ = "time_slots"

    id = Column(Integer, primary_key=True)
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False)
    task = Column(String, nullable=False)
    date = Column(Date, nullable=False)
    planned_hours = Column(Numeric(10, 2), nullable=False)
    actual_hours = Column(Numeric(10, 2), nullable=False, default=0)
    status = Column(String, nullable=False, default="planned")
    deadline = Column(Date, nullable=True)
    deadline_type = Column(String, nullable=True)
    is_assigned_by_admin = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    employee = relationship("Employee", back_populates="time_slots")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
