from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role. Only EMPLOYEE records are paid through payroll."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class EmploymentType(str, Enum):
    """How an employee's worked minutes are measured."""

    BY_TIME = "byTime"
    BY_PRODUCTION = "byProduction"


class ApprovalStatus(str, Enum):
    """Approval flow shared by work logs and leave requests."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class RevenueStatus(str, Enum):
    PENDING = "PENDING"
    RECEIVED = "RECEIVED"


class ExpenseStatus(str, Enum):
    PENDING = "PENDING"
    PAID = "PAID"


class CashFlowKind(str, Enum):
    REVENUE = "REVENUE"
    EXPENSE = "EXPENSE"


class CashFlowSource(str, Enum):
    REVENUE = "revenue"
    EXPENSE = "expense"
    PAYROLL = "payroll"
    RENT = "rent"


class VehicleStatus(str, Enum):
    AVAILABLE = "AVAILABLE"
    IN_USE = "IN_USE"
    MAINTENANCE = "MAINTENANCE"


class WorksiteKind(str, Enum):
    HOTEL = "HOTEL"
    CONSTRUCTION = "CONSTRUCTION"
    OTHER = "OTHER"


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
