from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .announcements.mysql_announcement_repository import MySQLAnnouncementRepository
from .announcements.repository import AnnouncementRepository
from .announcements.service import AnnouncementService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .finance.mysql_finance_repository import MySQLFinanceRepository
from .finance.repository import FinanceRepository
from .finance.service import FinanceService
from .fleet.mysql_vehicle_repository import MySQLVehicleRepository
from .fleet.repository import VehicleRepository
from .fleet.service import FleetService
from .leave.mysql_leave_repository import MySQLLeaveRepository
from .leave.repository import LeaveRepository
from .leave.service import LeaveService
from .memory.store import (
    InMemoryAnnouncementRepository,
    InMemoryEmployeeRepository,
    InMemoryFinanceRepository,
    InMemoryLeaveRepository,
    InMemoryPayrollAdjustmentRepository,
    InMemoryPlanningRepository,
    InMemoryStore,
    InMemoryVehicleRepository,
    InMemoryWorkLogRepository,
    InMemoryWorksiteRepository,
)
from .payroll.mysql_adjustment_repository import MySQLPayrollAdjustmentRepository
from .payroll.repository import PayrollAdjustmentRepository
from .payroll.service import PayrollReportService
from .worklogs.factory import MinutesStrategyFactory
from .worklogs.mysql_worklog_repository import MySQLWorkLogRepository
from .worklogs.repository import WorkLogRepository
from .worklogs.service import WorkLogService
from .worksites.mysql_worksite_repository import MySQLPlanningRepository, MySQLWorksiteRepository
from .worksites.repository import PlanningRepository, WorksiteRepository
from .worksites.service import WorksiteService

MEMORY_BACKEND = "memory"
MYSQL_BACKEND = "mysql"


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    work_logs_repo: WorkLogRepository
    adjustments_repo: PayrollAdjustmentRepository
    finance_repo: FinanceRepository
    leave_repo: LeaveRepository
    vehicles_repo: VehicleRepository
    worksites_repo: WorksiteRepository
    planning_repo: PlanningRepository
    announcements_repo: AnnouncementRepository

    employee_service: EmployeeService
    work_log_service: WorkLogService
    payroll_report_service: PayrollReportService
    finance_service: FinanceService
    leave_service: LeaveService
    fleet_service: FleetService
    worksite_service: WorksiteService
    announcement_service: AnnouncementService


def build_container(
    *,
    backend: str = MEMORY_BACKEND,
    db_config: Optional[dict] = None,
    store: Optional[InMemoryStore] = None,
) -> Container:
    if backend == MYSQL_BACKEND:
        if not db_config:
            raise ValueError("db_config is required for the mysql backend")
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
        employees_repo = MySQLEmployeeRepository(conn)
        work_logs_repo = MySQLWorkLogRepository(conn)
        adjustments_repo = MySQLPayrollAdjustmentRepository(conn)
        finance_repo = MySQLFinanceRepository(conn)
        leave_repo = MySQLLeaveRepository(conn)
        vehicles_repo = MySQLVehicleRepository(conn)
        worksites_repo = MySQLWorksiteRepository(conn)
        planning_repo = MySQLPlanningRepository(conn)
        announcements_repo = MySQLAnnouncementRepository(conn)
    elif backend == MEMORY_BACKEND:
        store = store if store is not None else InMemoryStore()
        employees_repo = InMemoryEmployeeRepository(store)
        work_logs_repo = InMemoryWorkLogRepository(store)
        adjustments_repo = InMemoryPayrollAdjustmentRepository(store)
        finance_repo = InMemoryFinanceRepository(store)
        leave_repo = InMemoryLeaveRepository(store)
        vehicles_repo = InMemoryVehicleRepository(store)
        worksites_repo = InMemoryWorksiteRepository(store)
        planning_repo = InMemoryPlanningRepository(store)
        announcements_repo = InMemoryAnnouncementRepository(store)
    else:
        raise ValueError(f"Unknown storage backend: {backend!r}")

    payroll_report_service = PayrollReportService(employees_repo, work_logs_repo, adjustments_repo)

    return Container(
        employees_repo=employees_repo,
        work_logs_repo=work_logs_repo,
        adjustments_repo=adjustments_repo,
        finance_repo=finance_repo,
        leave_repo=leave_repo,
        vehicles_repo=vehicles_repo,
        worksites_repo=worksites_repo,
        planning_repo=planning_repo,
        announcements_repo=announcements_repo,
        employee_service=EmployeeService(employees_repo),
        work_log_service=WorkLogService(
            work_logs_repo,
            employees_repo,
            strategy_factory=MinutesStrategyFactory(),
        ),
        payroll_report_service=payroll_report_service,
        finance_service=FinanceService(finance_repo, payroll_report_service, employees_repo),
        leave_service=LeaveService(leave_repo, employees_repo),
        fleet_service=FleetService(vehicles_repo),
        worksite_service=WorksiteService(worksites_repo, planning_repo, employees_repo),
        announcement_service=AnnouncementService(announcements_repo),
    )
