from __future__ import annotations

import importlib
import sys
from dataclasses import replace
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.workforce_erp.workforce_erp.container import MYSQL_BACKEND, build_container
from src.workforce_erp.workforce_erp.memory.demo_data import load_demo_data
from src.workforce_erp.workforce_erp.memory.store import InMemoryStore


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    demo = load_demo_data(InMemoryStore())
    c = build_container(backend=MYSQL_BACKEND, db_config=db_config)

    for house in demo.houses.values():
        c.finance_repo.save_house(house)
    for employee in demo.employees.values():
        if c.employees_repo.get_by_id(employee.employee_id):
            c.employees_repo.save(employee)
        else:
            c.employees_repo.add(employee)
    if not c.work_logs_repo.list_all():
        for entry in sorted(demo.work_logs.values(), key=lambda e: e.log_id):
            c.work_logs_repo.add(
                employee_id=entry.employee_id,
                work_date=entry.work_date,
                total_minutes=entry.total_minutes,
                status=entry.status,
                detail=entry.detail,
            )
    if not c.vehicles_repo.list_all():
        for vehicle in sorted(demo.vehicles.values(), key=lambda v: v.vehicle_id):
            c.vehicles_repo.add(
                name=vehicle.name,
                plate=vehicle.plate,
                insurance_due=vehicle.insurance_due,
                inspection_due=vehicle.inspection_due,
                status=vehicle.status,
            )
    if not c.worksites_repo.list_all():
        site_ids = {}
        for site in sorted(demo.worksites.values(), key=lambda w: w.worksite_id):
            site_ids[site.worksite_id] = c.worksites_repo.add(name=site.name, address=site.address, kind=site.kind)
            if not site.is_active:
                c.worksites_repo.save(replace(site, worksite_id=site_ids[site.worksite_id]))
        for entry in demo.planning.values():
            worksite_id = site_ids[entry.worksite_id] if entry.worksite_id is not None else None
            c.planning_repo.upsert(replace(entry, worksite_id=worksite_id))
    for announcement in demo.announcements.values():
        c.announcements_repo.save(announcement)
    for revenue in demo.revenue.values():
        c.finance_repo.save_revenue(revenue)
    for expense in demo.expenses.values():
        c.finance_repo.save_expense(expense)

    print(
        "OK: Seeded database -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')} "
        f"(employees={len(demo.employees)}, work_logs={len(demo.work_logs)})"
    )


if __name__ == "__main__":
    main()
