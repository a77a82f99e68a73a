#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Employee registry (SQLite)

Modes:
  1                                 Create the EMPLOYEE table (idempotent)
  2 FULL_NAME BIRTH_DATE GENDER     Insert one employee; age is computed from BIRTH_DATE (YYYY-MM-DD)
  3                                 List all employees ordered by name
  4                                 Bulk-insert synthetic employees (1,000,000 + 100 by default)
  5                                 Timed criteria query (gender Male, name starting with F by default)

Notes:
- The database path comes from --db, then $EMPLOYEE_DB_PATH, then `db_path` in
  config.yaml, then ./employees.db.
- Bulk sizes and the criteria filter can be changed in config.yaml
  (`bulk.*` and `criteria.*` sections).
"""

import argparse
import sys
import time
from typing import List, Optional

from registry.config import Settings, load_settings
from registry.domain.age import parse_birth_date
from registry.domain.employee import EmployeeRecord
from registry.errors import EmployeeDbError, UsageError
from registry.logs import LogContext, setup_logging
from registry.services.seed_svc import synthetic_employees
from registry.services.store import EmployeeStore

MODE_ACTIONS = {
    1: "create_table",
    2: "insert_one",
    3: "list_all",
    4: "bulk_insert",
    5: "criteria_query",
}


def _print_records(records):
    for r in records:
        print(r.format_line())


# ---------------- Modes ----------------

def run_mode1(store: EmployeeStore, args, settings: Settings, log: LogContext):
    store.create_table()
    print("Table created.")


def run_mode2(store: EmployeeStore, args, settings: Settings, log: LogContext):
    full_name, birth_date, gender = args.extra
    record = EmployeeRecord.create(full_name, birth_date, gender)
    store.insert_employee(record)
    log.set_payload({"full_name": full_name, "age": record.age})
    print("Employee added.")


def run_mode3(store: EmployeeStore, args, settings: Settings, log: LogContext):
    records = store.get_all_employees()
    log.set_payload({"rows": len(records)})
    _print_records(records)


def run_mode4(store: EmployeeStore, args, settings: Settings, log: LogContext):
    records = synthetic_employees(
        settings.bulk_count,
        settings.bulk_extra_count,
        settings.bulk_birth_date,
    )
    inserted = store.insert_multiple_employees(records, batch_size=settings.bulk_batch_size)
    log.set_payload({"rows": inserted, "total": store.count_employees()})
    print(f"{inserted} employees added.")


def run_mode5(store: EmployeeStore, args, settings: Settings, log: LogContext):
    start = time.perf_counter()
    records = store.get_employees_by_criteria(settings.criteria_gender, settings.criteria_prefix)
    end = time.perf_counter()

    log.set_payload({"rows": len(records), "gender": settings.criteria_gender, "prefix": settings.criteria_prefix})
    print(f"Query completed in {end - start:.4f} seconds.")
    _print_records(records)


MODES = {
    1: run_mode1,
    2: run_mode2,
    3: run_mode3,
    4: run_mode4,
    5: run_mode5,
}


# ---------------- Entry ----------------

class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(f"Invalid arguments: {message}")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(description="Employee registry (SQLite)", allow_abbrev=False)
    parser.add_argument("--db", help="database file (default: $EMPLOYEE_DB_PATH, config db_path, ./employees.db)")
    parser.add_argument("--config", help="YAML config file (default: $EMPLOYEE_CONFIG or ./config.yaml)")
    parser.add_argument("--log-level", help="logging level, e.g. INFO or DEBUG (default: config log_level)")
    parser.add_argument("mode", nargs="?", help="1-5, see module help")
    # everything after the mode is taken literally, so names may start with "-"
    parser.add_argument("extra", nargs=argparse.REMAINDER, help="mode arguments (options go before the mode)")
    return parser


def parse_mode(args) -> int:
    """Validate the mode and its arguments before anything touches the database."""
    if args.mode is None:
        raise UsageError("Invalid arguments.")
    try:
        mode = int(args.mode)
    except ValueError:
        raise UsageError("Unknown mode.") from None
    if mode not in MODES:
        raise UsageError("Unknown mode.")
    if mode == 2:
        if len(args.extra) != 3:
            raise UsageError("Invalid arguments for mode 2.")
        parse_birth_date(args.extra[1])
    return mode


def main(argv: Optional[List[str]] = None) -> int:
    try:
        args = build_parser().parse_args(argv)
        settings = load_settings(args.config)
        setup_logging(args.log_level or settings.log_level)
        mode = parse_mode(args)
    except UsageError as e:
        print(str(e), file=sys.stderr)
        return 1
    except EmployeeDbError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    log = LogContext(MODE_ACTIONS[mode])
    try:
        with EmployeeStore.open(args.db, args.config) as store:
            MODES[mode](store, args, settings, log)
    except EmployeeDbError as e:
        log.write("ERROR", str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    log.write("OK")
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
