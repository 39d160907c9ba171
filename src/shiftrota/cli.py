from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict

from shiftrota.engine.calendar import week_start_for
from shiftrota.engine.editing import move_employee
from shiftrota.engine.generator import find_coverage_gaps, generate_week
from shiftrota.engine.rotation import advance_rotation
from shiftrota.io.csv_loader import load_employees, load_holidays, load_leaves, save_employees
from shiftrota.models.constraints import EngineConfig
from shiftrota.models.schedule import WeekSchedule
from shiftrota.models.validated import ValidatedEngineConfig
from shiftrota.utils.logging_setup import setup_logging
from shiftrota.utils.structured_logging import configure_structlog

LEVELS = {0: "WARNING", 1: "INFO", 2: "DEBUG"}


def _build_cfg(args: argparse.Namespace) -> EngineConfig:
    cfg: Dict[str, Any] = {}
    if getattr(args, "rest_weekday", None) is not None:
        cfg["rest_weekday"] = int(args.rest_weekday)
    if getattr(args, "billing_mode", None) is not None:
        cfg["billing_mode"] = bool(args.billing_mode)
    if getattr(args, "billing_cutoff_day", None) is not None:
        cfg["billing_cutoff_day"] = int(args.billing_cutoff_day)
    if getattr(args, "honor_flags", False):
        cfg["honor_exemption_flags"] = True
    if getattr(args, "leads_avoid_late", False):
        cfg["leads_avoid_late_shifts"] = True
    return ValidatedEngineConfig(**cfg).to_dataclass()


def _add_config_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--rest-weekday", type=int, help="Weekly rest day, 0=Monday .. 6=Sunday (default: 4)")
    p.add_argument("--billing-cutoff-day", type=int, help="Last day of month with the extra rest-day Morning seat (default: 12)")
    p.add_argument("--no-billing", dest="billing_mode", action="store_false", help="Disable billing mode")
    p.set_defaults(billing_mode=None)


def _cmd_generate(args: argparse.Namespace) -> int:
    cfg = _build_cfg(args)
    employees = load_employees(args.employees)
    holidays = load_holidays(args.holidays) if args.holidays else []
    leaves = load_leaves(args.leaves) if args.leaves else []
    start = week_start_for(args.date, cfg)

    week = generate_week(start, employees, holidays, leaves, cfg)
    gaps = find_coverage_gaps(week, cfg)

    if args.out:
        Path(args.out).write_text(json.dumps(week.to_dict(), indent=2), encoding="utf-8")

    if args.json_out:
        payload = week.to_dict()
        payload["coverage_gaps"] = [
            {"date": g.date.isoformat(), "shift": g.shift.value, "required": g.required, "assigned": g.assigned}
            for g in gaps
        ]
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(f"Week of {week.id}:")
        print(week.to_matrix().to_string())
        print(f"Coverage gaps: {len(gaps)}")
    return 0


def _cmd_validate_move(args: argparse.Namespace) -> int:
    cfg = _build_cfg(args)
    employees = load_employees(args.employees)
    week = WeekSchedule.from_dict(json.loads(Path(args.week).read_text(encoding="utf-8")))

    result, edited = move_employee(
        args.employee_id, args.date, args.shift, week, employees,
        emergency_override=args.emergency, config=cfg,
    )
    if result.accepted and args.out:
        Path(args.out).write_text(json.dumps(edited.to_dict(), indent=2), encoding="utf-8")

    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    return 0 if result.accepted else 1


def _cmd_advance(args: argparse.Namespace) -> int:
    employees = load_employees(args.employees)
    advanced = advance_rotation(employees)
    save_employees(advanced, args.out or args.employees)
    for before, after in zip(employees, advanced):
        if before.current_shift != after.current_shift:
            print(f" - {after.name}: {before.current_shift.value} -> {after.current_shift.value}")
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Shift rota CLI")
    p.add_argument("-v", "--verbose", action="count", default=0)
    p.add_argument("--log-file", default=None, help="Rotating log file")
    p.add_argument("--json-logs", action="store_true", help="Render audit events as JSON")
    sub = p.add_subparsers(dest="command", required=True)

    g = sub.add_parser("generate", help="Generate one week")
    g.add_argument("--employees", required=True, help="Employee CSV")
    g.add_argument("--holidays", help="Holiday CSV (date,label)")
    g.add_argument("--leaves", help="Leave CSV (employee_id,start_date,end_date,kind)")
    g.add_argument("--date", required=True, help="Any date in the target week (YYYY-MM-DD)")
    g.add_argument("--honor-flags", action="store_true", help="Honor rest_day_off / holiday_off flags")
    g.add_argument("--leads-avoid-late", action="store_true", help="Keep leads off Evening/Night fallback picks")
    g.add_argument("--out", help="Write the week as JSON")
    g.add_argument("--json", dest="json_out", action="store_true", help="JSON output")
    _add_config_args(g)
    g.set_defaults(func=_cmd_generate)

    m = sub.add_parser("validate-move", help="Validate (and apply) a single move")
    m.add_argument("--employees", required=True)
    m.add_argument("--week", required=True, help="Week JSON (from generate --out)")
    m.add_argument("--employee-id", required=True)
    m.add_argument("--date", required=True)
    m.add_argument("--shift", required=True, choices=["Morning", "Evening", "Night"])
    m.add_argument("--emergency", action="store_true", help="Bypass all rules")
    m.add_argument("--out", help="Write the edited week as JSON")
    _add_config_args(m)
    m.set_defaults(func=_cmd_validate_move)

    a = sub.add_parser("advance", help="Advance the rotation one week")
    a.add_argument("--employees", required=True)
    a.add_argument("--out", help="Output CSV (default: overwrite input)")
    a.set_defaults(func=_cmd_advance)

    args = p.parse_args(argv)
    # stdout carries command output (JSON, matrices); logs go to stderr
    setup_logging(level=LEVELS.get(args.verbose, "DEBUG"), log_file=args.log_file, stream=sys.stderr)
    configure_structlog(json_output=args.json_logs)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
