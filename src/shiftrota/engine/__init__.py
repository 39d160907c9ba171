# shiftrota/engine - Rotation generation and move validation
from .calendar import is_billing_rest_day, is_holiday, is_rest_day, week_dates, week_start_for
from .editing import apply_move, move_employee, remove_from_day
from .eligibility import Exemption, check_exemption, is_exempt
from .generator import CandidatePool, CoverageGap, find_coverage_gaps, generate_day, generate_week
from .rotation import advance_employee, advance_rotation, next_shift
from .stats import EmployeeStats, calculate_employee_stats, stats_to_dataframe, update_counters
from .validation import MoveResult, RejectReason, validate_move

__all__ = [
    "is_rest_day",
    "is_holiday",
    "is_billing_rest_day",
    "week_start_for",
    "week_dates",
    "check_exemption",
    "is_exempt",
    "Exemption",
    "generate_week",
    "generate_day",
    "find_coverage_gaps",
    "CandidatePool",
    "CoverageGap",
    "advance_rotation",
    "advance_employee",
    "next_shift",
    "validate_move",
    "MoveResult",
    "RejectReason",
    "apply_move",
    "remove_from_day",
    "move_employee",
    "calculate_employee_stats",
    "stats_to_dataframe",
    "update_counters",
    "EmployeeStats",
]
