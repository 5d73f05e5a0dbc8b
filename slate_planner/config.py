# config.py
import os

# =========================
# Benchmarks / urgency
# =========================
# Clinical benchmark classes (weeks), in priority order
BENCHMARK_WEEKS = (2, 4, 6, 12, 26)

URGENCY_WEIGHTS = {2: 5, 4: 4, 6: 3, 12: 2, 26: 1}
DEFAULT_URGENCY_WEIGHT = 1

# risk grows by one urgency unit per fortnight overdue
OVERDUE_SCALE_DAYS = 14

# =========================
# Operating blocks (minutes)
# =========================
DEFAULT_BLOCK_MINUTES = 480        # 08:00–16:00
DEFAULT_BLOCK_START = 8 * 60
REDUCED_BLOCK_MINUTES = 420        # 09:00–16:00
REDUCED_BLOCK_START = 9 * 60
REDUCED_WEEKDAY = 1                # Tuesday (date.weekday())
REDUCED_OCCURRENCES = (2, 4)       # 2nd and 4th in the month

# =========================
# Waitlist parsing
# =========================
# normalised header -> canonical field
HEADER_ALIASES = {
    "source_key": "source_key",
    "sourcekey": "source_key",
    "patient_key": "source_key",
    "patient_identifier": "source_key",
    "benchmark": "benchmark",
    "benchmark_weeks": "benchmark",
    "benchmark_time": "benchmark",
    "target_time": "target_time",
    "time_to_target": "time_to_target_days",
    "time_to_target_days": "time_to_target_days",
    "ttt_days": "time_to_target_days",
    "time_waiting": "time_waiting_days",
    "time_waiting_days": "time_waiting_days",
    "time_waiting_weeks": "time_waiting_weeks",
    "target_time_weeks": "target_time_weeks",
    "target_time_week": "target_time_weeks",
    "target_weeks": "target_time_weeks",
    "elos": "elos",
    "estimated_duration_min": "estimated_duration_min",
    "duration_min": "estimated_duration_min",
    "est_duration_min": "estimated_duration_min",
    "surgeon_id": "surgeon_id",
    "surgeon": "surgeon_id",
    "surgeon_desc": "procedure_name",
    "surg_desc": "procedure_name",
    "proc_code": "procedure_code",
    "proc_desc": "procedure_name",
    "procedure": "procedure_name",
    "procedure_name": "procedure_name",
    "procedure_desc": "procedure_name",
    "surg_desc_name": "procedure_name",
    "osa": "osa",
    "diabetes": "diabetes",
}

# Identifier columns, in preference order
ID_COLUMNS = ["source_key", "case_num"]
BENCHMARK_COLUMNS = ["benchmark", "target_time_weeks", "target_time"]
WAIT_COLUMNS = ["time_to_target_days", "time_waiting_days", "time_waiting_weeks"]

# Clinical flag columns parsed as booleans
FLAG_COLUMNS = ("osa", "diabetes")
TRUTHY = {"1", "TRUE", "YES", "Y"}

# Procedure keyword -> duration (minutes); first match wins
DURATION_KEYWORDS = (
    ("hysterectomy", 180),
    ("hysteroscop", 60),
    ("laparoscop", 90),
)
DEFAULT_DURATION_MIN = 60

UNKNOWN_SURGEON = "UNKNOWN"
CASE_LABEL = "Patient"

# =========================
# Hosting knobs (env)
# =========================
CASE_ID_SECRET = os.environ.get("SLATE_CASE_ID_SECRET", "")
PRIORITY_MODE = os.environ.get("SLATE_PRIORITY_MODE", "urgency_then_ttt")
DEFAULT_DAYS = int(os.environ.get("SLATE_DAYS", "1"))
