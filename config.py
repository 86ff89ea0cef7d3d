import os

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
PORT = int(os.environ.get("PORT", 5000))

# "name" matches logs to patients by patient name, "id" through medicationId.
JOIN_MODE = os.environ.get("JOIN_MODE", "name")
WEEK_ORDERING = os.environ.get("WEEK_ORDERING", "lexical")


def parse_report_weeks(value):
    weeks = int(value)
    if weeks < 1:
        raise ValueError(f"REPORT_WEEKS must be at least 1, got {weeks}")
    return weeks


REPORT_WEEKS = parse_report_weeks(os.environ.get("REPORT_WEEKS", 4))
