import csv
import io
import logging

logger = logging.getLogger(__name__)

LOG_EXPORT_COLUMNS = (
    "id",
    "patientName",
    "medicationName",
    "scheduledTime",
    "actualTime",
    "status",
    "date",
    "notes",
)
EXPORT_FILENAME = "medication-logs.csv"
EXPORT_MIMETYPE = "text/csv"


def _field_text(value):
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(_field_text(item) for item in value)
    return str(value)


def _quote(value):
    return '"' + _field_text(value).replace('"', '""') + '"'


def records_to_csv(records, columns):
    """
    Header row is the bare column names. Every data field is quoted,
    embedded quotes doubled. Rows are CRLF separated with no trailing newline.
    """
    lines = [",".join(columns)]
    for record in records:
        lines.append(",".join(_quote(record.get(column)) for column in columns))
    return "\r\n".join(lines)


def export_logs_csv(logs):
    logger.info("Exporting %d medication logs", len(logs))
    return records_to_csv(logs, LOG_EXPORT_COLUMNS)


def parse_csv(text):
    """Read exported CSV text back into (header, rows) of strings."""
    reader = csv.reader(io.StringIO(text, newline=""))
    parsed = list(reader)
    if not parsed:
        return [], []
    return parsed[0], parsed[1:]
