import logging

from adherence_tracker import adherence_rate, check_join_mode

logger = logging.getLogger(__name__)


def _taken_log_names(medications, logs, join):
    taken_logs = [log for log in logs if log.get("status") == "taken"]
    if join == "id":
        names_by_id = {med.get("id"): med.get("medicationName") for med in medications}
        return [names_by_id.get(log.get("medicationId")) for log in taken_logs]
    return [log.get("medicationName") for log in taken_logs]


def calculate_medication_performance(medications, logs, join="name"):
    """
    One row per distinct medication name, in first-prescribed order:
    {medication, prescribed, taken, adherenceRate}

    Records sharing a name collapse into a single row. Taken logs for a name
    nobody is prescribed are ignored.
    """
    check_join_mode(join)

    stats = {}
    for med in medications:
        name = med.get("medicationName")
        entry = stats.setdefault(name, {"prescribed": 0, "taken": 0})
        entry["prescribed"] += 1

    dropped = 0
    for name in _taken_log_names(medications, logs, join):
        if name in stats:
            stats[name]["taken"] += 1
        else:
            dropped += 1

    if dropped:
        logger.debug("Ignored %d taken logs with no matching prescription", dropped)

    return [
        {
            "medication": name,
            "prescribed": entry["prescribed"],
            "taken": entry["taken"],
            "adherenceRate": adherence_rate(entry["taken"], entry["prescribed"]),
        }
        for name, entry in stats.items()
    ]
