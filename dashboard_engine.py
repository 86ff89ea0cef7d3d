from adherence_tracker import adherence_rate


def is_medication_active(medication, day):
    """`day` is a YYYY-MM-DD string; open-ended ranges count as active."""
    start_date = medication.get("startDate")
    end_date = medication.get("endDate")
    if start_date and start_date > day:
        return False
    if end_date and end_date < day:
        return False
    return True


def get_logs_for_date(logs, day):
    return [log for log in logs if log.get("date") == day]


def calculate_today_stats(patients, medications, logs, today):
    """
    Dashboard figures for one calendar day.

    adherenceRate = doses taken today / medications active today
    """
    medications_today = [med for med in medications if is_medication_active(med, today)]
    logs_today = get_logs_for_date(logs, today)
    completed_today = sum(1 for log in logs_today if log.get("status") == "taken")
    missed_today = sum(1 for log in logs_today if log.get("status") == "missed")

    return {
        "totalPatients": len(patients),
        "medicationsToday": len(medications_today),
        "completedToday": completed_today,
        "missedToday": missed_today,
        "adherenceRate": adherence_rate(completed_today, len(medications_today)),
    }


def get_recent_logs(logs, limit=4):
    ordered = sorted(logs, key=lambda log: log.get("date") or "", reverse=True)
    return [
        {
            "id": log.get("id"),
            "patient": log.get("patientName"),
            "medication": log.get("medicationName"),
            "time": log.get("actualTime") or "",
            "status": log.get("status"),
        }
        for log in ordered[:limit]
    ]


def get_upcoming_medications(medications, today, limit=4):
    upcoming = [
        med
        for med in medications
        if med.get("scheduledTime") and is_medication_active(med, today)
    ]
    return [
        {
            "id": med.get("id"),
            "patient": med.get("patientName"),
            "medication": f"{med.get('medicationName')} {med.get('dosage') or ''}".strip(),
            "scheduledTime": med.get("scheduledTime"),
        }
        for med in upcoming[:limit]
    ]
