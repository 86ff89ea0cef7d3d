import logging
import math

logger = logging.getLogger(__name__)

JOIN_MODES = ("name", "id")


def _round_half_up(value):
    return int(math.floor(value + 0.5))


def adherence_rate(numerator, denominator):
    """Percentage rounded half-up to an int, 0 when the denominator is 0."""
    if denominator <= 0:
        return 0
    return _round_half_up(numerator / denominator * 100)


def classify_adherence(rate):
    if rate >= 90:
        return "Excellent"
    if rate >= 80:
        return "Good"
    return "Needs Attention"


def check_join_mode(join):
    if join not in JOIN_MODES:
        raise ValueError(f"Unknown join mode: {join!r}")


def _logs_for_patient(patient, patient_meds, logs, join):
    if join == "id":
        med_ids = {med.get("id") for med in patient_meds}
        return [log for log in logs if log.get("medicationId") in med_ids]
    return [log for log in logs if log.get("patientName") == patient.get("name")]


def _count_status(logs, status):
    return sum(1 for log in logs if log.get("status") == status)


def calculate_patient_adherence(patients, medications, logs, join="name"):
    """
    One row per patient, in patient order:
    {patient, totalMeds, taken, missed, adherenceRate}

    totalMeds is the number of medication records prescribed to the patient,
    falling back to taken + missed when none are left on file.
    """
    check_join_mode(join)

    rows = []
    for patient in patients:
        patient_meds = [med for med in medications if med.get("patientId") == patient.get("id")]
        patient_logs = _logs_for_patient(patient, patient_meds, logs, join)

        taken = _count_status(patient_logs, "taken")
        missed = _count_status(patient_logs, "missed")
        total_meds = len(patient_meds) if patient_meds else taken + missed

        if total_meds == 0:
            logger.debug("No medications or logs for patient %s, adherence is 0", patient.get("name"))

        # Patient rates stay within 0-100 when more doses are logged than prescribed.
        rows.append(
            {
                "patient": patient.get("name"),
                "totalMeds": total_meds,
                "taken": taken,
                "missed": missed,
                "adherenceRate": min(100, adherence_rate(taken, total_meds)),
            }
        )
    return rows


def calculate_overall_stats(patients, medications, logs, adherence_rows=None):
    if adherence_rows is None:
        adherence_rows = calculate_patient_adherence(patients, medications, logs)

    rates = [row["adherenceRate"] for row in adherence_rows]
    return {
        "totalPatients": len(patients),
        "totalMedications": len(medications),
        "totalMissed": _count_status(logs, "missed"),
        "averageAdherence": _round_half_up(sum(rates) / len(rates)) if rates else 0,
    }
