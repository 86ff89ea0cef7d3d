from adherence_tracker import (
    calculate_overall_stats,
    calculate_patient_adherence,
    classify_adherence,
)
from medication_engine import calculate_medication_performance
from trend_engine import annotate_trend_directions, calculate_weekly_trends


def build_adherence_report(snapshot, join="name", weeks=4, ordering="lexical"):
    """
    Full reports view-model from a {patients, medications, logs} snapshot.
    Each section is computed independently from the same snapshot.
    """
    patients = snapshot.get("patients", [])
    medications = snapshot.get("medications", [])
    logs = snapshot.get("logs", [])

    adherence_rows = calculate_patient_adherence(patients, medications, logs, join=join)
    patient_rows = [
        {**row, "status": classify_adherence(row["adherenceRate"])} for row in adherence_rows
    ]

    return {
        "patients": patient_rows,
        "medications": calculate_medication_performance(medications, logs, join=join),
        "weeklyTrends": annotate_trend_directions(
            calculate_weekly_trends(logs, weeks=weeks, ordering=ordering)
        ),
        "overall": calculate_overall_stats(patients, medications, logs, adherence_rows),
    }
