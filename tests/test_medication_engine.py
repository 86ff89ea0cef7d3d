"""
Tests for per-medication adherence across patients
"""

import pytest

from medication_engine import calculate_medication_performance


class TestMedicationPerformance:

    def test_same_name_collapses_across_patients(self):
        medications = [
            {"id": 1, "patientId": 1, "medicationName": "Aspirin"},
            {"id": 2, "patientId": 2, "medicationName": "Aspirin"},
            {"id": 3, "patientId": 3, "medicationName": "Aspirin"},
        ]
        logs = [
            {"medicationName": "Aspirin", "status": "taken"},
            {"medicationName": "Aspirin", "status": "taken"},
            {"medicationName": "Aspirin", "status": "missed"},
        ]

        rows = calculate_medication_performance(medications, logs)

        assert rows == [{"medication": "Aspirin", "prescribed": 3, "taken": 2, "adherenceRate": 67}]

    def test_taken_logs_for_unprescribed_names_are_dropped(self, medications, logs):
        rows = calculate_medication_performance(medications, logs)

        assert "Lisinopril" not in [row["medication"] for row in rows]
        assert sum(row["taken"] for row in rows) == 2

    def test_order_is_first_prescription(self, medications, logs):
        rows = calculate_medication_performance(medications, logs)

        assert rows == [
            {"medication": "Aspirin", "prescribed": 2, "taken": 1, "adherenceRate": 50},
            {"medication": "Metformin", "prescribed": 1, "taken": 1, "adherenceRate": 100},
        ]

    def test_prescribed_sums_to_medication_count(self, medications, logs):
        rows = calculate_medication_performance(medications, logs)

        assert sum(row["prescribed"] for row in rows) == len(medications)

    def test_rate_exceeds_one_hundred_after_repeated_doses(self):
        medications = [{"id": 1, "patientId": 1, "medicationName": "Aspirin"}]
        logs = [{"medicationName": "Aspirin", "status": "taken"} for _ in range(3)]

        rows = calculate_medication_performance(medications, logs)

        assert rows == [{"medication": "Aspirin", "prescribed": 1, "taken": 3, "adherenceRate": 300}]

    def test_no_medications(self, logs):
        assert calculate_medication_performance([], logs) == []

    def test_id_join_resolves_names_from_medication_ids(self, medications):
        logs = [
            {"medicationId": 11, "medicationName": "Metformin 500mg", "status": "taken"},
            {"medicationId": 42, "medicationName": "Aspirin", "status": "taken"},
        ]

        by_name = {row["medication"]: row for row in calculate_medication_performance(medications, logs)}
        by_id = {
            row["medication"]: row
            for row in calculate_medication_performance(medications, logs, join="id")
        }

        assert by_name["Metformin"]["taken"] == 0
        assert by_name["Aspirin"]["taken"] == 1
        assert by_id["Metformin"]["taken"] == 1
        assert by_id["Aspirin"]["taken"] == 0

    def test_unknown_join_mode(self):
        with pytest.raises(ValueError):
            calculate_medication_performance([], [], join="patient")
