"""
Pytest configuration for the medication log tests
"""

import os
import sys

import pytest

# Add parent directory to path to import app modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))


@pytest.fixture
def patients():
    return [
        {"id": 1, "name": "Alice", "age": 70},
        {"id": 2, "name": "Bob", "age": 64},
        {"id": 3, "name": "Carol", "age": 58},
    ]


@pytest.fixture
def medications():
    return [
        {"id": 10, "patientId": 1, "patientName": "Alice", "medicationName": "Aspirin",
         "dosage": "81mg", "scheduledTime": "08:00"},
        {"id": 11, "patientId": 1, "patientName": "Alice", "medicationName": "Metformin",
         "dosage": "500mg", "startDate": "2024-01-01", "endDate": "2024-06-30",
         "scheduledTime": "20:00"},
        {"id": 12, "patientId": 3, "patientName": "Carol", "medicationName": "Aspirin"},
    ]


@pytest.fixture
def logs():
    return [
        {"id": 1, "medicationId": 10, "patientName": "Alice", "medicationName": "Aspirin",
         "status": "taken", "date": "2024-03-04", "actualTime": "08:05"},
        {"id": 2, "medicationId": 11, "patientName": "Alice", "medicationName": "Metformin",
         "status": "taken", "date": "2024-03-04", "actualTime": "20:10"},
        {"id": 3, "medicationId": 10, "patientName": "Alice", "medicationName": "Aspirin",
         "status": "missed", "date": "2024-03-05"},
        {"id": 4, "medicationId": 99, "patientName": "Bob", "medicationName": "Lisinopril",
         "status": "taken", "date": "2024-03-12"},
        {"id": 5, "medicationId": 99, "patientName": "Bob", "medicationName": "Lisinopril",
         "status": "missed", "date": "2024-03-13"},
    ]


@pytest.fixture
def snapshot(patients, medications, logs):
    return {"patients": patients, "medications": medications, "logs": logs}


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    import database

    path = tmp_path / "medlog.db"
    monkeypatch.setattr(database, "DB_PATH", str(path))
    database.init_db()
    return path


@pytest.fixture
def client(db_path):
    from app import app

    app.config["TESTING"] = True
    with app.test_client() as test_client:
        yield test_client
