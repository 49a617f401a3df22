"""Tests for saving and restoring the calculator session"""
import json

import pytest

from calculator import (AwaitingOperand, CalculatorEngine, CalculatorSession,
                        Failed, Idle, OperandEntry, OperationPending)
from database import Database
from effects import SaveSession
from keymap import event_for_button
from session_manager import SessionManager, from_snapshot, to_snapshot


def press(engine, *buttons):
    for button in buttons:
        engine.submit(event_for_button(button))
    return engine.current_state()


@pytest.fixture
def db(tmp_path):
    return Database(str(tmp_path / "pocketcalc.db"))


@pytest.fixture
def manager(db):
    return SessionManager(db)


class TestSnapshot:
    def test_fields(self):
        engine = CalculatorEngine()
        session = press(engine, "4", "M+", "+", "2", "Dark")
        assert to_snapshot(session) == {
            'display': "2",
            'currentValue': 4.0,
            'operation': "+",
            'memory': 4.0,
            'isDarkMode': True,
            'history': [],
            'soundEnabled': True,
            'waitingForOperand': False,
        }

    def test_default_session(self):
        snapshot = to_snapshot(CalculatorSession())
        assert snapshot['display'] == "0"
        assert snapshot['currentValue'] is None
        assert snapshot['operation'] is None
        assert snapshot['memory'] is None

    @pytest.mark.parametrize("buttons", [
        (),
        ("1", "2", "."),
        ("1", "+", "2", "="),
        ("7", "×"),
        ("7", "×", "8"),
        ("5", "÷", "0", "="),
        ("3", "M+", "MR", "Sound", "Dark"),
        ("1", "+", "1", "=", "+", "1", "=", "+/-"),
    ])
    def test_round_trip(self, buttons):
        session = press(CalculatorEngine(), *buttons)
        restored = from_snapshot(json.loads(json.dumps(to_snapshot(session))))
        assert restored == session

    def test_states_restored(self):
        assert isinstance(from_snapshot({'display': "0"}).state, Idle)
        assert isinstance(from_snapshot({'display': "12"}).state, OperandEntry)
        assert isinstance(from_snapshot({'display': "12", 'waitingForOperand': True}).state,
                          AwaitingOperand)
        assert isinstance(from_snapshot({'display': "Error"}).state, Failed)

    def test_snapshot_without_mode_flag(self):
        session = from_snapshot({'display': "3", 'currentValue': 3, 'operation': "*"})
        assert session.state == OperationPending(3.0, "*", "3", True)

    def test_incomplete_operation_dropped(self):
        session = from_snapshot({'display': "3", 'currentValue': 3, 'operation': None})
        assert session.accumulator is None
        assert session.pending_operator is None

    def test_history_trimmed(self):
        session = from_snapshot({'display': "0", 'history': [f"{i} + 0 = {i}" for i in range(15)]})
        assert len(session.history) == 10

    @pytest.mark.parametrize("data", [
        [],
        "0",
        {'display': ""},
        {'display': "abc"},
        {'display': "1", 'memory': "5"},
        {'display': "1", 'memory': True},
        {'display': "1", 'history': "1 + 1 = 2"},
    ])
    def test_invalid(self, data):
        with pytest.raises((ValueError, TypeError)):
            from_snapshot(data)


class TestSessionManager:
    def test_load_without_saved_state(self, manager):
        assert manager.load() == CalculatorSession()

    def test_save_and_load(self, manager):
        session = press(CalculatorEngine(), "9", "M+", "+", "1", "=", "×")
        manager.save(session)
        assert manager.load() == session

    def test_corrupt_json_falls_back(self, manager, db):
        db.set_value(manager.key, "{not json")
        assert manager.load() == CalculatorSession()

    def test_invalid_snapshot_falls_back(self, manager, db):
        db.set_value(manager.key, json.dumps({'display': "NaN"}))
        assert manager.load() == CalculatorSession()

    def test_reset(self, manager, db):
        manager.save(press(CalculatorEngine(), "5"))
        manager.reset()
        assert db.get_value(manager.key) is None
        assert manager.load() == CalculatorSession()

    def test_engine_effects_persist_session(self, manager):
        def run_effect(effect):
            if isinstance(effect, SaveSession):
                manager.save(effect.session)

        engine = CalculatorEngine(manager.load(), on_effect=run_effect)
        press(engine, "4", "2")
        assert manager.load().display == "42"


class TestDatabase:
    def test_set_get(self, db):
        db.set_value("a", "1")
        db.set_value("a", "2")
        assert db.get_value("a") == "2"

    def test_missing(self, db):
        assert db.get_value("nope") is None

    def test_delete(self, db):
        db.set_value("a", "1")
        assert db.delete_value("a")
        assert not db.delete_value("a")
