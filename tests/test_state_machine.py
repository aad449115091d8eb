import pytest

from sigmarpg.logger import Logger
from sigmarpg.state import State
from sigmarpg.state_machine import StateMachine


class Recorder(State):
    def __init__(self, name, events):
        self.name = name
        self.events = events

    def init(self):
        self.events.append((self.name, "init"))

    def handle_input(self):
        pass

    def pause(self):
        self.events.append((self.name, "pause"))

    def resume(self):
        self.events.append((self.name, "resume"))

    def update(self, dt):
        pass

    def render(self, dt):
        pass


def test_empty_machine_has_no_active_state():
    machine = StateMachine()
    assert len(machine) == 0
    with pytest.raises(IndexError):
        machine.active_state()


def test_add_is_deferred_until_processed():
    events = []
    machine = StateMachine()
    first = Recorder("a", events)
    machine.add_state(first)
    assert len(machine) == 0
    assert events == []
    machine.process_state_changes()
    assert machine.active_state() is first
    assert events == [("a", "init")]


def test_push_pauses_previous_and_remove_resumes():
    events = []
    machine = StateMachine()
    first, second = Recorder("a", events), Recorder("b", events)
    machine.add_state(first)
    machine.process_state_changes()
    machine.add_state(second)
    machine.process_state_changes()
    assert machine.active_state() is second
    assert len(machine) == 2
    machine.remove_state()
    machine.process_state_changes()
    assert machine.active_state() is first
    assert events == [("a", "init"), ("a", "pause"), ("b", "init"), ("a", "resume")]


def test_replace_drops_previous_without_pause():
    events = []
    machine = StateMachine()
    first, second = Recorder("a", events), Recorder("b", events)
    machine.add_state(first)
    machine.process_state_changes()
    machine.add_state(second, True)
    machine.process_state_changes()
    assert len(machine) == 1
    assert machine.active_state() is second
    assert events == [("a", "init"), ("b", "init")]


def test_removing_last_state_empties_stack():
    machine = StateMachine()
    machine.add_state(Recorder("a", []))
    machine.process_state_changes()
    machine.remove_state()
    machine.process_state_changes()
    with pytest.raises(IndexError):
        machine.active_state()


def test_process_without_changes_keeps_stack():
    events = []
    machine = StateMachine()
    state = Recorder("a", events)
    machine.add_state(state)
    machine.process_state_changes()
    machine.process_state_changes()
    assert machine.active_state() is state
    assert events == [("a", "init")]


def test_changes_are_logged(tmp_path):
    path = tmp_path / "log.txt"
    with Logger(path) as logger:
        machine = StateMachine(logger)
        machine.add_state(Recorder("a", []))
        machine.process_state_changes()
        machine.add_state(Recorder("b", []), True)
        machine.process_state_changes()
        machine.remove_state()
        machine.process_state_changes()
    messages = [line.split("] ", 2)[2] for line in path.read_text().splitlines()]
    assert messages == [
        "StateMachine: State added",
        "StateMachine: State removed to be replaced",
        "StateMachine: State added",
        "StateMachine: State removed",
    ]