import pytest

from sigmarpg.state import State


class Complete(State):
    def __init__(self):
        self.calls = []

    def init(self):
        self.calls.append("init")

    def handle_input(self):
        self.calls.append("input")

    def update(self, dt):
        self.calls.append(("update", dt))

    def render(self, dt):
        self.calls.append(("render", dt))


class MissingRender(State):
    def init(self):
        pass

    def handle_input(self):
        pass

    def update(self, dt):
        pass


def test_base_is_abstract():
    with pytest.raises(TypeError):
        State()


@pytest.mark.parametrize("name", ["init", "handle_input", "update", "render"])
def test_abstract_methods_of_base(name):
    assert State.__abstractmethods__ == frozenset(
        {"init", "handle_input", "update", "render"}
    )
    with pytest.raises(TypeError, match=name):
        State()


def test_subclass_must_implement_all_abstract_methods():
    missing = State.__abstractmethods__ & MissingRender.__abstractmethods__
    assert missing == frozenset({"render"})
    with pytest.raises(TypeError, match="render"):
        MissingRender()
    complete = Complete()
    assert State.pause(complete) is None
    assert State.resume(complete) is None
    complete.init()
    complete.update(0.5)
    assert complete.calls == ["init", ("update", 0.5)]


def test_default_pause_and_resume_do_nothing():
    state = Complete()
    assert State.pause(state) is None
    assert State.resume(state) is None
    assert state.calls == []