import threading

import pytest

from spixbot.command import CustomCmd
from spixbot.executer import CommandExecuter


class Scene:
    pass


def counting_cmd(counts, key, ready=lambda: True):
    def run(env):
        counts[key] += 1

    return CustomCmd(run, ready)


def test_plain():
    executer = CommandExecuter()
    scene = Scene()
    counts = {1: 0, 2: 0, 3: 0}

    executer.process_commands(scene)
    for key in counts:
        executer.enqueue_command(counting_cmd(counts, key))

    executer.process_commands(scene)
    assert counts == {1: 1, 2: 1, 3: 1}

    executer.process_commands(scene)
    assert counts == {1: 1, 2: 1, 3: 1}


def test_blocked():
    executer = CommandExecuter()
    scene = Scene()
    counts = {1: 0, 2: 0, 3: 0}
    gate = {"open": False}

    executer.enqueue_command(counting_cmd(counts, 1))
    executer.enqueue_command(counting_cmd(counts, 2, lambda: gate["open"]))
    executer.enqueue_command(counting_cmd(counts, 3))
    executer.process_commands(scene)
    assert counts == {1: 1, 2: 0, 3: 0}

    executer.process_commands(scene)
    assert counts == {1: 1, 2: 0, 3: 0}

    gate["open"] = True
    executer.process_commands(scene)
    assert counts == {1: 1, 2: 1, 3: 1}


def test_no_break_on_error():
    executer = CommandExecuter()
    scene = Scene()
    ran_second = []

    executer.enqueue_command(
        CustomCmd(lambda env: env.state.report_error("Some Error Happened"), lambda: True)
    )
    executer.enqueue_command(CustomCmd(lambda env: ran_second.append(True), lambda: True))

    for _ in range(4):
        executer.process_commands(scene)

    assert ran_second == [True]
    assert executer.state.errors_description() == "Some Error Happened"


def test_environment_carries_scene():
    executer = CommandExecuter()
    scene = Scene()
    seen = []
    executer.enqueue_command(CustomCmd(lambda env: seen.append(env.scene), lambda: True))
    executer.process_commands(scene)
    assert seen == [scene]


def test_command_enqueued_during_execution_runs_in_same_pass():
    executer = CommandExecuter()
    states = []

    def second(env):
        env.state.report_error("second")

    def first(env):
        env.state.report_error("first")
        states.append(env.state)
        executer.enqueue_command(CustomCmd(second, lambda: True))

    executer.enqueue_command(CustomCmd(first, lambda: True))
    executer.process_commands(Scene())
    assert executer.state.errors() == ["first", "second"]
    assert states == [executer.state]


def test_exception_in_command_does_not_lock_queue():
    executer = CommandExecuter()
    ran = []

    def boom(env):
        raise ValueError("boom")

    executer.enqueue_command(CustomCmd(boom, lambda: True))
    executer.enqueue_command(CustomCmd(lambda env: ran.append(1), lambda: True))

    with pytest.raises(ValueError):
        executer.process_commands(Scene())
    executer.process_commands(Scene())
    assert ran == [1]


def test_enqueue_from_other_thread():
    executer = CommandExecuter()
    ran = []
    worker = threading.Thread(
        target=executer.enqueue_command,
        args=(CustomCmd(lambda env: ran.append("x"), lambda: True),),
    )
    worker.start()
    worker.join()
    executer.process_commands(Scene())
    assert ran == ["x"]


def test_process_from_other_thread_raises():
    executer = CommandExecuter()
    executer.enqueue_command(
        CustomCmd(lambda env: env.state.report_error("ran"), lambda: True)
    )
    caught = []

    def run():
        try:
            executer.process_commands(Scene())
        except RuntimeError as exc:
            caught.append(exc)

    worker = threading.Thread(target=run)
    worker.start()
    worker.join()
    assert len(caught) == 1
    assert executer.state.errors() == []

    executer.process_commands(Scene())
    assert executer.state.errors() == ["ran"]