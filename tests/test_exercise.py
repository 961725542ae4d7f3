import subprocess
from pathlib import Path

import pytest

from rustdrills import exercise as ex
from rustdrills.exercise import (
    CompiledExercise,
    ContextLine,
    Exercise,
    ExerciseFailed,
    Mode,
    State,
    parse_exercises,
    pending_context,
)

PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
FINISHED = "// fake_exercise\n\nfn main() {\n\n}\n"


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_pending_state(tmp_path):
    exercise = Exercise(
        "pending_exercise", _write(tmp_path, "pending_exercise.rs", PENDING),
        Mode.COMPILE, "",
    )
    expected = (
        ContextLine("// fake_exercise", 1, False),
        ContextLine("", 2, False),
        ContextLine("// I AM NOT DONE", 3, True),
        ContextLine("", 4, False),
        ContextLine("fn main() {", 5, False),
    )
    assert exercise.state() == State(expected)
    assert not exercise.looks_done()


def test_finished_exercise(tmp_path):
    exercise = Exercise(
        "finished_exercise", _write(tmp_path, "finished_exercise.rs", FINISHED),
        Mode.COMPILE, "",
    )
    assert exercise.state() == State()
    assert exercise.looks_done()


def test_pending_context_handles_crlf_and_edges():
    context = pending_context("/// I AM NOT DONE\r\nfn x() {}\r\n")
    assert context == [
        ContextLine("/// I AM NOT DONE", 1, True),
        ContextLine("fn x() {}", 2, False),
    ]


def test_pending_context_requires_comment():
    assert pending_context("let s = \"I AM NOT DONE\";\n") == []


def test_str_is_path():
    exercise = Exercise("a", Path("exercises/a.rs"), Mode.TEST, "")
    assert str(exercise) == str(Path("exercises/a.rs"))


def test_parse_exercises():
    text = (
        '[[exercises]]\nname = "intro1"\npath = "exercises/intro/intro1.rs"\n'
        'mode = "compile"\nhint = "Hello!"\n'
        '[[exercises]]\nname = "tests1"\npath = "exercises/tests/tests1.rs"\n'
        'mode = "test"\nhint = ""\n'
    )
    exercises = parse_exercises(text)
    assert [e.name for e in exercises] == ["intro1", "tests1"]
    assert exercises[0].mode is Mode.COMPILE
    assert exercises[1].mode is Mode.TEST
    assert exercises[0].hint == "Hello!"


def test_parse_exercises_rejects_unknown_mode():
    text = '[[exercises]]\nname = "x"\npath = "x.rs"\nmode = "bogus"\nhint = ""\n'
    with pytest.raises(ValueError):
        parse_exercises(text)


def test_parse_exercises_rejects_missing_field():
    with pytest.raises(ValueError):
        parse_exercises('[[exercises]]\nname = "x"\n')


def test_load_exercises(tmp_path):
    info = _write(
        tmp_path, "info.toml",
        '[[exercises]]\nname = "c"\npath = "c.rs"\nmode = "clippy"\nhint = "h"\n',
    )
    (loaded,) = ex.load_exercises(info)
    assert loaded.mode is Mode.CLIPPY
    assert loaded.path == Path("c.rs")


def test_compile_failure_raises_with_output(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    def fake_run(args, **kwargs):
        return subprocess.CompletedProcess(args, 1, stdout=b"", stderr=b"bad code")

    monkeypatch.setattr(ex.subprocess, "run", fake_run)
    exercise = Exercise("x", Path("x.rs"), Mode.COMPILE, "")
    with pytest.raises(ExerciseFailed) as info:
        exercise.compile()
    assert info.value.output.stderr == "bad code"


def test_compiled_exercise_cleans_up(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    calls = []

    def fake_run(args, **kwargs):
        calls.append(args)
        return subprocess.CompletedProcess(args, 0, stdout=b"", stderr=b"")

    monkeypatch.setattr(ex.subprocess, "run", fake_run)
    exercise = Exercise("x", Path("x.rs"), Mode.TEST, "")
    with exercise.compile() as compiled:
        assert isinstance(compiled, CompiledExercise)
        Path(compiled.binary).touch()
        assert Path(compiled.binary).exists()
    assert not Path(compiled.binary).exists()
    assert calls[0][:2] == ["rustc", "--test"]


def test_run_failure_raises(tmp_path, monkeypatch):
    def fake_run(args, **kwargs):
        return subprocess.CompletedProcess(args, 101, stdout=b"out", stderr=b"err")

    monkeypatch.setattr(ex.subprocess, "run", fake_run)
    compiled = CompiledExercise(Exercise("x", Path("x.rs"), Mode.COMPILE, ""), "./nope")
    with pytest.raises(ExerciseFailed) as info:
        compiled.run()
    assert info.value.output.stdout == "out"
    assert info.value.output.stderr == "err"