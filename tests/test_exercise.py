import os
import subprocess
from pathlib import Path

import pytest

from drillrunner.exercise import (
    CompiledExercise,
    ContextLine,
    Exercise,
    ExerciseFailed,
    Mode,
    clean,
    load_exercises,
    temp_file,
)

PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
FINISHED = "// fake_exercise\n\nfn main() {\n\n}\n"


class FakeRun:
    def __init__(self, returncode=0, stdout=b"", stderr=b"", run_stdout=b""):
        self.calls = []
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.run_stdout = run_stdout

    def __call__(self, args, **kwargs):
        self.calls.append(list(args))
        if args[0] == temp_file():
            return subprocess.CompletedProcess(args, 0, stdout=self.run_stdout, stderr=b"")
        return subprocess.CompletedProcess(
            args, self.returncode, stdout=self.stdout, stderr=self.stderr
        )


def make(tmp_path, name, text, mode=Mode.COMPILE):
    path = tmp_path / f"{name}.rs"
    path.write_text(text)
    return Exercise(name=name, path=path, mode=mode, hint="")


def test_pending_state(tmp_path):
    exercise = make(tmp_path, "pending_exercise", PENDING)
    expected = [
        ContextLine(line="// fake_exercise", number=1, important=False),
        ContextLine(line="", number=2, important=False),
        ContextLine(line="// I AM NOT DONE", number=3, important=True),
        ContextLine(line="", number=4, important=False),
        ContextLine(line="fn main() {", number=5, important=False),
    ]
    assert exercise.state() == expected
    assert exercise.looks_done() is False


def test_finished_exercise(tmp_path):
    exercise = make(tmp_path, "finished_exercise", FINISHED)
    assert exercise.state() is None
    assert exercise.looks_done() is True


def test_marker_on_first_line_clamps_context(tmp_path):
    exercise = make(tmp_path, "top", "// I AM NOT DONE\n\n#[test]\nfn it_works() {}\n")
    state = exercise.state()
    assert [c.number for c in state] == [1, 2, 3]
    assert [c.important for c in state] == [True, False, False]


def test_triple_slash_marker_counts(tmp_path):
    exercise = make(tmp_path, "doc", "fn main() {}\n   ///  I  AM NOT   DONE\n")
    assert exercise.looks_done() is False


def test_clean(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(subprocess, "run", FakeRun())
    Path(temp_file()).touch()
    exercise = make(tmp_path, "example", PENDING)
    compiled = exercise.compile()
    compiled.close()
    assert not Path(temp_file()).exists()


def test_context_manager_removes_binary(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(subprocess, "run", FakeRun())
    exercise = make(tmp_path, "example", PENDING)
    with exercise.compile() as compiled:
        Path(temp_file()).touch()
        assert isinstance(compiled, CompiledExercise)
    assert not Path(temp_file()).exists()


def test_exercise_with_output(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    fake = FakeRun(run_stdout=b"THIS TEST TOO SHALL PASS\n")
    monkeypatch.setattr(subprocess, "run", fake)
    exercise = make(tmp_path, "exercise_with_output", "#[test]\nfn passing() {}\n", Mode.TEST)
    with exercise.compile() as compiled:
        out = compiled.run()
    assert "THIS TEST TOO SHALL PASS" in out.stdout
    assert fake.calls[0][:2] == ["rustc", "--test"]
    assert fake.calls[-1] == [temp_file(), "--show-output"]


def test_compile_failure_raises_with_stderr(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(subprocess, "run", FakeRun(returncode=1, stderr=b"error: expected"))
    Path(temp_file()).touch()
    exercise = make(tmp_path, "compFailure", "fn main() {\n    let\n}\n")
    with pytest.raises(ExerciseFailed) as info:
        exercise.compile()
    assert info.value.output.stderr == "error: expected"
    assert not Path(temp_file()).exists()


def test_clippy_writes_cargo_toml(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "exercises" / "clippy").mkdir(parents=True)
    fake = FakeRun()
    monkeypatch.setattr(subprocess, "run", fake)
    exercise = make(tmp_path, "clippy1", "fn main() {}\n", Mode.CLIPPY)
    exercise.compile().close()
    toml = (tmp_path / "exercises" / "clippy" / "Cargo.toml").read_text()
    assert 'name = "clippy1"' in toml
    assert 'path = "clippy1.rs"' in toml
    assert fake.calls[-1][:2] == ["cargo", "clippy"]
    assert fake.calls[-1][-4:] == ["-D", "warnings", "-D", "clippy::float_cmp"]


def test_load_exercises(tmp_path):
    info = tmp_path / "info.toml"
    info.write_text(
        '[[exercises]]\nname = "intro1"\npath = "exercises/intro/intro1.rs"\n'
        'mode = "compile"\nhint = "Hello!"\n\n'
        '[[exercises]]\nname = "tests1"\npath = "exercises/tests/tests1.rs"\n'
        'mode = "test"\nhint = ""\n'
    )
    exercises = load_exercises(info)
    assert [e.name for e in exercises] == ["intro1", "tests1"]
    assert exercises[0].mode is Mode.COMPILE
    assert exercises[1].mode is Mode.TEST
    assert exercises[0].hint == "Hello!"
    assert str(exercises[0]) == os.path.join("exercises", "intro", "intro1.rs")


def test_from_dict_rejects_unknown_mode():
    with pytest.raises(ValueError):
        Exercise.from_dict({"name": "x", "path": "x.rs", "mode": "bogus", "hint": ""})


def test_clean_ignores_missing_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    clean()
    assert not Path(temp_file()).exists()