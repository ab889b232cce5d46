import subprocess
from pathlib import Path
from unittest import mock

import pytest

from rustlings.exercise import (
    CompileError,
    ContextLine,
    Exercise,
    Mode,
    RunError,
    load_exercises,
    temp_file,
)

PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
FINISHED = "// fake_exercise\n\nfn main() {\n\n}\n"
PENDING_TEST = "// I AM NOT DONE\n\n#[test]\nfn it_works() {}\n"


class FakeRunner:
    def __init__(self, *results):
        self.results = list(results)
        self.calls = []

    def __call__(self, args, **kwargs):
        self.calls.append(list(args))
        code, out, err = self.results.pop(0) if self.results else (0, b"", b"")
        return subprocess.CompletedProcess(args, code, out, err)


def make(tmp_path, name, source, mode=Mode.COMPILE):
    path = tmp_path / f"{name}.rs"
    path.write_text(source)
    return Exercise(name=name, path=path, mode=mode, hint="")


def test_pending_state(tmp_path):
    exercise = make(tmp_path, "pending_exercise", PENDING)
    assert exercise.state() == [
        ContextLine("// fake_exercise", 1, False),
        ContextLine("", 2, False),
        ContextLine("// I AM NOT DONE", 3, True),
        ContextLine("", 4, False),
        ContextLine("fn main() {", 5, False),
    ]
    assert exercise.looks_done() is False


def test_finished_exercise(tmp_path):
    exercise = make(tmp_path, "finished_exercise", FINISHED)
    assert exercise.state() == []
    assert exercise.looks_done() is True


def test_marker_on_first_line(tmp_path):
    exercise = make(tmp_path, "pending_test_exercise", PENDING_TEST)
    assert exercise.state() == [
        ContextLine("// I AM NOT DONE", 1, True),
        ContextLine("", 2, False),
        ContextLine("#[test]", 3, False),
    ]


@pytest.mark.parametrize(
    "marker, done",
    [
        ("/// I AM NOT DONE", False),
        ("   //I   AM  NOT DONE", False),
        ("// I AM DONE", True),
        ("let x = 1; // I AM NOT DONE", True),
    ],
)
def test_marker_variants(tmp_path, marker, done):
    exercise = make(tmp_path, "variant", f"fn main() {{}}\n{marker}\n")
    assert exercise.looks_done() is done


def test_clean(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    Path(temp_file()).touch()
    exercise = make(tmp_path, "example", PENDING)
    with mock.patch("subprocess.run", FakeRunner()):
        compiled = exercise.compile()
    compiled.close()
    assert not Path(temp_file()).exists()


def test_context_manager_cleans(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    exercise = make(tmp_path, "example", PENDING)
    with mock.patch("subprocess.run", FakeRunner()):
        with exercise.compile() as compiled:
            Path(temp_file()).touch()
            assert compiled.exercise is exercise
    assert not Path(temp_file()).exists()


def test_exercise_with_output(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    exercise = make(tmp_path, "exercise_with_output", "", Mode.TEST)
    runner = FakeRunner((0, b"", b""), (0, b"THIS TEST TOO SHALL PASS\n", b""))
    with mock.patch("subprocess.run", runner):
        out = exercise.compile().run()
    assert "THIS TEST TOO SHALL PASS" in out.stdout
    assert runner.calls[0][:3] == ["rustc", "--test", str(exercise.path)]
    assert runner.calls[1] == [temp_file(), "--show-output"]


def test_compile_mode_arguments(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    exercise = make(tmp_path, "compSuccess", "fn main() {}\n")
    runner = FakeRunner()
    with mock.patch("subprocess.run", runner):
        exercise.compile().run()
    assert runner.calls[0] == [
        "rustc", str(exercise.path), "-o", temp_file(),
        "--color", "always", "--edition", "2021", "-C", "strip=debuginfo",
    ]
    assert runner.calls[1] == [temp_file()]


def test_compile_failure(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    Path(temp_file()).touch()
    exercise = make(tmp_path, "compFailure", "fn main() {\n    let\n}\n")
    with mock.patch("subprocess.run", FakeRunner((1, b"", b"error: expected pattern"))):
        with pytest.raises(CompileError) as info:
            exercise.compile()
    assert info.value.output.stderr == "error: expected pattern"
    assert not Path(temp_file()).exists()


def test_run_failure(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    exercise = make(tmp_path, "testNotPassed", "", Mode.TEST)
    runner = FakeRunner((0, b"", b""), (101, b"test not_passing ... FAILED", b""))
    with mock.patch("subprocess.run", runner):
        with pytest.raises(RunError) as info:
            exercise.compile().run()
    assert info.value.output.stdout == "test not_passing ... FAILED"


def test_missing_compiler(tmp_path):
    exercise = make(tmp_path, "example", PENDING)
    with mock.patch("subprocess.run", side_effect=FileNotFoundError("rustc")):
        with pytest.raises(RuntimeError, match="compile"):
            exercise.compile()


def test_clippy_writes_manifest(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "exercises" / "22_clippy").mkdir(parents=True)
    exercise = make(tmp_path, "clippy1", "fn main() {}\n", Mode.CLIPPY)
    runner = FakeRunner()
    with mock.patch("subprocess.run", runner):
        exercise.compile()
    manifest = (tmp_path / "exercises" / "22_clippy" / "Cargo.toml").read_text()
    assert 'name = "clippy1"' in manifest
    assert 'path = "clippy1.rs"' in manifest
    assert runner.calls[0][0] == "rustc"
    assert runner.calls[1][:2] == ["cargo", "clean"]
    assert runner.calls[2][-5:] == ["-D", "warnings", "-D", "clippy::float_cmp"][-5:]
    assert runner.calls[2][:2] == ["cargo", "clippy"]


def test_clippy_without_directory_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("NO_EMOJI", "1")
    exercise = make(tmp_path, "clippy1", "fn main() {}\n", Mode.CLIPPY)
    with pytest.raises(RuntimeError, match="Failed to write Clippy Cargo.toml file."):
        exercise.compile()


def test_str_is_path(tmp_path):
    exercise = Exercise("intro1", Path("exercises/00_intro/intro1.rs"), Mode.COMPILE, "")
    assert str(exercise) == str(Path("exercises/00_intro/intro1.rs"))


def test_load_exercises(tmp_path):
    info = tmp_path / "info.toml"
    info.write_text(
        '[[exercises]]\nname = "compSuccess"\npath = "compSuccess.rs"\n'
        'mode = "compile"\nhint = ""\n\n'
        '[[exercises]]\nname = "testSuccess"\npath = "testSuccess.rs"\n'
        'mode = "test"\nhint = "Hello!"\n'
    )
    exercises = load_exercises(info)
    assert [e.name for e in exercises] == ["compSuccess", "testSuccess"]
    assert [e.mode for e in exercises] == [Mode.COMPILE, Mode.TEST]
    assert exercises[1].path == Path("testSuccess.rs")
    assert exercises[1].hint == "Hello!"


def test_load_exercises_rejects_unknown_mode(tmp_path):
    info = tmp_path / "info.toml"
    info.write_text('[[exercises]]\nname = "x"\npath = "x.rs"\nmode = "run"\nhint = ""\n')
    with pytest.raises(ValueError):
        load_exercises(info)


def test_load_exercises_rejects_missing_field(tmp_path):
    info = tmp_path / "info.toml"
    info.write_text('[[exercises]]\nname = "x"\npath = "x.rs"\nmode = "test"\n')
    with pytest.raises(ValueError, match="hint"):
        load_exercises(info)