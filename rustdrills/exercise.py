"""Exercises described by info.toml, their compilation and their state."""

from __future__ import annotations

import contextlib
import enum
import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from pathlib import Path

from rustdrills import ui

_RUSTC_COLOR_ARGS = ("--color", "always")
_RUSTC_EDITION_ARGS = ("--edition", "2021")
_I_AM_DONE = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
_CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = Path("exercises/clippy/Cargo.toml")


def _temp_file() -> str:
    return f"./temp_{os.getpid()}_{threading.get_ident()}"


def _remove(path: str) -> None:
    with contextlib.suppress(OSError):
        os.remove(path)


class Mode(enum.Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Done when there is no context, pending otherwise."""

    context: tuple[ContextLine, ...] = ()

    def done(self) -> bool:
        return not self.context


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a finished process."""

    stdout: str
    stderr: str

    @classmethod
    def _from_process(cls, result: subprocess.CompletedProcess) -> ExerciseOutput:
        return cls(
            stdout=(result.stdout or b"").decode("utf-8", errors="replace"),
            stderr=(result.stderr or b"").decode("utf-8", errors="replace"),
        )


class ExerciseFailed(Exception):
    """Compiling or running an exercise did not succeed."""

    def __init__(self, output: ExerciseOutput):
        super().__init__(output.stderr or output.stdout)
        self.output = output


def _execute(args: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(args, capture_output=True)


def _split_lines(source: str) -> list[str]:
    lines = source.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def pending_context(source: str) -> list[ContextLine]:
    """Lines around the first pending marker, or an empty list when done."""
    lines = _split_lines(source)
    matched = next(
        (i for i, line in enumerate(lines) if _I_AM_DONE.search(line)), None
    )
    if matched is None:
        return []
    low = max(matched - _CONTEXT, 0)
    high = matched + _CONTEXT
    return [
        ContextLine(line=line, number=i + 1, important=i == matched)
        for i, line in enumerate(lines)
        if low <= i <= high
    ]


@dataclass
class Exercise:
    """One exercise as listed in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str

    def __str__(self) -> str:
        return str(self.path)

    def compile(self) -> CompiledExercise:
        """Build the exercise; raise ExerciseFailed with the compiler output."""
        binary = _temp_file()
        if self.mode is Mode.COMPILE:
            result = _execute(
                ["rustc", str(self.path), "-o", binary,
                 *_RUSTC_COLOR_ARGS, *_RUSTC_EDITION_ARGS]
            )
        elif self.mode is Mode.TEST:
            result = _execute(
                ["rustc", "--test", str(self.path), "-o", binary,
                 *_RUSTC_COLOR_ARGS, *_RUSTC_EDITION_ARGS]
            )
        else:
            result = self._clippy(binary)

        if result.returncode == 0:
            return CompiledExercise(self, binary)
        _remove(binary)
        raise ExerciseFailed(ExerciseOutput._from_process(result))

    def _clippy(self, binary: str) -> subprocess.CompletedProcess:
        cargo_toml = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2021"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        message = (
            "Failed to write Clippy Cargo.toml file."
            if ui.no_emoji()
            else "Failed to write 📎 Clippy 📎 Cargo.toml file."
        )
        try:
            CLIPPY_CARGO_TOML_PATH.write_text(cargo_toml)
        except OSError as error:
            raise OSError(message) from error
        # Build a runnable binary too; a failure here shows up again in clippy.
        _execute(["rustc", str(self.path), "-o", binary,
                  *_RUSTC_COLOR_ARGS, *_RUSTC_EDITION_ARGS])
        manifest = str(CLIPPY_CARGO_TOML_PATH)
        _execute(["cargo", "clean", "--manifest-path", manifest, *_RUSTC_COLOR_ARGS])
        return _execute(
            ["cargo", "clippy", "--manifest-path", manifest, *_RUSTC_COLOR_ARGS,
             "--", "-D", "warnings", "-D", "clippy::float_cmp"]
        )

    def state(self) -> State:
        """Read the source and report whether the pending marker remains."""
        source = Path(self.path).read_text(encoding="utf-8")
        return State(tuple(pending_context(source)))

    def looks_done(self) -> bool:
        """True when the pending marker has been removed."""
        return self.state().done()


class CompiledExercise:
    """A built exercise binary, removed again on close."""

    def __init__(self, exercise: Exercise, binary: str):
        self.exercise = exercise
        self.binary = binary

    def run(self) -> ExerciseOutput:
        """Run the binary; raise ExerciseFailed when it exits unsuccessfully."""
        arg = "--show-output" if self.exercise.mode is Mode.TEST else ""
        result = subprocess.run([self.binary, arg], capture_output=True)
        output = ExerciseOutput._from_process(result)
        if result.returncode != 0:
            raise ExerciseFailed(output)
        return output

    def close(self) -> None:
        _remove(self.binary)

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, *args) -> None:
        self.close()


def parse_exercises(text: str) -> list[Exercise]:
    """Build exercises from the text of an info.toml file."""
    data = tomllib.loads(text)
    exercises = []
    for entry in data.get("exercises", []):
        try:
            exercises.append(
                Exercise(
                    name=entry["name"],
                    path=Path(entry["path"]),
                    mode=Mode(entry["mode"]),
                    hint=entry["hint"],
                )
            )
        except KeyError as missing:
            raise ValueError(f"missing field {missing} in exercise entry") from None
    return exercises


def load_exercises(path: str | os.PathLike = "info.toml") -> list[Exercise]:
    """Read exercises from an info.toml file."""
    return parse_exercises(Path(path).read_text(encoding="utf-8"))