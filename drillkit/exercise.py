"""Exercises: loading, compiling, running and checking their progress marker."""

from __future__ import annotations

import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from drillkit.ui import no_emoji

RUSTC_COLOR_ARGS = ("--color", "always")
RUSTC_EDITION_ARGS = ("--edition", "2021")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/clippy/Cargo.toml"


def temp_file() -> str:
    """Return a temporary executable name unique to this process and thread."""
    return f"./temp_{os.getpid()}_ThreadId{threading.get_ident()}"


def clean() -> None:
    """Remove the temporary executable, ignoring a missing file."""
    try:
        os.remove(temp_file())
    except OSError:
        pass


class Mode(Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """One source line shown around the progress marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Progress of an exercise: done when there is no pending context."""

    context: tuple[ContextLine, ...] = ()

    def is_done(self) -> bool:
        return not self.context


@dataclass
class ExerciseOutput:
    """Captured output of a command; success tells whether it exited cleanly."""

    stdout: str
    stderr: str
    success: bool = True


class CompilationError(Exception):
    """Raised when an exercise fails to compile."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr)
        self.output = output


class CompiledExercise:
    """A successfully compiled exercise; removes its executable when closed."""

    def __init__(self, exercise: Exercise) -> None:
        self.exercise = exercise
        self._closed = False

    def run(self) -> ExerciseOutput:
        return self.exercise._run()

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            clean()

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, *args) -> None:
        self.close()


def _execute(args: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(args, capture_output=True, check=False)


def _output_of(result: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(
        stdout=(result.stdout or b"").decode("utf-8", errors="replace"),
        stderr=(result.stderr or b"").decode("utf-8", errors="replace"),
        success=result.returncode == 0,
    )


def _lines(source: str) -> list[str]:
    if not source:
        return []
    parts = source.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


@dataclass
class Exercise:
    """An exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def compile(self) -> CompiledExercise:
        """Compile the exercise; raise CompilationError when that fails."""
        path = str(self.path)
        if self.mode is Mode.CLIPPY:
            result = self._compile_clippy(path)
        else:
            test_flag = ["--test"] if self.mode is Mode.TEST else []
            result = _execute(
                ["rustc", *test_flag, path, "-o", temp_file(),
                 *RUSTC_COLOR_ARGS, *RUSTC_EDITION_ARGS]
            )
        if result.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise CompilationError(_output_of(result))

    def _compile_clippy(self, path: str) -> subprocess.CompletedProcess:
        cargo_toml = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2021"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(cargo_toml, encoding="utf-8")
        except OSError as exc:
            message = (
                "Failed to write Clippy Cargo.toml file."
                if no_emoji()
                else "Failed to write 📎 Clippy 📎 Cargo.toml file."
            )
            raise OSError(message) from exc
        # Build an executable too so clippy exercises can still be run.
        _execute(["rustc", path, "-o", temp_file(), *RUSTC_COLOR_ARGS, *RUSTC_EDITION_ARGS])
        # A clean is required for clippy to report every lint.
        _execute(["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS])
        return _execute(
            ["cargo", "clippy", "--manifest-path", CLIPPY_CARGO_TOML_PATH,
             *RUSTC_COLOR_ARGS, "--", "-D", "warnings", "-D", "clippy::float_cmp"]
        )

    def _run(self) -> ExerciseOutput:
        args = [temp_file()]
        if self.mode is Mode.TEST:
            args.append("--show-output")
        return _output_of(_execute(args))

    def state(self) -> State:
        """Read the source and report whether the progress marker remains."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return State()
        lines = _lines(source)
        matched = next(
            (i for i, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)), None
        )
        if matched is None:
            raise RuntimeError("This should not happen at all")
        low = max(matched - CONTEXT, 0)
        high = matched + CONTEXT
        return State(
            tuple(
                ContextLine(line=line, number=i + 1, important=i == matched)
                for i, line in enumerate(lines)
                if low <= i <= high
            )
        )

    def looks_done(self) -> bool:
        """Whether the progress marker has been removed from the source."""
        return self.state().is_done()

    def __str__(self) -> str:
        return str(self.path)


def load_exercises(text: str) -> list[Exercise]:
    """Parse the exercise list from info.toml text."""
    data = tomllib.loads(text)
    try:
        entries = data["exercises"]
        return [
            Exercise(
                name=entry["name"],
                path=Path(entry["path"]),
                mode=Mode(entry["mode"]),
                hint=entry["hint"],
            )
            for entry in entries
        ]
    except KeyError as exc:
        raise ValueError(f"missing field {exc.args[0]!r}") from exc