"""Checking exercises in order and reporting progress to the learner."""

from __future__ import annotations

import enum
from collections.abc import Iterable

from termcolor import colored
from tqdm import tqdm

from rustdrills import ui
from rustdrills.exercise import CompiledExercise, Exercise, ExerciseFailed, Mode


class VerificationFailed(Exception):
    """An exercise failed to compile, failed its run, or is still pending."""

    def __init__(self, exercise: Exercise):
        super().__init__(f"{exercise} did not pass")
        self.exercise = exercise


class _RunMode(enum.Enum):
    INTERACTIVE = enum.auto()
    NON_INTERACTIVE = enum.auto()


def _percentage(done: int, total: int) -> float:
    return done / total * 100.0 if total else 100.0


def verify(
    exercises: Iterable[Exercise],
    progress: tuple[int, int],
    verbose: bool = False,
) -> None:
    """Check exercises in order; raise VerificationFailed at the first one that fails."""
    num_done, total = progress
    percentage = _percentage(num_done, total)
    step = 100.0 / total if total else 0.0
    with tqdm(
        total=total,
        initial=num_done,
        bar_format="Progress: [{bar:60}] {n_fmt}/{total_fmt} {postfix}",
        ascii="-#",
    ) as bar:
        bar.set_postfix_str(f"({percentage:.1f} %)")
        for exercise in exercises:
            if not _check(exercise, verbose):
                raise VerificationFailed(exercise)
            percentage += step
            bar.update(1)
            bar.set_postfix_str(f"({percentage:.1f} %)")


def _check(exercise: Exercise, verbose: bool) -> bool:
    match exercise.mode:
        case Mode.TEST:
            return _compile_and_test(exercise, _RunMode.INTERACTIVE, verbose)
        case Mode.COMPILE:
            return _compile_and_run_interactively(exercise)
        case Mode.CLIPPY:
            return _compile_only(exercise)
    raise ValueError(f"unknown mode {exercise.mode!r}")


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run the exercise's test harness; raise VerificationFailed on failure."""
    _compile_and_test(exercise, _RunMode.NON_INTERACTIVE, verbose)


def _compile(exercise: Exercise) -> CompiledExercise:
    try:
        return exercise.compile()
    except ExerciseFailed as error:
        ui.warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(error.output.stderr)
        raise VerificationFailed(exercise) from error


def _compile_only(exercise: Exercise) -> bool:
    with _compile(exercise):
        pass
    return prompt_for_completion(exercise, None)


def _compile_and_run_interactively(exercise: Exercise) -> bool:
    with _compile(exercise) as compiled:
        try:
            output = compiled.run()
        except ExerciseFailed as error:
            ui.warn(f"Ran {exercise} with errors")
            print(error.output.stdout)
            print(error.output.stderr)
            raise VerificationFailed(exercise) from error
    return prompt_for_completion(exercise, output.stdout)


def _compile_and_test(exercise: Exercise, run_mode: _RunMode, verbose: bool) -> bool:
    with _compile(exercise) as compiled:
        try:
            output = compiled.run()
        except ExerciseFailed as error:
            ui.warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
            print(error.output.stdout)
            raise VerificationFailed(exercise) from error
    if verbose:
        print(output.stdout)
    if run_mode is _RunMode.INTERACTIVE:
        return prompt_for_completion(exercise, None)
    return True


def _separator() -> str:
    return colored("=" * 20, attrs=["bold"])


_SUCCESS_LINES = {
    Mode.COMPILE: "Successfully ran {}!",
    Mode.TEST: "Successfully tested {}!",
    Mode.CLIPPY: "Successfully compiled {}!",
}


def prompt_for_completion(exercise: Exercise, prompt_output: str | None = None) -> bool:
    """Return True when the exercise is done, otherwise show where to continue."""
    state = exercise.state()
    if state.done():
        return True

    ui.success(_SUCCESS_LINES[exercise.mode].format(exercise))

    no_emoji = ui.no_emoji()
    clippy_message = (
        "The code is compiling, and Clippy is happy!"
        if no_emoji
        else "The code is compiling, and 📎 Clippy 📎 is happy!"
    )
    success_message = {
        Mode.COMPILE: "The code is compiling!",
        Mode.TEST: "The code is compiling, and the tests pass!",
        Mode.CLIPPY: clippy_message,
    }[exercise.mode]

    print()
    if no_emoji:
        print(f"~*~ {success_message} ~*~")
    else:
        print(f"🎉 🎉  {success_message} 🎉 🎉")
    print()

    if prompt_output is not None:
        print("Output:")
        print(_separator())
        print(prompt_output)
        print(_separator())
        print()

    print("You can keep working on this exercise,")
    print(
        "or jump into the next one by removing the "
        f"{colored('`I AM NOT DONE`', attrs=['bold'])} comment:"
    )
    print()
    for context_line in state.context:
        text = (
            colored(context_line.line, attrs=["bold"])
            if context_line.important
            else context_line.line
        )
        number = colored(f"{context_line.number:>2}", "blue", attrs=["bold"])
        print(f"{number} {colored('|', 'blue')}  {text}")

    return False