from __future__ import annotations

from typing import Iterable, List

import pytest

from charge_analyzer.scripts.prompts import ask_yes_no, parse_yes_no, prompt_for_files


def _scripted(answers: Iterable[str]):
    it = iter(answers)

    def _input(prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return _input


@pytest.mark.parametrize("text", ["yes", "Y", " TRUE ", "1", "yEs"])
def test_parse_yes(text: str) -> None:
    assert parse_yes_no(text) is True


@pytest.mark.parametrize("text", ["no", "N", "False", "0 "])
def test_parse_no(text: str) -> None:
    assert parse_yes_no(text) is False


@pytest.mark.parametrize("text", ["", "maybe", "yess", "2", None])
def test_parse_unrecognized(text) -> None:
    assert parse_yes_no(text) is None


def test_ask_yes_no_retries_until_valid() -> None:
    printed: List[str] = []
    assert ask_yes_no("? ", input_fn=_scripted(["what", "y"]), print_fn=printed.append) is True
    assert printed == ["Sorry, the value you inputted was not valid."]


def test_ask_yes_no_bounded() -> None:
    printed: List[str] = []
    answer = ask_yes_no("? ", input_fn=_scripted(["a", "b", "c", "y"]), max_attempts=3, print_fn=printed.append)
    assert answer is False
    assert len(printed) == 3


def test_ask_yes_no_eof_is_no() -> None:
    assert ask_yes_no("? ", input_fn=_scripted([]), print_fn=lambda s: None) is False


def test_prompt_for_files_collects_until_no() -> None:
    files = prompt_for_files(
        input_fn=_scripted(["a.dat", "y", "  b.dat ", "n", "c.dat"]),
        print_fn=lambda s: None,
    )
    assert files == ["a.dat", "b.dat"]


def test_prompt_for_files_ignores_blank_names() -> None:
    printed: List[str] = []
    files = prompt_for_files(input_fn=_scripted(["", "a.dat", "no"]), print_fn=printed.append)
    assert files == ["a.dat"]
    assert printed == ["Sorry, the value you inputted was not valid."]


def test_prompt_for_files_blank_names_bounded() -> None:
    printed: List[str] = []
    files = prompt_for_files(input_fn=lambda prompt: "   ", max_attempts=3, print_fn=printed.append)
    assert files == []
    assert len(printed) == 3


def test_prompt_for_files_blank_count_resets_after_a_name() -> None:
    files = prompt_for_files(
        input_fn=_scripted(["", "a.dat", "y", "", "b.dat", "n"]),
        max_attempts=2,
        print_fn=lambda s: None,
    )
    assert files == ["a.dat", "b.dat"]
