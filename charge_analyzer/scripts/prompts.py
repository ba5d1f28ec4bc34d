from __future__ import annotations

from typing import Callable, List, Optional


_BOOL_TRUE = {"yes", "y", "true", "1"}
_BOOL_FALSE = {"no", "n", "false", "0"}

InputFn = Callable[[str], str]


def parse_yes_no(text: Optional[str]) -> Optional[bool]:
    """Case-insensitive yes/no parsing. Returns None for anything unrecognized."""
    if text is None:
        return None
    vv = text.strip().lower()
    if vv in _BOOL_TRUE:
        return True
    if vv in _BOOL_FALSE:
        return False
    return None


def ask_yes_no(
    prompt: str,
    *,
    input_fn: InputFn = input,
    max_attempts: int = 5,
    print_fn: Callable[[str], None] = print,
) -> bool:
    """
    Ask until the answer is in the yes/no vocabulary.

    End of input, or *max_attempts* unrecognized answers, count as "no".
    """
    for _ in range(max(1, int(max_attempts))):
        try:
            answer = input_fn(prompt)
        except EOFError:
            return False
        choice = parse_yes_no(answer)
        if choice is not None:
            return choice
        print_fn("Sorry, the value you inputted was not valid.")
    return False


def prompt_for_files(
    *,
    input_fn: InputFn = input,
    max_attempts: int = 5,
    print_fn: Callable[[str], None] = print,
) -> List[str]:
    """
    Collect file names interactively.

    Blank names are rejected; *max_attempts* blank names in a row end the
    prompt, like end of input.
    """
    files: List[str] = []
    blank_attempts = 0
    limit = max(1, int(max_attempts))
    while True:
        try:
            name = input_fn("Please enter the name of the file you wish to load:\n")
        except EOFError:
            break
        name = name.strip()
        if not name:
            print_fn("Sorry, the value you inputted was not valid.")
            blank_attempts += 1
            if blank_attempts >= limit:
                break
            continue
        blank_attempts = 0
        files.append(name)
        if not ask_yes_no(
            "Is there another file you'd like to load? [y/n]\n",
            input_fn=input_fn,
            max_attempts=max_attempts,
            print_fn=print_fn,
        ):
            break
    return files
