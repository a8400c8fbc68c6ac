import sys
import typing as t


def _read(prompt: str) -> str | None:
    # stdout is reserved for the document
    print(prompt, end="", file=sys.stderr, flush=True)
    try:
        return input()
    except (EOFError, KeyboardInterrupt):
        print(file=sys.stderr)
        return None


def ask_text(prompt: str, default: str | None = None, validate: t.Callable[[str], str | None] | None = None) -> str | None:
    suffix = f" [{default}]" if default else ""
    while True:
        answer = _read(f"{prompt}{suffix}: ")
        if answer is None:
            return None

        value = answer.strip() or (default or "")
        if not value:
            continue
        error = validate(value) if validate else None
        if error is None:
            return value
        print(f"⚠️  {error}", file=sys.stderr)


def ask_choice(title: str, options: list[str], default: str | None = None) -> str | None:
    print(f"{title}:", file=sys.stderr)
    for index, option in enumerate(options, start=1):
        marker = " (default)" if option == default else ""
        print(f"  {index}. {option}{marker}", file=sys.stderr)

    lowered = {option.lower(): option for option in options}
    while True:
        answer = _read("> ")
        if answer is None:
            return None

        choice = answer.strip()
        if not choice and default in options:
            return default
        if choice.isdigit() and 1 <= int(choice) <= len(options):
            return options[int(choice) - 1]
        if choice.lower() in lowered:
            return lowered[choice.lower()]
        print(f"⚠️  Choose 1-{len(options)} or one of: {', '.join(options)}", file=sys.stderr)
