"""ICU message formatting for audit UI strings.

Supports the subset of ICU MessageFormat the audits use: plain ``{name}``
arguments and ``{name, plural, ...}`` blocks with ``=N``, ``one`` and ``other``
selectors. Inside a plural branch ``#`` is replaced by the formatted number.
Plural categories follow English rules.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping


class MessageFormatError(ValueError):
    """Raised when a message or its values cannot be formatted."""


MessageFn = Callable[..., str]


def create_message_fn(ui_strings: Mapping[str, str]) -> MessageFn:
    known = frozenset(ui_strings.values())

    def str_(message: str, values: Mapping[str, object] | None = None) -> str:
        if message not in known:
            raise MessageFormatError("message is not part of the provided UI strings")
        return format_message(message, values)

    return str_


def format_message(message: str, values: Mapping[str, object] | None = None) -> str:
    return _format(message, values or {}, pound=None)


def _format(message: str, values: Mapping[str, object], pound: float | None) -> str:
    parts: list[str] = []
    index = 0
    while index < len(message):
        char = message[index]
        if char == "{":
            end = _matching_brace(message, index)
            parts.append(_format_argument(message[index + 1 : end], values))
            index = end + 1
            continue
        if char == "}":
            raise MessageFormatError(f"unbalanced '}}' at offset {index}")
        if char == "#" and pound is not None:
            parts.append(_format_number(pound))
        else:
            parts.append(char)
        index += 1
    return "".join(parts)


def _matching_brace(text: str, start: int) -> int:
    depth = 0
    for index in range(start, len(text)):
        if text[index] == "{":
            depth += 1
        elif text[index] == "}":
            depth -= 1
            if depth == 0:
                return index
    raise MessageFormatError(f"unbalanced '{{' at offset {start}")


def _format_argument(body: str, values: Mapping[str, object]) -> str:
    name, _, rest = body.partition(",")
    name = name.strip()
    if not name:
        raise MessageFormatError("argument name must be set")
    if name not in values:
        raise MessageFormatError(f"missing value for argument: {name}")
    value = values[name]
    if not rest.strip():
        if _is_number(value):
            return _format_number(value)  # type: ignore[arg-type]
        return str(value)

    kind, _, options_text = rest.partition(",")
    kind = kind.strip()
    if kind != "plural":
        raise MessageFormatError(f"unsupported argument type: {kind}")
    if not _is_number(value):
        raise MessageFormatError(f"plural argument {name} must be numeric")
    number = float(value)  # type: ignore[arg-type]
    branch = _select_plural(_parse_options(options_text), number)
    return _format(branch, values, pound=number)


def _parse_options(text: str) -> dict[str, str]:
    options: dict[str, str] = {}
    index = 0
    while True:
        while index < len(text) and text[index].isspace():
            index += 1
        if index >= len(text):
            break
        start = index
        while index < len(text) and not text[index].isspace() and text[index] != "{":
            index += 1
        selector = text[start:index]
        while index < len(text) and text[index].isspace():
            index += 1
        if not selector or index >= len(text) or text[index] != "{":
            raise MessageFormatError(f"malformed plural option at offset {start}")
        end = _matching_brace(text, index)
        options[selector] = text[index + 1 : end]
        index = end + 1
    if "other" not in options:
        raise MessageFormatError("plural argument requires an 'other' option")
    return options


def _select_plural(options: Mapping[str, str], number: float) -> str:
    for selector, branch in options.items():
        if not selector.startswith("="):
            continue
        try:
            exact = float(selector[1:])
        except ValueError as exc:
            raise MessageFormatError(f"invalid exact selector: {selector}") from exc
        if exact == number:
            return branch
    if number == 1 and "one" in options:
        return options["one"]
    return options["other"]


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,}"
