"""Isolate the JSON payload in free-form model output."""

_CLOSERS = {"{": "}", "[": "]"}


def extract_json_span(raw: str | None) -> str | None:
    """Return the first balanced ``{...}`` or ``[...]`` span in ``raw``.

    The scan starts at the first opening brace or bracket and tracks nesting,
    skipping over JSON string literals so that braces inside strings do not
    count. Markdown fences and commentary around the payload are ignored.

    The span is not validated as JSON; decoding is the caller's job.

    Args:
        raw: Raw model output.

    Returns:
        The candidate JSON substring, or None if there is no opener or the
        nesting is unbalanced (truncated output, mismatched closer).
    """
    if not raw:
        return None

    start = next((i for i, ch in enumerate(raw) if ch in _CLOSERS), None)
    if start is None:
        return None

    expected: list[str] = []
    in_string = False
    escaped = False
    for i in range(start, len(raw)):
        ch = raw[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue

        if ch == '"':
            in_string = True
        elif ch in _CLOSERS:
            expected.append(_CLOSERS[ch])
        elif ch in "}]":
            if ch != expected.pop():
                return None
            if not expected:
                return raw[start : i + 1]

    return None
