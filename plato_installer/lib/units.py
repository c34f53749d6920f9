from __future__ import annotations

from typing import Dict, List


def parse_unit(text: str) -> Dict[str, Dict[str, List[str]]]:
    """Parse a systemd unit into {section: {key: [values...]}}.

    Keys may repeat (ExecStartPre=, Environment=), so every value is kept.
    Raises ValueError on anything that is not section/key=value text.
    """

    sections: Dict[str, Dict[str, List[str]]] = {}
    current = None
    pending = ""
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not pending and (not line or line[0] in "#;"):
            continue
        # Trailing backslash continues the value on the next line.
        if line.endswith("\\"):
            pending += line[:-1].rstrip() + " "
            continue
        line, pending = pending + line, ""
        if line.startswith("[") and line.endswith("]"):
            current = sections.setdefault(line[1:-1].strip(), {})
            continue
        if current is None:
            raise ValueError(f"line {lineno}: entry outside of a section")
        key, sep, value = line.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"line {lineno}: expected key=value, got {raw!r}")
        current.setdefault(key.strip(), []).append(value.strip())
    return sections


def validate_unit(text: str, origin: str) -> Dict[str, Dict[str, List[str]]]:
    """Check that a unit can be loaded: parseable, with [Service] ExecStart=."""

    try:
        sections = parse_unit(text)
    except ValueError as e:
        raise ValueError(f"{origin}: {e}") from e

    service = sections.get("Service")
    if service is None:
        raise ValueError(f"{origin}: missing [Service] section")
    if not [v for v in service.get("ExecStart", []) if v]:
        raise ValueError(f"{origin}: [Service] has no ExecStart=")
    return sections
