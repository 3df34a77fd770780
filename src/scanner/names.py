"""Editor-style display names for serialized field names."""

import re

_PREFIXES = ("m_", "_")
_K_CONSTANT = re.compile(r"^k(?=[A-Z])")

# Boundaries: "aB", "ABc" (acronym followed by a word), "a1" and "1a".
_WORD_BOUNDARY = re.compile(r"(?<=[a-z])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])|(?<=[A-Za-z])(?=[0-9])|(?<=[0-9])(?=[a-z])")


def nicify_variable_name(name: str) -> str:
    """
    Turn a serialized field name into a human readable label.

    Examples:
        m_sharedMaterial -> Shared Material
        _target -> Target
        kMaxCount -> Max Count
        HTMLParser -> HTML Parser
        texture2D -> Texture 2D
    """
    if not name:
        return ""

    stripped = name
    for prefix in _PREFIXES:
        if stripped.startswith(prefix) and len(stripped) > len(prefix):
            stripped = stripped[len(prefix):]
            break
    else:
        stripped = _K_CONSTANT.sub("", stripped)

    words = _WORD_BOUNDARY.sub(" ", stripped).replace("_", " ").split()
    if not words:
        return name

    label = " ".join(words)
    return label[0].upper() + label[1:]
