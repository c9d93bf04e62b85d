"""Translate Windows paths embedded in ssh arguments into WSL paths."""

from bypassh.constants import SHARE_HOSTS


def replace_windows_paths(token: str) -> tuple[str, bool]:
    """Rewrite every ``X:\\`` drive prefix in ``token`` to ``/mnt/x/``.

    Returns the rewritten token and whether anything was rewritten. A match at
    the very start of the remaining text stops the scan, so a token whose
    remainder begins with ``:\\`` is left as is from that point on.
    """
    parts: list[str] = []
    pos = 0
    while True:
        rpos = token.find(":\\", pos) - pos
        if rpos <= 0:
            break
        npos = pos + rpos
        parts.append(token[pos : npos - 1])
        parts.append("/mnt/")
        parts.append(token[npos - 1].lower())
        parts.append("/")
        pos = npos + 2
    parts.append(token[pos:])
    return "".join(parts), pos != 0


def strip_share_prefix(token: str, distro: str) -> tuple[str, bool]:
    """Remove ``\\\\wsl$\\<distro>`` style prefixes from ``token``."""
    found = False
    for host in SHARE_HOSTS:
        prefix = f"\\\\{host}\\{distro}"
        if prefix in token:
            token = token.replace(prefix, "")
            found = True
    return token, found


def translate_paths(tokens: list[str], distro: str) -> list[str]:
    """Translate each token independently; non-path tokens pass through unchanged."""
    output: list[str] = []
    for token in tokens:
        token, is_path = strip_share_prefix(token, distro)
        token, replaced = replace_windows_paths(token)
        if is_path or replaced:
            token = token.replace("\\", "/")
        output.append(token)
    return output
