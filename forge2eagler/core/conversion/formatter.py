"""Best-effort line formatter for generated ModAPI script.

A single pass over the assembled buffer re-indents listener blocks and
normalizes blank lines. It tracks braces per line only, so unbalanced
input leaves the indent level off for the rest of the buffer.
"""

import re

LISTENER_START = "addEventListener"
LISTENER_END = "});"
INDENT = "  "

_UTIL_STR_RE = re.compile(r"""ModAPI\.util\.str\(('[^'\\]*'|"[^"\\]*")\)""")
_DOUBLE_OPEN_RE = re.compile(r"\{\s*\{")
_DOUBLE_CLOSE_RE = re.compile(r"\}\s*\}\);")
_EXTRA_BLANKS_RE = re.compile(r"\n{3,}")


def _strip_modapi_in_strings(code: str) -> str:
    """Undo ``ModAPI.`` prefixes that rewriting pushed into chat strings.

    Only a call whose whole argument is one string literal is cleaned;
    concatenated messages are left alone.
    """
    if "ModAPI.util.str" not in code:
        return code

    def _clean(match: re.Match) -> str:
        literal_text = match.group(1)
        return f"ModAPI.util.str({literal_text.replace('ModAPI.', '')})"

    return _UTIL_STR_RE.sub(_clean, code)


def _pre_clean(code: str) -> str:
    code = _strip_modapi_in_strings(code)
    code = code.replace("(event)=> {", "(event) => {")
    code = _DOUBLE_OPEN_RE.sub("{", code)
    return _DOUBLE_CLOSE_RE.sub("}\n});", code)


def format_script(code: str) -> str:
    """Re-indent and tidy a generated script buffer.

    Per trimmed line:

    - a listener registration line is kept as is and opens a block at
      indent level 1
    - a line containing ``});`` closes the block and is followed by a
      blank line
    - blank lines survive only outside listener blocks
    - any other line is indented two spaces per level; a trailing ``{``
      raises the level both before and after the line, a leading ``}``
      lowers it before

    Runs of two or more blank lines then collapse to one and the result
    is stripped.
    """
    out = []
    inside_listener = False
    indent = 0

    for raw_line in _pre_clean(code).split("\n"):
        line = raw_line.strip()

        if LISTENER_START in line:
            out.append(f"{line}\n")
            inside_listener = True
            indent = 1
        elif LISTENER_END in line:
            inside_listener = False
            indent = 0
            out.append(f"{LISTENER_END}\n\n")
        elif not line:
            if not inside_listener:
                out.append("\n")
        else:
            opens = line.endswith("{")
            if opens:
                indent += 1
            if line.startswith("}"):
                indent -= 1
            out.append(f"{INDENT * indent}{line}\n")
            if opens:
                indent += 1

    return _EXTRA_BLANKS_RE.sub("\n\n", "".join(out)).strip()
