"""Turn GLSL shader files into a C header of string literals."""

from __future__ import annotations

import argparse
import errno
import os
import sys
from pathlib import Path
from typing import Iterable, Optional, Sequence, Tuple, Union

PathLike = Union[str, os.PathLike]

MAX_LINES = 10000
VARNAME_MAX = 128
DEFAULT_OUTPUT = "src/shaders.gen.h"
COMMON_PRELUDE = "src/common.glsl"

DEFAULT_SHADERS: Tuple[Tuple[str, Optional[str]], ...] = (
    ("src/picker.v.glsl", None),
    ("src/picker.f.glsl", None),
    ("src/layer_blend.v.glsl", None),
    ("src/layer_blend.f.glsl", None),
    ("src/simple.v.glsl", None),
    ("src/simple.f.glsl", None),
    ("src/outline.v.glsl", None),
    ("src/outline.f.glsl", None),
    ("src/stroke_raster.v.glsl", COMMON_PRELUDE),
    ("src/stroke_raster.f.glsl", COMMON_PRELUDE),
    ("src/stroke_eraser.f.glsl", COMMON_PRELUDE),
    ("src/stroke_info.f.glsl", COMMON_PRELUDE),
    ("src/stroke_fill.f.glsl", COMMON_PRELUDE),
    ("src/stroke_clear.f.glsl", COMMON_PRELUDE),
    ("src/stroke_debug.f.glsl", COMMON_PRELUDE),
    ("src/exporter_rect.f.glsl", None),
    ("src/texture_fill.f.glsl", None),
    ("src/quad.v.glsl", None),
    ("src/quad.f.glsl", None),
    ("src/postproc.f.glsl", "third_party/Fxaa3_11.f.glsl"),
    ("src/blur.f.glsl", None),
)

_ERRNO_TEXT = (
    ("E2BIG", "Argument list too long (POSIX.1)"),
    ("EACCES", "Permission denied (POSIX.1)"),
    ("EADDRINUSE", "Address already in use (POSIX.1)"),
    ("EADDRNOTAVAIL", "Address not available (POSIX.1)"),
    ("EAFNOSUPPORT", "Address family not supported (POSIX.1)"),
    ("EAGAIN", "Resource temporarily unavailable (may be the same value as EWOULDBLOCK) (POSIX.1)"),
    ("EALREADY", "Connection already in progress (POSIX.1)"),
    ("EBADF", "Bad file descriptor (POSIX.1)"),
    ("EBADMSG", "Bad message (POSIX.1)"),
    ("EBUSY", "Device or resource busy (POSIX.1)"),
    ("ECANCELED", "Operation canceled (POSIX.1)"),
    ("ECHILD", "No child processes (POSIX.1)"),
    ("ECONNABORTED", "Connection aborted (POSIX.1)"),
    ("ECONNREFUSED", "Connection refused (POSIX.1)"),
    ("ECONNRESET", "Connection reset (POSIX.1)"),
    ("EDEADLK", "Resource deadlock avoided (POSIX.1)"),
    ("EDESTADDRREQ", "Destination address required (POSIX.1)"),
    ("EDOM", "Mathematics argument out of domain of function (POSIX.1, C99)"),
    ("EEXIST", "File exists (POSIX.1)"),
    ("EFAULT", "Bad address (POSIX.1)"),
    ("EFBIG", "File too large (POSIX.1)"),
    ("EHOSTUNREACH", "Host is unreachable (POSIX.1)"),
    ("EIDRM", "Identifier removed (POSIX.1)"),
    ("EILSEQ", "Illegal byte sequence (POSIX.1, C99)"),
    ("EINPROGRESS", "Operation in progress (POSIX.1)"),
    ("EINTR", "Interrupted function call (POSIX.1); see signal(7)."),
    ("EINVAL", "Invalid argument (POSIX.1)"),
    ("EIO", "Input/output error (POSIX.1)"),
    ("EISCONN", "Socket is connected (POSIX.1)"),
    ("EISDIR", "Is a directory (POSIX.1)"),
    ("ELOOP", "Too many levels of symbolic links (POSIX.1)"),
    ("EMFILE", "Too many open files (POSIX.1); commonly caused by exceeding the "
               "RLIMIT_NOFILE resource limit described in getrlimit(2)"),
    ("EMLINK", "Too many links (POSIX.1)"),
    ("EMSGSIZE", "Message too long (POSIX.1)"),
    ("ENAMETOOLONG", "Filename too long (POSIX.1)"),
    ("ENETDOWN", "Network is down (POSIX.1)"),
    ("ENETRESET", "Connection aborted by network (POSIX.1)"),
    ("ENETUNREACH", "Network unreachable (POSIX.1)"),
    ("ENFILE", "Too many open files in system (POSIX.1); on Linux, this is probably a "
               "result of encountering the /proc/sys/fs/file-max limit (see proc(5))."),
    ("ENOBUFS", "No buffer space available (POSIX.1 (XSI STREAMS option))"),
    ("ENODATA", "No message is available on the STREAM head read queue (POSIX.1)"),
    ("ENODEV", "No such device (POSIX.1)"),
    ("ENOENT", "No such file or directory (POSIX.1)"),
    ("ENOEXEC", "Exec format error (POSIX.1)"),
    ("ENOLCK", "No locks available (POSIX.1)"),
    ("ENOLINK", "Link has been severed (POSIX.1)"),
    ("ENOMEM", "Not enough space (POSIX.1)"),
    ("ENOMSG", "No message of the desired type (POSIX.1)"),
    ("ENOPROTOOPT", "Protocol not available (POSIX.1)"),
    ("ENOSPC", "No space left on device (POSIX.1)"),
    ("ENOSR", "No STREAM resources (POSIX.1 (XSI STREAMS option))"),
    ("ENOSTR", "Not a STREAM (POSIX.1 (XSI STREAMS option))"),
    ("ENOSYS", "Function not implemented (POSIX.1)"),
    ("ENOTCONN", "The socket is not connected (POSIX.1)"),
    ("ENOTDIR", "Not a directory (POSIX.1)"),
    ("ENOTEMPTY", "Directory not empty (POSIX.1)"),
    ("ENOTSOCK", "Not a socket (POSIX.1)"),
    ("ENOTSUP", "Operation not supported (POSIX.1)"),
    ("ENOTTY", "Inappropriate I/O control operation (POSIX.1)"),
    ("ENXIO", "No such device or address (POSIX.1)"),
    ("EOVERFLOW", "Value too large to be stored in data type (POSIX.1)"),
    ("EPERM", "Operation not permitted (POSIX.1)"),
    ("EPIPE", "Broken pipe (POSIX.1)"),
    ("EPROTO", "Protocol error (POSIX.1)"),
    ("EPROTONOSUPPORT", "Protocol not supported (POSIX.1)"),
    ("EPROTOTYPE", "Protocol wrong type for socket (POSIX.1)"),
    ("ERANGE", "Result too large (POSIX.1, C99)"),
    ("EROFS", "Read-only filesystem (POSIX.1)"),
    ("ESPIPE", "Invalid seek (POSIX.1)"),
    ("ESRCH", "No such process (POSIX.1)"),
    ("ETIME", "Timer expired (POSIX.1 (XSI STREAMS option))"),
    ("ETIMEDOUT", "Connection timed out (POSIX.1)"),
    ("ETXTBSY", "Text file busy (POSIX.1)"),
    ("EXDEV", "Improper link (POSIX.1)"),
)


def _build_errno_table() -> dict:
    table: dict = {}
    for name, text in _ERRNO_TEXT:
        code = getattr(errno, name, None)
        if code is not None:
            table.setdefault(code, text)
    return table


_ERRNO_TABLE = _build_errno_table()


def errno_description(code: int) -> Optional[str]:
    """A human-readable description of an errno value, or None if unknown."""
    return _ERRNO_TABLE.get(code)


def read_shader_source(path: PathLike) -> str:
    """Read a whole file, making sure its last line ends with a newline."""
    with open(path, "r", encoding="utf-8", newline="") as handle:
        text = handle.read()
    if not text.endswith("\n"):
        text += "\n"
    return text


def split_lines(text: str) -> list[str]:
    """Split text into lines, dropping CR and LF and turning '"' into 'Q'.

    A line is closed by a newline or by the last character of the text; in
    the latter case that last character is not part of the line.
    """
    lines: list[str] = []
    begin = 0
    last = len(text) - 1
    for index, char in enumerate(text):
        if char == "\n" or index == last:
            if len(lines) >= MAX_LINES:
                raise ValueError(f"more than {MAX_LINES} lines")
            segment = text[begin:index]
            lines.append(
                "".join("Q" if c == '"' else c for c in segment if c not in "\r\n")
            )
            begin = index + 1
    return lines


def shader_variable_name(filename: str) -> str:
    """The C variable name for a shader file, e.g. 'a/my.v.glsl' -> 'g_my_v'."""
    name = filename.rsplit("/", 1)[-1]
    if len(name) + 3 > VARNAME_MAX:
        raise ValueError(f"file name too long for a variable name: {filename}")
    head, dot, rest = name.partition(".")
    if not dot:
        return "g_" + head
    return "g_" + head + "_" + rest.split(".", 1)[0]


def render_shader(path: PathLike, prelude_path: Optional[PathLike] = None) -> str:
    """The C declaration holding the shader at path, prelude lines first."""
    lines = split_lines(read_shader_source(path))
    prelude = split_lines(read_shader_source(prelude_path)) if prelude_path else []
    varname = shader_variable_name(os.fspath(path))
    parts = [f"static char {varname}[] = \n"]
    parts.extend(f'"{line}\\n"\n' for line in prelude)
    parts.extend(f'"{line}\\n"\n' for line in lines)
    parts.append(";\n")
    return "".join(parts)


def generate(
    output_path: PathLike,
    shaders: Iterable[Tuple[PathLike, Optional[PathLike]]],
) -> None:
    """Write the declarations for every (shader, prelude) pair to output_path."""
    with open(output_path, "w", encoding="utf-8", newline="\n") as out:
        for path, prelude in shaders:
            out.write(render_shader(path, prelude))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Generate the shader header from the build directory."""
    parser = argparse.ArgumentParser(description="Generate the shader header.")
    parser.add_argument("--output", default=DEFAULT_OUTPUT, help="header to write")
    args = parser.parse_args(argv)

    print("Generating shader code...", file=sys.stderr)
    try:
        out = open(Path(args.output), "w", encoding="utf-8", newline="\n")
    except OSError as exc:
        print("Could not open output file.", file=sys.stderr)
        _report_errno(exc)
    else:
        with out:
            for path, prelude in DEFAULT_SHADERS:
                try:
                    out.write(render_shader(path, prelude))
                except OSError as exc:
                    print("Could not open shader for reading", file=sys.stderr)
                    _report_errno(exc)
                    return 1
                except ValueError as exc:
                    print(f"Error when computing the variable name for file {path}: {exc}",
                          file=sys.stderr)
    print("Shaders generated OK", file=sys.stderr)
    return 0


def _report_errno(exc: OSError) -> None:
    text = errno_description(exc.errno) if exc.errno is not None else None
    if text:
        print(f'Errno is set to "{text}"', file=sys.stderr)


if __name__ == "__main__":
    sys.exit(main())