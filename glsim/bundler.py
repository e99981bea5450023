"""Bundle compiled shader binaries into a single generated C++ header."""

from __future__ import annotations

import os
import sys
from pathlib import Path, PurePath
from typing import Optional, Sequence, Union

PathLike = Union[str, "os.PathLike[str]"]

_BYTES_PER_LINE = 12
_USAGE = "Usage: glsim-bundler <output_file> <base_dir> <input_file1> [<input_file2> ...]"

_PREAMBLE = (
    "#pragma once\n\n"
    "#include <cstdint>\n"
    "#include <cstddef>\n\n"
    "struct BundleFileData {\n"
    "\tconst char* path;\n"
    "\tsize_t start_idx;\n"
    "\tsize_t size;\n"
    "};\n\n"
)


def _relative_path(path: PathLike, base_dir: PathLike) -> str:
    full = os.path.realpath(path)
    root = os.path.realpath(base_dir)
    return PurePath(os.path.relpath(full, root)).as_posix()


def render_bundle(input_files: Sequence[PathLike], base_dir: PathLike) -> str:
    """Return the header text holding every input file and its offset table.

    Each file must be a whole number of 32-bit words long.
    """
    contents = [(str(path), Path(path).read_bytes()) for path in input_files]

    parts = [_PREAMBLE, f"inline size_t BUNDLE_FILE_COUNT = {len(contents)};\n"]
    parts.append("inline BundleFileData BUNDLE_FILES[] = {\n")

    total_size = 0
    for path, data in contents:
        size = len(data)
        if size % 4 != 0:
            raise ValueError(f"{path} is {size} bytes long, not a multiple of 4")
        rel = _relative_path(path, base_dir)
        parts.append(f'\t{{ "{rel}", {total_size}, {size} }}, \n')
        total_size += size
    parts.append("};\n\n")

    parts.append("inline uint8_t BUNDLE_DATA[] = {")
    counter = 0
    for path, data in contents:
        parts.append(f"\n\t/* {path} */\n\t")
        for byte in data:
            parts.append(f"0x{byte:02X}, ")
            counter += 1
            if counter >= _BYTES_PER_LINE:
                parts.append("\n\t")
                counter = 0
    parts.append("\n};\n\n")

    return "".join(parts)


def bundle(output_path: PathLike, input_files: Sequence[PathLike], base_dir: PathLike) -> None:
    """Write the bundle header for ``input_files`` to ``output_path``."""
    text = render_bundle(input_files, base_dir)
    with open(output_path, "w", encoding="utf-8", newline="") as handle:
        handle.write(text)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: ``<output_file> <base_dir> <input_file>...``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 3:
        print(_USAGE, file=sys.stderr)
        return 1

    output_file, base_dir, *input_files = args
    try:
        bundle(output_file, input_files, base_dir)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())