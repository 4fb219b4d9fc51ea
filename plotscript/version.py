"""Querying and parsing the version of the installed gnuplot."""

from __future__ import annotations

import re
import subprocess
from dataclasses import dataclass

_NUMBER = re.compile(r"\+?[0-9]+")


class VersionError(Exception):
    """Raised when the gnuplot version cannot be determined.

    ``kind`` is one of ``"exec"``, ``"error"``, ``"output"`` or ``"parse"``.
    """

    def __init__(self, kind: str, message: str) -> None:
        super().__init__(message)
        self.kind = kind


@dataclass(frozen=True)
class Version:
    """A gnuplot version number."""

    major: int
    minor: int
    patch: str


def _parse_number(text: str) -> int:
    if not _NUMBER.fullmatch(text):
        raise ValueError(f"invalid version number: {text!r}")
    return int(text)


def parse_version(text: str) -> Version:
    """Parse output such as ``gnuplot 5.0 patchlevel 7``.

    Raises ValueError if the text is not in that form.
    """
    words = text.split()
    if len(words) < 2:
        raise ValueError("missing version number")
    numbers = words[1].split(".")
    if len(numbers) < 2:
        raise ValueError("missing minor version number")
    major = _parse_number(numbers[0])
    minor = _parse_number(numbers[1])
    if len(words) < 4:
        raise ValueError("missing patch level")
    return Version(major=major, minor=minor, patch=words[3])


def version() -> Version:
    """Return the version of the ``gnuplot`` on the path."""
    try:
        completed = subprocess.run(["gnuplot", "--version"], capture_output=True)
    except OSError as err:
        raise VersionError("exec", f"`gnuplot --version` failed: {err}") from err

    if completed.returncode != 0:
        try:
            message = completed.stderr.decode("utf-8")
        except UnicodeDecodeError as err:
            raise VersionError(
                "output", "`gnuplot --version` returned invalid utf-8"
            ) from err
        raise VersionError(
            "error", f"`gnuplot --version` failed with error message:\n{message}"
        )

    try:
        output = completed.stdout.decode("utf-8")
    except UnicodeDecodeError as err:
        raise VersionError(
            "output", "`gnuplot --version` returned invalid utf-8"
        ) from err

    try:
        return parse_version(output)
    except ValueError as err:
        raise VersionError(
            "parse",
            f"`gnuplot --version` returned an unparseable version string: {output}",
        ) from err