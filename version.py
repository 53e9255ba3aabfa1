"""Package version, kept in sync with the git tags.

Source distributions carry the number stored below; in a git checkout
it is derived from `git describe` and written back into this file.
"""

import os
import re
import subprocess


# This line is updated automatically
version = "0.1.0"

VERSION_LINE = re.compile(r"^version = \".*\"$", re.MULTILINE)


def describe(path):
    """Return the `git describe` output for `path`, None outside git."""
    try:
        out = subprocess.check_output(
            ["git", "describe", "--tags"], cwd=path,
            stderr=subprocess.DEVNULL, universal_newlines=True)
    except (OSError, subprocess.CalledProcessError):
        return None
    return out.strip()


def from_description(description):
    """Convert `v1.2-3-gabcdef` into a PEP 440 version (`1.2.post3+gabcdef`)."""
    tag, sep, rest = description.lstrip("v").partition("-")
    if not sep:
        return tag

    revision, _, commit = rest.partition("-")
    if not revision.isdigit() or not commit:
        raise RuntimeError("Invalid version format: " + description)
    return "{}.post{}+{}".format(tag, revision, commit)


def store(new_version, filename=__file__):
    with open(filename) as f:
        content = f.read()

    updated = VERSION_LINE.sub(
        "version = \"{}\"".format(new_version), content, count=1)
    if updated != content:
        with open(filename, "w") as f:
            f.write(updated)


_description = describe(os.path.dirname(os.path.abspath(__file__)))
if _description is not None:
    version = from_description(_description)
    store(version)
