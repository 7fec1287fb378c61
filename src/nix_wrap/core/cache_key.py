"""Cache-key derivation from the state of the user's Nix channels.

The key summarises every channel under ``~/.nix-defexpr``: for each
channel directory, either the full text of its ``manifest.nix`` or the
git revision of its working copy.  Two runs against identical channel
state produce an identical key.

All filesystem and process access goes through the injected
:class:`~nix_wrap.core.protocols.FileSystem` and
:class:`~nix_wrap.core.protocols.ProcessRunner`.
"""

from __future__ import annotations

import logging
from pathlib import Path

from nix_wrap.core.protocols import FileSystem, ProcessRunner
from nix_wrap.exceptions import NixWrapIOError
from nix_wrap.utils.constants import (
    DEFEXPR_DIRNAME,
    GIT_DIRNAME,
    MANIFEST_FILENAME,
    REVISION_COMMAND,
)

logger = logging.getLogger(__name__)


def default_defexpr_dir(fs: FileSystem) -> Path:
    """Return ``<home>/.nix-defexpr``.

    Raises
    ------
    NoHomeDirectoryError
        Propagated from :meth:`FileSystem.home_dir`.
    """
    return fs.home_dir() / DEFEXPR_DIRNAME


def channel_version(
    channel_dir: Path,
    fs: FileSystem,
    runner: ProcessRunner,
) -> str | None:
    """Return the version indicator for one channel, or ``None``.

    Lookup order:

    1. Contents of ``manifest.nix`` when it is a regular file.
    2. ``git rev-parse --verify HEAD`` when ``.git`` is a directory.  A
       non-zero exit status raises :class:`NixWrapIOError`.
    3. ``None`` — the channel does not contribute to the key.
    """
    manifest = channel_dir / MANIFEST_FILENAME
    if fs.is_file(manifest):
        return fs.read_text(manifest)

    if fs.is_dir(channel_dir / GIT_DIRNAME):
        result = runner.run(REVISION_COMMAND, cwd=channel_dir)
        if result.returncode != 0:
            raise NixWrapIOError(
                f"git rev-parse failed in {channel_dir} (status {result.returncode}).",
                hint="Check that the channel checkout has a valid HEAD.",
            )
        return result.stdout.rstrip()

    logger.debug("Channel %s has no version indicator", channel_dir.name)
    return None


def key_fragment(channel: str, version: str) -> str:
    """Render one ``"<channel>": <version>`` key fragment."""
    return f'"{channel}": {version}'


def derive_cache_key(
    defexpr_dir: Path,
    fs: FileSystem,
    runner: ProcessRunner,
) -> str:
    """Build the cache key for every channel under *defexpr_dir*.

    Non-directory entries are skipped.  Fragments are sorted by channel
    name so that filesystem enumeration order never changes the key.

    Raises
    ------
    NixWrapIOError
        On any failure enumerating or reading; no partial key is
        returned.
    """
    fragments: list[tuple[str, str]] = []
    for entry in fs.list_dir(defexpr_dir):
        if not fs.is_dir(entry):
            continue
        version = channel_version(entry, fs, runner)
        if version is not None:
            fragments.append((entry.name, key_fragment(entry.name, version)))

    fragments.sort(key=lambda pair: pair[0])
    key = "{" + ", ".join(fragment for _, fragment in fragments) + "}"
    logger.debug("Derived cache key from %d channel(s)", len(fragments))
    return key
