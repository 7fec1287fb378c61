"""Shared pytest fixtures and configuration for the nix-wrap test suite.

Guidelines
----------
* No real ``nix-env``, ``nix-shell`` or ``git`` invocation in any test.
* Subprocesses are faked at the :class:`ProcessRunner` boundary.
* Core tests must be pure — no side effects.
* Filesystem tests use ``tmp_path`` only.
"""

from __future__ import annotations
