"""Shared pytest markers describing platform expectations."""

from __future__ import annotations

import os

import pytest

OS_AGNOSTIC = pytest.mark.os_agnostic
POSIX_ONLY = pytest.mark.skipif(os.name == "nt", reason="needs POSIX byte-level argv")

__all__ = ["OS_AGNOSTIC", "POSIX_ONLY"]
