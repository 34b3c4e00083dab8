from __future__ import annotations

from pathlib import Path


def fixtures_dir() -> Path:
    return Path(__file__).resolve().parent / "fixtures"


def load_fixture_bytes(name: str) -> bytes:
    return (fixtures_dir() / name).read_bytes()
