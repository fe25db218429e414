"""Shared fixtures for provider tests."""

import json
import os
from pathlib import Path

import pytest


def touch_mtime(path: Path, mtime: float) -> None:
    os.utime(path, (mtime, mtime))


def write_jsonl(path: Path, records) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    lines = [r if isinstance(r, str) else json.dumps(r) for r in records]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def user(text):
    return {"type": "user", "message": {"role": "user", "content": text}}


def assistant(text):
    return {
        "type": "assistant",
        "message": {"role": "assistant", "content": [{"type": "text", "text": text}]},
    }


@pytest.fixture
def brain_dir(tmp_path):
    path = tmp_path / "brain"
    path.mkdir()
    return path


@pytest.fixture
def claude_dir(tmp_path):
    path = tmp_path / ".claude"
    (path / "projects").mkdir(parents=True)
    return path
