"""Shared fixtures for drivepath tests."""

import json

import pytest

from drivepath.backend import InMemoryBackend

# Root
# |-- X
# |   |-- Z
# |   |   |-- notes.txt (s)
# |   |   |-- shared.txt (m, also in Y)
# |   |   `-- Shared/ (sh2)
# |   |-- Report (A)
# |   `-- Shared/ (sh1)
# |-- Y
# |   |-- Report (B)
# |   `-- shared.txt (m)
# `-- top.txt
TREE = {
    "items": [
        {"id": "r", "name": "Root", "type": "folder", "parents": []},
        {"id": "x", "name": "X", "type": "folder", "parents": ["r"]},
        {"id": "y", "name": "Y", "type": "folder", "parents": ["r"]},
        {"id": "z", "name": "Z", "type": "folder", "parents": ["x"]},
        {"id": "A", "name": "Report", "type": "text", "parents": ["x"]},
        {"id": "B", "name": "Report", "type": "text", "parents": ["y"]},
        {"id": "s", "name": "notes.txt", "type": "text", "parents": ["z"]},
        {"id": "m", "name": "shared.txt", "type": "text", "parents": ["z", "y"]},
        {"id": "sh1", "name": "Shared", "type": "folder", "parents": ["x"]},
        {"id": "sh2", "name": "Shared", "type": "folder", "parents": ["z"]},
        {"id": "top", "name": "top.txt", "type": "text", "parents": ["r"]},
    ]
}


@pytest.fixture
def tree_data():
    """Provide a fresh copy of the sample tree."""
    return json.loads(json.dumps(TREE))


@pytest.fixture
def backend(tree_data):
    """Provide an in-memory backend over the sample tree."""
    return InMemoryBackend.from_dict(tree_data)


@pytest.fixture
def snapshot_file(tmp_path, tree_data):
    """Write the sample tree to a JSON snapshot file."""
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(tree_data), encoding="utf-8")
    return path
