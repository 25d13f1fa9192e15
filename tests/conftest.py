"""Shared pytest fixtures for gqlts tests."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from gqlts.config.models import CodegenOptions
from gqlts.config.settings import GqltsSettings

SCHEMA_SDL = """\
scalar DateTime
scalar Money

enum Role {
  ADMIN
  MEMBER
}

interface Node {
  id: ID!
}

type User implements Node {
  id: ID!
  name: String
  age: Int
  score: Float!
  active: Boolean!
  role: Role
  friends: [User]
  tags: [String!]!
  createdAt: DateTime
  balance: Money!
}

type Post implements Node {
  id: ID!
  title: String!
  author: User!
}

union SearchResult = User | Post

input CreateUserInput {
  name: String!
  role: Role
}

type Query {
  me: User
  search(text: String!): [SearchResult!]!
}
"""


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty temp directory with no GQLTS_* env vars."""
    for key in list(os.environ):
        if key.startswith("GQLTS_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """Undo the root handler swap done by configure_logging() in CLI tests."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("gqlts").setLevel(logging.NOTSET)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def schema_file(tmp_path: Path) -> Path:
    """SDL schema exercising scalars, enums, lists, interfaces, and inputs."""
    path = tmp_path / "schema.graphql"
    path.write_text(SCHEMA_SDL, encoding="utf-8")
    return path


@pytest.fixture
def make_settings(tmp_path: Path):
    """Factory for settings rooted at the temp directory."""

    def _make(**codegen: object) -> GqltsSettings:
        settings = GqltsSettings.from_cli(project_root=tmp_path)
        if codegen:
            settings = settings.model_copy(update={"codegen": CodegenOptions(**codegen)})
        return settings

    return _make
