"""Shared fixtures for autosync tests."""

import json
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import pytest

from autosync.core.commands import CommandRunner
from autosync.core.models import BlogConfig, CommandError, Config, SourceConfig


class RecordingRunner(CommandRunner):
    """Records commands instead of running them.

    ``hugo new posts/<name>`` writes a scaffold into ``posts_dir`` the way
    hugo does, so the materializer overwrites a real file.
    """

    def __init__(self, posts_dir: Optional[Path] = None, fail_on: Optional[Tuple[str, ...]] = None):
        self.posts_dir = posts_dir
        self.fail_on = fail_on
        self.calls: List[Tuple[str, List[str], Optional[Path]]] = []

    def run(self, command: str, args: Sequence[str] = (), cwd=None, on_error=None) -> str:
        args = list(args)
        self.calls.append((command, args, Path(cwd) if cwd is not None else None))

        if command == "hugo" and args[:1] == ["new"] and self.posts_dir is not None:
            scaffold = self.posts_dir / Path(args[1]).name
            scaffold.write_text("---\ntitle: scaffold\ndraft: true\n---\n")

        if self.fail_on is not None and tuple([command, *args][:len(self.fail_on)]) == self.fail_on:
            error = CommandError(command, args, 1, "boom")
            if on_error is not None:
                on_error(error)
            raise error
        return ""


@pytest.fixture
def site(tmp_path):
    """Create the blog and vault directories a config points at."""
    dirs = {
        "project": tmp_path / "blog",
        "hugo": tmp_path / "blog" / "site",
        "pages": tmp_path / "pages",
        "posts": tmp_path / "blog" / "site" / "content" / "posts",
        "vault": tmp_path / "vault",
    }
    for d in dirs.values():
        d.mkdir(parents=True, exist_ok=True)
    return dirs


@pytest.fixture
def config(site):
    return Config(
        blog=BlogConfig(
            project_dir=site["project"],
            hugo_build_dir=site["hugo"],
            github_page_dir=site["pages"],
            posts_dir=site["posts"],
        ),
        src=SourceConfig(base_dir=site["vault"], exclude=frozenset(["skip"])),
    )


@pytest.fixture
def config_file(tmp_path, site):
    """Write a JSON config file matching the ``site`` directories."""
    path = tmp_path / ".autosync.config.json"
    path.write_text(json.dumps({
        "blog": {
            "projectDir": str(site["project"]),
            "hugoBuildDir": str(site["hugo"]),
            "githubPageDir": str(site["pages"]),
            "postsDir": str(site["posts"]),
        },
        "src": {
            "baseDir": str(site["vault"]),
            "exclude": ["skip", ".obsidian"],
        },
    }))
    return path
