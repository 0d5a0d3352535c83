"""Building the site and pushing both git repositories."""

import logging
from pathlib import Path
from typing import Optional

from autosync.core.commands import CommandRunner
from autosync.core.models import Config

logger = logging.getLogger(__name__)

COMMIT_MESSAGE = "✅Update by autosync"


class SitePublisher:
    """Runs ``hugo`` and then commits and pushes the pages and project repos."""

    hugo_command = "hugo"
    git_command = "git"
    remote = "origin"
    branch = "main"

    def __init__(self, config: Config, runner: Optional[CommandRunner] = None):
        self.config = config
        self.runner = runner or CommandRunner()

    def publish(self) -> None:
        """Build the site, then push the pages repo and the project repo.

        Raises:
            CommandError: On the first command that fails
        """
        blog = self.config.blog

        logger.info("📝 Building github page")
        self.runner.run(self.hugo_command, cwd=blog.hugo_build_dir)

        logger.info("📝 Pushing github page")
        self.push(blog.github_page_dir)

        logger.info("📝 Pushing project")
        self.push(blog.project_dir)

    def push(self, repo_dir: Path) -> None:
        """Stage everything in ``repo_dir``, commit and push to the remote."""
        self.runner.run(self.git_command, ["add", "."], cwd=repo_dir)
        self.runner.run(self.git_command, ["commit", "-m", COMMIT_MESSAGE], cwd=repo_dir)
        self.runner.run(self.git_command, ["push", "-u", self.remote, self.branch], cwd=repo_dir)
