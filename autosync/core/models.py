"""Data models for autosync."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, FrozenSet, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator


class AutosyncError(Exception):
    """Base class for errors that abort a sync run."""


class ConfigError(AutosyncError):
    """The configuration file is missing, unreadable or malformed."""


class CommandError(AutosyncError):
    """An external command could not be run or exited non-zero."""

    def __init__(self, command: str, args: Sequence[str], returncode: Optional[int], output: str = ""):
        self.command = command
        self.args_list = list(args)
        self.returncode = returncode
        self.output = output
        invocation = " ".join([command, *self.args_list])
        if returncode is None:
            message = f"Failed to run `{invocation}`: {output}"
        else:
            message = f"`{invocation}` exited with status {returncode}"
            if output.strip():
                message += f"\n{output.strip()}"
        super().__init__(message)


class MaterializeError(AutosyncError):
    """A selected note could not be copied into the posts directory."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: {path}")


def _expand_path(value: Any) -> Any:
    if isinstance(value, str):
        if not value:
            raise ValueError("must be a non-empty path")
        return Path(value).expanduser()
    return value


class BlogConfig(BaseModel):
    """Locations on the blog side: the Hugo project and the pages repo.

    Attributes:
        project_dir: The blog's source project (git repo)
        hugo_build_dir: Where ``hugo`` is run
        github_page_dir: The generated-site git repo
        posts_dir: Hugo's posts content directory
    """
    model_config = ConfigDict(populate_by_name=True)

    project_dir: Path = Field(alias="projectDir")
    hugo_build_dir: Path = Field(alias="hugoBuildDir")
    github_page_dir: Path = Field(alias="githubPageDir")
    posts_dir: Path = Field(alias="postsDir")

    @field_validator("project_dir", "hugo_build_dir", "github_page_dir", "posts_dir", mode="before")
    @classmethod
    def expand_user(cls, value: Any) -> Any:
        return _expand_path(value)


class SourceConfig(BaseModel):
    """The note vault to scan."""
    model_config = ConfigDict(populate_by_name=True)

    base_dir: Path = Field(alias="baseDir")
    exclude: FrozenSet[StrictStr] = Field(
        default_factory=frozenset,
        description="Base names skipped at any depth",
    )

    @field_validator("base_dir", mode="before")
    @classmethod
    def expand_user(cls, value: Any) -> Any:
        return _expand_path(value)


class FrontmatterConfig(BaseModel):
    """Optional Hugo front matter added to notes that have none."""
    enabled: StrictBool = False
    author: Optional[StrictStr] = None


class Config(BaseModel):
    """Everything a sync run needs, loaded once from the JSON config file."""
    blog: BlogConfig
    src: SourceConfig
    frontmatter: FrontmatterConfig = Field(default_factory=FrontmatterConfig)

    def required_dirs(self) -> List[Path]:
        """Directories that must exist before a run can start."""
        return [
            self.blog.project_dir,
            self.blog.hugo_build_dir,
            self.blog.github_page_dir,
            self.blog.posts_dir,
            self.src.base_dir,
        ]


@dataclass
class MaterializedPost:
    """A note copied into the posts directory."""
    source: Path
    published_source: Path
    destination: Path
    renamed: bool = True


@dataclass
class SyncResult:
    """Result of a sync run."""
    discovered: List[Path] = field(default_factory=list)
    selected: List[Path] = field(default_factory=list)
    posts: List[MaterializedPost] = field(default_factory=list)
    published: bool = False
