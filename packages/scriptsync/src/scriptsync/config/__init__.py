"""Repository configuration loading."""

from .loader import RepoConfig, load_repo_config, strip_json_comments

__all__ = ["RepoConfig", "load_repo_config", "strip_json_comments"]
