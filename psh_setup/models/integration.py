# stdlib
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


@dataclass
class GithubIntegration:
    """
    A GitHub integration for a platform.sh project.

    Branches are fetched and pruned and pull requests are built. Draft pull
    requests and post-merge builds are not. Pull request environments do not
    clone their parent's data.
    """

    token: str
    repository: str
    base_url: Optional[str] = None
    fetch_branches: bool = True
    prune_branches: bool = True
    build_pull_requests: bool = True
    build_draft_pull_requests: bool = False
    build_pull_requests_post_merge: bool = False
    pull_requests_clone_parent_data: bool = False
    type: str = field(default="github", init=False)

    def to_payload(self) -> Dict[str, Any]:
        return asdict(self)
