# stdlib
from dataclasses import dataclass


@dataclass(frozen=True)
class SiteInfo:
    """
    The site found in the monorepo's sites directory.

    Attributes:
        dir_name: Name of the directory holding the site
        name: Package name from the site's manifest, without the `@sites/` scope
    """

    dir_name: str
    name: str
