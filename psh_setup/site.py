# stdlib
import json
import logging
import os

# first party
from psh_setup.models.site import SiteInfo

logger = logging.getLogger(__name__)

SITE_PACKAGE_SCOPE = "@sites/"


class SiteInspectionError(IndexError):
    pass


def get_site_dir_name(sites_dir: str) -> str:
    """Return the first entry of the sites directory."""
    entries = sorted(os.listdir(sites_dir))
    if not entries:
        raise SiteInspectionError(f"No site found in `{sites_dir}`")
    return entries[0]


def read_site_name(sites_dir: str, dir_name: str) -> str:
    """Read the site's package name from its package.json, minus the scope."""
    manifest_path = os.path.join(sites_dir, dir_name, "package.json")
    with open(manifest_path) as manifest:
        package_json = json.load(manifest)

    name = package_json["name"]
    if name.startswith(SITE_PACKAGE_SCOPE):
        name = name[len(SITE_PACKAGE_SCOPE) :]
    return name


def inspect_site(sites_dir: str) -> SiteInfo:
    dir_name = get_site_dir_name(sites_dir)
    site = SiteInfo(dir_name=dir_name, name=read_site_name(sites_dir, dir_name))
    logger.info(
        "Found site", extra={"site_dir_name": site.dir_name, "site_name": site.name}
    )
    return site
