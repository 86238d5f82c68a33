# stdlib
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class ProjectVariable:
    """
    A platform.sh project-level variable.

    Names prefixed with `env:` are exposed to the build and runtime
    environments as plain environment variables.
    """

    name: str
    value: str
    is_sensitive: bool = False
    is_json: bool = False
    visible_build: bool = True
    visible_runtime: bool = True
    attributes: Dict[str, str] = field(default_factory=dict)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "attributes": dict(self.attributes),
            "value": self.value,
            "is_json": self.is_json,
            "is_sensitive": self.is_sensitive,
            "visible_build": self.visible_build,
            "visible_runtime": self.visible_runtime,
        }
