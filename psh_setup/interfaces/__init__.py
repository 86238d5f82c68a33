from psh_setup.interfaces.auth import AuthClientProtocol
from psh_setup.interfaces.orchestrator import OrchestratorProtocol
from psh_setup.interfaces.platform import PlatformClientProtocol

__all__ = [
    "AuthClientProtocol",
    "OrchestratorProtocol",
    "PlatformClientProtocol",
]
