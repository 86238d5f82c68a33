from psh_setup.services.auth_client import AuthClient
from psh_setup.services.orchestrator import SetupOrchestrator
from psh_setup.services.platform_client import PlatformClient

__all__ = ["AuthClient", "PlatformClient", "SetupOrchestrator"]
