"""Public IP discovery client for infrastructure layer.

Public API (Package Level):
- PublicIpClient: Client resolving this host's public address
- PublicIpLookup: Dataclass for self-lookup results
"""

from infrastructure.clients.public_ip.client import PublicIpClient, PublicIpLookup

__all__ = [
    "PublicIpClient",
    "PublicIpLookup",
]
