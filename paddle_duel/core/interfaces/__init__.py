"""
Protocols the core depends on
"""

from paddle_duel.core.interfaces.host import HostProtocol

__all__ = ["HostProtocol"]
