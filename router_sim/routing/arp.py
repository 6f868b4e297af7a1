"""Address resolution (ARP) table."""

import logging
from typing import Dict, List, Optional, Tuple


logger = logging.getLogger(__name__)


class AddressResolutionTable:
    """
    Maps network addresses to link addresses for one router.

    At most one link address is held per network address; later writes
    overwrite earlier ones. Entries never age out.
    """

    def __init__(self):
        # network address -> link address
        self._entries: Dict[str, str] = {}

    def put(self, network_address: str, link_address: str):
        """
        Insert or overwrite an entry.

        Args:
            network_address: Network (IP) address
            link_address: Link (MAC) address
        """
        previous = self._entries.get(network_address)
        self._entries[network_address] = link_address

        if previous is not None and previous != link_address:
            logger.info(f"ARP entry {network_address} changed {previous} -> {link_address}")
        else:
            logger.debug(f"ARP entry {network_address} -> {link_address}")

    def lookup(self, network_address: str) -> Optional[str]:
        """
        Resolve a network address.

        Args:
            network_address: Network address to resolve

        Returns:
            Link address, or None if unknown
        """
        return self._entries.get(network_address)

    def entries(self) -> List[Tuple[str, str]]:
        """Get all entries in insertion order."""
        return list(self._entries.items())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, network_address: object) -> bool:
        return network_address in self._entries
