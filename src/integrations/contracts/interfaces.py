from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Abstract transport interface
# ---------------------------------------------------------------------------

class HttpServiceInvoker(ABC):
    """Every transport used by a payment session must implement this interface.

    The session only consumes the parsed JSON body. Headers and HTTP status
    codes stay inside the invoker; the gateway's own ``Status`` field decides
    success or failure.
    """

    @abstractmethod
    async def invoke(self, url: str, method: str, body: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Send ``body`` as JSON to ``url`` and return the parsed JSON response."""
