"""Resource registry mapping resource URIs to handlers."""

import logging
from typing import Dict, List, Optional

from mcp.types import Resource

from core.envelope import JSON_MIME_TYPE
from resources.base import ResourceHandler
from resources.handlers import DatabasesResource, SchemaResource, TablesResource

logger = logging.getLogger(__name__)


class ResourceRegistry:
    """Closed mapping of ``<scheme>://<path>`` URIs to resource handlers."""

    def __init__(self, scheme: str = "mysql"):
        self.scheme = scheme
        self.handlers: Dict[str, ResourceHandler] = {}
        for handler in (DatabasesResource(), TablesResource(), SchemaResource()):
            self.handlers[self.uri_for(handler)] = handler
        logger.info(f"Registered {len(self.handlers)} MCP resources under {scheme}://")

    def uri_for(self, handler: ResourceHandler) -> str:
        return f"{self.scheme}://{handler.path}"

    def get_handler(self, uri: str) -> Optional[ResourceHandler]:
        """Return the handler for ``uri``; a trailing slash is ignored."""
        return self.handlers.get(uri.rstrip("/"))

    def list_resources(self) -> List[Resource]:
        return [
            Resource(
                uri=uri,
                name=handler.name,
                description=handler.description,
                mimeType=JSON_MIME_TYPE,
            )
            for uri, handler in self.handlers.items()
        ]
