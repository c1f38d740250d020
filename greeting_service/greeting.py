"""Processor serving the configured greeting at the service root."""

import logging
from typing import List

from .models import RootQueryParams
from .processor import BaseProcessor, StatelessAction

logger = logging.getLogger(__name__)


class GreetingProcessor(BaseProcessor):
    """Greets callers with the configured phrase followed by their name."""

    def __init__(self, greeting_text: str, version: str = "1.0.0"):
        self._greeting_text = greeting_text
        self._version = version

    @property
    def name(self) -> str:
        return "greeting"

    @property
    def version(self) -> str:
        return self._version

    @property
    def greeting_text(self) -> str:
        return self._greeting_text

    def get_stateless_actions(self) -> List[StatelessAction]:
        return [
            StatelessAction(
                name="root",
                path="/",
                query_params_model=RootQueryParams,
                handler=self.handle_root,
                methods=("GET",),
                media_type="text/plain",
                summary="Greet the caller by name.",
                description=(
                    "Returns the configured greeting, a single space, and the `name` "
                    "query parameter verbatim."
                ),
            ),
        ]

    def greet(self, name: str) -> str:
        """Return the greeting for ``name``; no trimming or escaping is applied."""
        logger.debug("Greeting %r", name)
        return self._greeting_text + " " + name

    def handle_root(self, query_params: RootQueryParams) -> str:
        return self.greet(query_params.name)
