"""Offline example gateway.

Use this module as a reference when implementing new provider adapters.
Implement BaseModelGateway and register the provider in GatewayFactory.
"""

import json
from typing import ClassVar

from dealscreen.gateway.base import BaseModelGateway


class ExampleGateway(BaseModelGateway):
    """Example adapter that answers every pipeline prompt with a fixed reply.

    No network calls. Useful for local development and demos: classifier
    prompts get ``YES``, confidence prompts get ``CONFIDENT`` and anything
    else gets a minimal valid analysis JSON.
    """

    DEFAULT_ANALYSIS: ClassVar[dict[str, object]] = {
        "protectionScore": 75,
        "overallRisk": "medium",
        "issues": [],
        "verified": [],
        "keyTerms": {},
        "recommendations": ["Review the contract with your legal advisor"],
    }

    def complete(self, prompt: str) -> str:
        if "CONFIDENT or NOT_CONFIDENT" in prompt:
            return "CONFIDENT"
        if "YES or NO" in prompt:
            return "YES"
        return json.dumps(self.DEFAULT_ANALYSIS)
