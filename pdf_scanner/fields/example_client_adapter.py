"""Offline completion client.

Answers every request with a fixed payload in which no field was found, so a
run can be exercised end to end without network access or credentials.
"""

import json
from typing import ClassVar

from pdf_scanner.fields.client_base import BaseCompletionClient
from pdf_scanner.fields.models import NOT_AVAILABLE


class ExampleClientAdapter(BaseCompletionClient):
    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "invoice_number": NOT_AVAILABLE,
        "date": NOT_AVAILABLE,
        "total_amount": NOT_AVAILABLE,
        "sender": NOT_AVAILABLE,
    }

    def __init__(self, response: dict[str, object] | None = None) -> None:
        self._response = response if response is not None else self.DEFAULT_RESPONSE

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt, json_schema
        return json.dumps(self._response)
