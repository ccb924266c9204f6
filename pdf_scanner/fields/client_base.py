from abc import ABC, abstractmethod


class BaseCompletionClient(ABC):
    """Contract for provider-specific structured-output completion clients."""

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        """Return provider response as plain text.

        Raises:
            FieldExtractionError: if the provider returns nothing usable.
            FieldExtractionNetworkError: on network or API failures.
        """
