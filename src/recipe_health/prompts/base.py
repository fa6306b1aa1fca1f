from abc import ABC, abstractmethod  # noqa: D100


class BasePromptBuilder(ABC):
    """Abstract base class for analysis prompt builders."""

    @abstractmethod
    def create_prompt(self, ingredients: list[str]) -> str:
        """Creates the full instruction text sent to the model."""
