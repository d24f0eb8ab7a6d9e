from abc import ABC, abstractmethod

from app.schemas.short import ShortContent


class BaseScriptGenerator(ABC):

    name: str = "base"

    @abstractmethod
    def generate(self, topic: str, duration: int) -> ShortContent:
        """
        Returns: a fully assembled ShortContent for the topic
        """
        pass
