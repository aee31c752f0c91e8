"""IdGenerator port - generation of entity identifiers."""

import uuid
from abc import ABC, abstractmethod


class IdGenerator(ABC):
    """
    Port for identifier generation.

    Lets tests inject predictable ids.
    """

    @abstractmethod
    def new_id(self) -> str:
        """
        Generate a new unique identifier.

        Returns:
            UUID string (xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx).
        """
        raise NotImplementedError


class UUIDGenerator(IdGenerator):
    """Real implementation generating random UUID4 values."""

    def new_id(self) -> str:
        return str(uuid.uuid4())


class FakeIdGenerator(IdGenerator):
    """
    Fake implementation for tests.

    Generates sequential UUID-shaped ids.
    """

    def __init__(self) -> None:
        self._counter = 0

    def new_id(self) -> str:
        self._counter += 1
        hex_value = f"{self._counter:032x}"
        return f"{hex_value[:8]}-{hex_value[8:12]}-{hex_value[12:16]}-{hex_value[16:20]}-{hex_value[20:]}"
