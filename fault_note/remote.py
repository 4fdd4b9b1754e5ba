"""
Remote collaborator contract

The form only needs two things from a document store: the list of pages an
entry can go to, and a way to append one entry to one page. Implementations
raise RemoteError subclasses (see errors.py) and nothing else.
"""
from abc import ABC, abstractmethod
from typing import List

from .models import Entry, TargetRef


class RemoteCollaborator(ABC):
    """Document store the form submits to"""

    @abstractmethod
    def list_targets(self) -> List[TargetRef]:
        """
        Fetch every page an entry can be appended to.

        Raises:
            NetworkError, AuthError
        """

    @abstractmethod
    def append_entry(self, target_id: str, entry: Entry) -> None:
        """
        Append one entry to the page ``target_id``. Blocks until the store
        answers or the client timeout expires.

        Raises:
            NetworkError, RemoteTimeoutError, AuthError, NotFoundError
        """

    def close(self) -> None:
        """Release network resources"""
