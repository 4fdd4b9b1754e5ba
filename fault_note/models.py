"""
Domain records shared by the form state and the remote collaborator
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TargetRef:
    """A remote document an entry can be appended to"""
    id: str
    title: str


@dataclass(frozen=True)
class Entry:
    """Fault log entry assembled from the input fields at submission time"""
    error: str
    problem: str
    solution: str
    code: Optional[str] = None

