"""
Repository interfaces - Define contracts for data access
"""
from abc import ABC, abstractmethod
from typing import Optional, List
from .models import TeacherRecord, Subject


class IKeyValueStore(ABC):
    """Durable per-client storage for serialized state"""

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Get the raw value stored under key"""
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store a raw value under key, replacing any previous one"""
        pass

    @abstractmethod
    async def clear(self, key: str) -> None:
        """Remove the value stored under key"""
        pass


class ITeacherRepository(ABC):
    """Teacher repository interface"""

    @abstractmethod
    async def list_teachers(self) -> List[TeacherRecord]:
        """List every published teacher"""
        pass

    @abstractmethod
    async def find_by_id(self, teacher_id: int) -> Optional[TeacherRecord]:
        """Find teacher by ID"""
        pass

    @abstractmethod
    async def list_subjects(self) -> List[Subject]:
        """List subjects offered on the platform"""
        pass
