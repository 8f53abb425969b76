from enum import Enum


class EntityStatus(Enum):
    """서비스가 관리하는 엔티티(웹훅, 전사 작업 등)의 처리 상태"""
    NOT_STARTED = "NotStarted"
    RUNNING = "Running"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
