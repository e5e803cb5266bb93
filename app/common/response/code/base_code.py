from enum import Enum


class BaseCode(Enum):
    """응답 코드 enum 의 공통 부모. 값은 (메시지, HTTP 상태코드) 튜플"""

    def message(self) -> str:
        return self.value[0]

    def status_code(self) -> int:
        return self.value[1]
