from typing import Optional

from app.common.response.code.base_code import BaseCode

class ApiException(Exception):
    def __init__(self, code: BaseCode, message: str = None, details: Optional[str] = None):
        self.code = code
        self.message = message or code.message()
        self.details = details
        super().__init__(self.code)
