"""
TRON API 에러

HTTP 에러 응답 또는 응답 본문의 에러 필드를 표현.
"""


class TronApiError(Exception):
    """TRON Full Node API 에러
    
    HTTP 상태 코드 400 이상이거나 응답에 Error 필드가 있을 때 발생.
    """
    
    def __init__(self, status_code: int, message: str, path: str | None = None):
        self.status_code = status_code
        self.message = message
        self.path = path
        super().__init__(f"TRON API Error [{status_code}] {path or ''}: {message}")


class TronResponseError(TronApiError):
    """응답 형식 오류
    
    200 응답이지만 필수 필드가 없거나 타입이 잘못된 경우.
    """
    
    def __init__(self, message: str, path: str | None = None):
        super().__init__(status_code=200, message=message, path=path)
