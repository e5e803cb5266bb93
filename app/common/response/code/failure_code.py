from app.common.response.code.base_code import BaseCode

class FailureCode(BaseCode):
    INTERNAL_SERVER_ERROR = ("Internal server error", 500)
    SCRIPT_WRITE_FAILED = ("Failed to write k6 script", 500)
    K6_EXECUTION_FAILED = ("Failed to run k6 test", 500)
    K6_RESULT_PARSE_FAILED = ("Failed to parse k6 results", 500)
    INVALID_TEST_CONFIG = ("Invalid test configuration", 400)
    PAYLOAD_TOO_LARGE = ("Request entity too large", 413)
    TOO_MANY_REQUESTS = ("Too many requests, please try again later.", 429)
