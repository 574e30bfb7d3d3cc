from typing import List, Optional


class GenerationError(RuntimeError):
    code = "GENERATION_ERROR"


class SchemaMismatchError(GenerationError):
    code = "MODEL_NOT_FOUND"

    def __init__(self, operation_id: str, model_id: str):
        self.operation_id = operation_id
        self.model_id = model_id
        super().__init__(f"Model {model_id} is not supported for operation {operation_id}")


class ValidationError(GenerationError):
    code = "VALIDATION_ERROR"

    def __init__(self, model_id: str, errors: List[str]):
        self.model_id = model_id
        self.errors = list(errors)
        super().__init__(f"Invalid parameters for {model_id}: " + "; ".join(self.errors))


class SubmissionError(GenerationError):
    code = "SUBMISSION_ERROR"


class JobTimeoutError(GenerationError):
    code = "TIMEOUT_ERROR"


class BackendJobError(GenerationError):
    code = "GENERATION_ERROR"

    def __init__(self, message: str, status: Optional[str] = None):
        self.status = status
        super().__init__(message)


class ResultShapeError(GenerationError):
    code = "RESULT_SHAPE_ERROR"


class UploadFallbackWarning(UserWarning):
    """
    Upload lên storage thất bại nhưng vẫn còn URL gốc của backend.
    Không raise, chỉ gắn vào kết quả để caller báo cho user.
    """

    def __init__(self, role: str, original_url: str, reason: str):
        self.role = role
        self.original_url = original_url
        self.reason = reason
        super().__init__(f"{role} was not stored persistently ({reason}); using {original_url}")


_MESSAGE_CODES = [
    (("api_key", "unauthorized"), "AUTH_ERROR"),
    (("quota",), "QUOTA_ERROR"),
    (("timeout",), "TIMEOUT_ERROR"),
    (("safety",), "SAFETY_ERROR"),
]


def classify_error(exc: BaseException) -> str:
    if isinstance(exc, GenerationError):
        return exc.code
    msg = str(exc).lower()
    for needles, code in _MESSAGE_CODES:
        if any(n in msg for n in needles):
            return code
    return "GENERATION_ERROR"
