# ua_classifier/errors.py


class ClassificationError(Exception):
    """Base error with a stable machine-readable kind"""

    kind: str = "internal_error"
    status_code: int = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    def to_dict(self) -> dict:
        return {"error": self.kind, "detail": self.detail}


class InputError(ClassificationError):
    """Missing, wrong-typed or oversized ua_string"""

    kind = "invalid_input"
    status_code = 400


class MethodNotAllowedError(InputError):
    kind = "method_not_allowed"
    status_code = 405


class ClassificationTimeout(ClassificationError):
    """Pipeline exceeded its time budget"""

    kind = "timeout"
    status_code = 504


class InternalError(ClassificationError):
    """Unexpected fault in the baseline parser or rule engine"""

    kind = "internal_error"
    status_code = 500
