from __future__ import annotations


class AtuaPJError(Exception):
    status_code = 400

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NotFoundError(AtuaPJError):
    status_code = 404


class ConflictError(AtuaPJError):
    status_code = 409
