from __future__ import annotations


class PortfolioError(Exception):
    def __init__(self, message: str, code: str) -> None:
        super().__init__(message)
        self.code = code


class ValidationError(PortfolioError):
    pass


class ConflictError(PortfolioError):
    pass
