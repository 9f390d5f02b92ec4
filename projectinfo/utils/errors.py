# /projectinfo/utils/errors.py
# raised when a request cannot be answered; the status code and message go straight to the client.
from dataclasses import dataclass


@dataclass
class AppError(Exception):
    status_code: int
    message: str


def bad_request(msg: str) -> AppError:
    return AppError(400, msg)


def not_found(msg: str) -> AppError:
    return AppError(404, msg)


def conflict(msg: str) -> AppError:
    return AppError(409, msg)
