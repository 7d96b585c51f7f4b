# app/errors.py
from fastapi import Request
from fastapi.responses import PlainTextResponse

class ReceiptError(Exception):
    status_code = 400
    message = "Receipt error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        if message:
            self.message = message

class InvalidReceiptFormat(ReceiptError):
    status_code = 400
    message = "Invalid receipt format"

class InvalidReceiptData(ReceiptError):
    status_code = 400
    message = "Invalid receipt data"

class ReceiptNotFound(ReceiptError):
    status_code = 404
    message = "Receipt not found"

async def receipt_error_handler(request: Request, exc: ReceiptError) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=exc.status_code)
