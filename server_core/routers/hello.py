from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from ..config import GREETING

router = APIRouter(tags=["hello"])

# both greeting paths answer whatever the method
ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def request_logger(request: Request) -> logging.Logger:
    return request.app.state.logger


@router.api_route("/", methods=ANY_METHOD, response_class=PlainTextResponse)
def hello_root(log: logging.Logger = Depends(request_logger)):
    log.info("Inside Hello World")
    return GREETING


@router.api_route("/index.html", methods=ANY_METHOD, response_class=PlainTextResponse)
def hello_index():
    return GREETING
