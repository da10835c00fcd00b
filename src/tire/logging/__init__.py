"""Logging – structlog-backed request logging in curl form."""
import logging

from tire.logging.curl import RequestLogger, curl_command, dump_json
from tire.logging.factory import LoggerFactory
from tire.logging.processors import ROOT_LOGGER_NAME, get_logger
from tire.logging.renderers import CurlRenderer

# Silent until LoggerFactory.configure() attaches a handler.
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())

__all__ = [
    "CurlRenderer",
    "LoggerFactory",
    "ROOT_LOGGER_NAME",
    "RequestLogger",
    "curl_command",
    "dump_json",
    "get_logger",
]
