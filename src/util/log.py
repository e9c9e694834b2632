import sys
import traceback
from typing import Any

from uvicorn.server import logger

from util.config import config

__LEVELS = {"trace": 0, "debug": 1, "info": 2, "warn": 3, "warning": 3, "error": 4}


def _should_log(level: str) -> bool:
    if config.log_level == "local":
        return True  # local runs print everything
    current_level = __LEVELS.get(config.log_level, 2)  # default to info
    request_level = __LEVELS.get(level.lower(), 2)
    return request_level >= current_level


def _format_args(*args: Any) -> tuple[str, list[Exception]]:
    exceptions = []
    formatted_parts = []

    for arg in args:
        if isinstance(arg, Exception):
            exceptions.append(arg)
            formatted_parts.append(f"! {type(arg).__name__} (see below)")
        elif isinstance(arg, (dict, list, tuple)) or hasattr(arg, "__dict__"):
            formatted_parts.append(f"{type(arg).__name__}:\n```\n{repr(arg)}\n```")
        else:
            formatted_parts.append(str(arg))

    if not formatted_parts:
        return "", exceptions
    if len(formatted_parts) == 1:
        return formatted_parts[0], exceptions
    if exceptions:
        # the exception details follow below, so the tree stays open
        return "\n ├─ ".join(formatted_parts), exceptions
    head_lines = "\n ├─ ".join(formatted_parts[:-1])
    return f"{head_lines}\n └─ {formatted_parts[-1]}", exceptions


def _trace_of(exception: Exception) -> str | None:
    if not exception.__traceback__:
        return None
    return "".join(traceback.format_tb(exception.__traceback__)).strip()


def _print_locally(level: str, message: str, exceptions: list[Exception], with_message: bool):
    if with_message:
        print(f"[{level[0]}] {message}")
    for exception in exceptions:
        print(f" ‼  Message: {exception}", file = sys.stderr)
        if trace := _trace_of(exception):
            print(trace, file = sys.stderr)


def _send_to_server_logger(level: str, message: str, exceptions: list[Exception], with_message: bool):
    if with_message:
        match level:
            case "TRACE" | "DEBUG":
                logger.debug(message)
            case "INFO":
                logger.info(message)
            case "WARN":
                logger.warning(message)
            case "ERROR":
                logger.error(message)
    for exception in exceptions:
        logger.error(f"Message: {exception}")
        if trace := _trace_of(exception):
            logger.error(f"Details:\n └─ {trace}")


def _log_message(level: str, message: str, exceptions: list[Exception]) -> str:
    with_message = _should_log(level)
    if not with_message and not exceptions:
        return message

    if config.log_level == "local":
        _print_locally(level, message, exceptions, with_message)
        return message

    try:
        _send_to_server_logger(level, message, exceptions, with_message)
    except Exception:
        # the server logger is not always configured (e.g. in scripts)
        _print_locally(level, message, exceptions, with_message)
    return message


def t(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("TRACE", message, exceptions)


def d(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("DEBUG", message, exceptions)


def i(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("INFO", message, exceptions)


def w(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("WARN", message, exceptions)


def e(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("ERROR", message, exceptions)
