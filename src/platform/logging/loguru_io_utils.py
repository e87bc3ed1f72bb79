from inspect import getfile, getsourcelines
from os.path import basename
from time import time
from typing import Any, Callable

from src.platform.logging.loguru_io_config import (
    MASK,
    SENSITIVE_REPR_PATTERN,
    SENSITIVE_KEYWORDS,
    call_depth_var,
    chain_start_time_var,
)


def get_chain_start_time() -> float:
    if not (start_time := chain_start_time_var.get()):
        start_time = time()
        chain_start_time_var.set(start_time)
    return start_time


def build_call_target_func_path(func: Callable[..., Any]) -> str:
    try:
        lineno = getsourcelines(func)[1]
    except (OSError, TypeError):
        lineno = 0
    return f'{basename(getfile(getattr(func, "__func__", func)))}::{func.__qualname__}:{lineno}'


def enter_call() -> None:
    call_depth_var.set(call_depth_var.get() + 1)


def reset_call_depth() -> None:
    layer = call_depth_var.get() - 1
    call_depth_var.set(layer)
    if layer <= 0:
        call_depth_var.set(0)
        chain_start_time_var.set(0)


def should_mask_keyword(keyword: Any, value: Any) -> Any:
    return MASK if keyword in SENSITIVE_KEYWORDS else value


def truncate_content(data: Any, limit: int = 300) -> Any:
    text = str(data)
    if len(text) <= limit:
        return data
    return f'{text[:limit]}... <{len(text) - limit} more chars>'


def mask_sensitive(data: Any) -> Any:
    """Mask sensitive attrs fields inside a repr, e.g. User(password='x') -> password='********'"""
    try:
        data_str = str(data)
        new_data_str = SENSITIVE_REPR_PATTERN.sub(rf"\1='{MASK}'", data_str)
        return data if data_str == new_data_str else new_data_str
    except Exception:
        return data
