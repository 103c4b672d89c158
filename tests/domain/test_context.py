from __future__ import annotations

import inspect
import os

import pytest

from lib_color_log.domain.context import (
    ANONYMOUS,
    CallerContext,
    Frame,
    capture_frames,
    module_name,
    resolve_context,
)
from lib_color_log.errors import ConfigurationError, ContextResolutionError


def _three_frames() -> list[Frame]:
    return [
        Frame("/srv/app/bar.js", "foo", 12),
        Frame("/srv/app/lib/helpers.py", None, 40),
        Frame("/srv/app/main.py", "run", 3),
    ]


def test_resolve_depth_zero_returns_immediate_caller() -> None:
    context = resolve_context(_three_frames(), 0, show_extension=False)
    assert context == CallerContext(module="bar", function="foo", line=12)


def test_resolve_keeps_extension_by_default() -> None:
    assert resolve_context(_three_frames(), 2).module == "main.py"


def test_missing_function_name_becomes_anonymous() -> None:
    assert resolve_context(_three_frames(), 1).function == ANONYMOUS


def test_out_of_range_depth_raises() -> None:
    with pytest.raises(ContextResolutionError, match="out of range"):
        resolve_context(_three_frames(), 50)


def test_depth_equal_to_frame_count_raises() -> None:
    with pytest.raises(ContextResolutionError):
        resolve_context(_three_frames(), 3)


def test_context_resolution_error_is_a_lookup_error() -> None:
    with pytest.raises(LookupError):
        resolve_context([], 0)


def test_negative_depth_is_a_configuration_error() -> None:
    with pytest.raises(ConfigurationError):
        resolve_context(_three_frames(), -1)


@pytest.mark.parametrize(
    "source, show_extension, expected",
    [
        ("/a/b/handlers.py", True, "handlers.py"),
        ("/a/b/handlers.py", False, "handlers"),
        ("/a/b/archive.tar.gz", False, "archive"),
        ("/a/b/Makefile", False, "Makefile"),
    ],
)
def test_module_name(source: str, show_extension: bool, expected: str) -> None:
    assert module_name(source, show_extension=show_extension) == expected


def test_capture_frames_starts_at_the_caller() -> None:
    line = inspect.currentframe().f_lineno + 1
    frames = capture_frames()
    first = frames[0]
    assert first.function == "test_capture_frames_starts_at_the_caller"
    assert first.line == line
    assert module_name(first.source, show_extension=False) == "test_context"


def test_capture_frames_marks_lambdas_anonymous() -> None:
    frames = (lambda: capture_frames())()
    assert frames[0].function is None
    assert frames[1].function == "test_capture_frames_marks_lambdas_anonymous"


def test_capture_frames_skips_given_sources() -> None:
    frames = capture_frames(skip_sources=(__file__,))
    assert os.path.normcase(frames[0].source) != os.path.normcase(__file__)


def test_resolve_on_live_stack_depth_zero() -> None:
    context = resolve_context(capture_frames(), 0, show_extension=False)
    assert context.module == "test_context"
    assert context.function == "test_resolve_on_live_stack_depth_zero"
