"""Tests for the @debounce decorator."""

import pytest

from zep.core import Zep
from zep.decorator import debounce


class TestDebounceDecorator:
    def test_without_parentheses(self):
        @debounce
        def handler(value):
            pass

        assert hasattr(handler, "zep")
        assert hasattr(handler, "cancel")
        assert hasattr(handler, "abort")
        assert hasattr(handler, "write_stats")

    def test_with_parentheses(self):
        @debounce(period=0.5, cancel_skips_run=True)
        def handler(value):
            pass

        assert isinstance(handler.zep, Zep)  # type: ignore[attr-defined]
        assert handler.zep.period == 0.5  # type: ignore[attr-defined]
        assert handler.zep.config.cancel_skips_run is True  # type: ignore[attr-defined]

    def test_async_function_raises(self):
        with pytest.raises(TypeError, match="only supports regular functions"):

            @debounce
            async def handler(value):
                pass

    def test_bare_decorator_is_immediate(self):
        seen = []

        @debounce
        def handler(value):
            seen.append(value)

        handler(1)
        handler(2)
        assert handler.zep.period is None  # type: ignore[attr-defined]
        assert seen == [1, 2]

    def test_immediate_calls_through(self):
        seen = []

        @debounce
        def handler(value, *, scale=1):
            seen.append(value * scale)

        result = handler(2, scale=3)
        assert seen == [6]
        assert result is handler.zep  # type: ignore[attr-defined]

    async def test_debounced_calls_use_latest_arguments(self):
        seen = []

        @debounce(period=10.0)
        def handler(value):
            seen.append(value)

        handler("a")
        handler("ab")
        handler("abc")
        handler.zep._tick()  # type: ignore[attr-defined]
        assert seen == ["abc"]
        assert handler.zep.invocation_count == 3  # type: ignore[attr-defined]

    async def test_abort_attribute(self):
        @debounce(period=10.0)
        def handler(value):
            pass

        handler(1)
        handler.abort()  # type: ignore[attr-defined]
        handler(2)
        assert handler.zep.was_aborted is True  # type: ignore[attr-defined]

    def test_preserves_function_name(self):
        @debounce(period=1.0)
        def my_handler(value):
            pass

        assert my_handler.__name__ == "my_handler"
