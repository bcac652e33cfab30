"""Unit tests for RequestContext."""

from unittest.mock import patch

from krakenspot.core import RequestContext


class TestRequestContext:
    """Test cancellation and deadline tracking."""

    def test_fresh_context_is_not_done(self):
        ctx = RequestContext()
        assert not ctx.done()
        assert ctx.remaining() is None
        assert ctx.reason() is None

    def test_cancel(self):
        ctx = RequestContext()
        ctx.cancel()
        assert ctx.cancelled
        assert ctx.done()
        assert ctx.reason() == "context canceled"

    def test_deadline_exceeded(self):
        with patch("krakenspot.core.context.time.monotonic", return_value=100.0):
            ctx = RequestContext(timeout=5.0)
        with patch("krakenspot.core.context.time.monotonic", return_value=106.0):
            assert ctx.done()
            assert ctx.remaining() == 0.0
            assert ctx.reason() == "context deadline exceeded"

    def test_remaining_before_deadline(self):
        with patch("krakenspot.core.context.time.monotonic", return_value=100.0):
            ctx = RequestContext(timeout=5.0)
        with patch("krakenspot.core.context.time.monotonic", return_value=102.0):
            assert ctx.remaining() == 3.0
            assert not ctx.done()
