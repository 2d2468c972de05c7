"""memoboard - term/definition board editing core."""
