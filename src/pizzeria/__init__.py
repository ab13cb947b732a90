"""Fluent, self-typed builders for immutable pizzas."""
