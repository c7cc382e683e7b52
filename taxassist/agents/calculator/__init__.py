"""Deterministic Indian income-tax calculator."""
