"""Evaluation engine for flow: dispatch, application and special forms."""
