"""Shared configuration and tracing helpers."""
