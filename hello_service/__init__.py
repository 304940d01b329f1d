"""Minimal HTTP service exposing a health check and a configurable greeting."""
